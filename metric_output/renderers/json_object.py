"""Structured-object output: one JSON document per metric"""

import json
from collections.abc import Mapping
from typing import Any

from metric_output.models.field import Field, Text, field_of
from metric_output.renderers.base import BaseRenderer, now


class JSONRenderer(BaseRenderer):
    """Serialises a metric mapping, injecting ``timestamp`` when unset.

    Strings and errors are printed verbatim; any other shape is dropped.
    """

    name = "json"

    def format(self, args: Mapping[str, Any] | Any = None) -> str | None:
        if isinstance(args, Mapping):
            payload = dict(args)
            timestamp = payload.get("timestamp")
            if timestamp is None or timestamp is False:
                payload["timestamp"] = now()
            return json.dumps(payload, separators=(",", ":"), default=str)

        if isinstance(args, (str, BaseException, Field)):
            value = field_of(args)
            if isinstance(value, Text) or value.is_error:
                return str(value)
        return None
