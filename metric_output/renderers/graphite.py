"""Graphite plaintext protocol: ``path value timestamp``"""

from collections.abc import Sequence
from dataclasses import dataclass

from metric_output.models.field import MISSING, Field, field_of
from metric_output.renderers.base import BaseRenderer, now


@dataclass(frozen=True)
class GraphiteArgs:
    path: Field = MISSING
    value: Field = MISSING
    timestamp: Field = MISSING

    def __post_init__(self) -> None:
        for name in ("path", "value", "timestamp"):
            object.__setattr__(self, name, field_of(getattr(self, name)))

    @classmethod
    def from_args(cls, args: Sequence) -> "GraphiteArgs | None":
        if not args:
            return None
        return cls(*args[:3])


class GraphiteRenderer(BaseRenderer):
    name = "graphite"

    def format(self, args: GraphiteArgs | None) -> str | None:
        if args is None:
            return None
        message = self.passthrough(args.path, args.value)
        if message is not None:
            return message

        timestamp = str(now()) if args.timestamp.is_missing else str(args.timestamp)
        return " ".join([str(args.path), str(args.value), timestamp])
