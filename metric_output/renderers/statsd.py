"""StatsD datagram format: ``name:value|type``"""

from collections.abc import Sequence
from dataclasses import dataclass

from metric_output.models.field import MISSING, Field, field_of
from metric_output.renderers.base import BaseRenderer

DEFAULT_TYPE = "kv"


@dataclass(frozen=True)
class StatsdArgs:
    """``type`` is ``c`` counter, ``g`` gauge, ``ms`` timer or ``s`` set."""

    name: Field = MISSING
    value: Field = MISSING
    type: Field = MISSING

    def __post_init__(self) -> None:
        for name in ("name", "value", "type"):
            object.__setattr__(self, name, field_of(getattr(self, name)))

    @classmethod
    def from_args(cls, args: Sequence) -> "StatsdArgs | None":
        if not args:
            return None
        return cls(*args[:3])


class StatsdRenderer(BaseRenderer):
    name = "statsd"

    def format(self, args: StatsdArgs | None) -> str | None:
        if args is None:
            return None
        message = self.passthrough(args.name, args.value)
        if message is not None:
            return message

        metric_type = DEFAULT_TYPE if args.type.is_missing else str(args.type)
        return f"{args.name}:{args.value}|{metric_type}"
