"""InfluxDB line protocol: ``measurement[,tags] fields timestamp``"""

from collections.abc import Sequence
from dataclasses import dataclass

from metric_output.models.field import MISSING, Field, Number, field_of
from metric_output.renderers.base import BaseRenderer, now


@dataclass(frozen=True)
class InfluxdbArgs:
    """``fields`` is an integer or a ``field1=value1,field2=value2`` string;
    ``tags`` is a ``tag1=value1,tag2=value2`` string."""

    measurement: Field = MISSING
    fields: Field = MISSING
    tags: Field = MISSING
    timestamp: Field = MISSING

    def __post_init__(self) -> None:
        for name in ("measurement", "fields", "tags", "timestamp"):
            object.__setattr__(self, name, field_of(getattr(self, name)))

    @classmethod
    def from_args(cls, args: Sequence) -> "InfluxdbArgs | None":
        if not args:
            return None
        return cls(*args[:4])


class InfluxdbRenderer(BaseRenderer):
    name = "influxdb"

    def format(self, args: InfluxdbArgs | None) -> str | None:
        if args is None:
            return None
        message = self.passthrough(args.measurement, args.fields)
        if message is not None:
            return message

        if isinstance(args.fields, Number) and args.fields.is_integer:
            fields = f"value={args.fields}"
        else:
            fields = str(args.fields)

        measurement = str(args.measurement)
        if str(args.tags):
            measurement = f"{measurement},{args.tags}"

        timestamp = str(now()) if args.timestamp.is_missing else str(args.timestamp)
        return " ".join([measurement, fields, timestamp])
