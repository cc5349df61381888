"""DogStatsD datagram format: ``name:value|type|#tags``"""

from collections.abc import Sequence
from dataclasses import dataclass

from metric_output.models.field import MISSING, Field, field_of
from metric_output.renderers.base import BaseRenderer
from metric_output.renderers.statsd import DEFAULT_TYPE


@dataclass(frozen=True)
class DogstatsdArgs:
    """``tags`` is a pre-joined ``tag1:value1,tag2:value2`` string.

    ``type`` additionally accepts ``h`` for histograms.
    """

    name: Field = MISSING
    value: Field = MISSING
    type: Field = MISSING
    tags: Field = MISSING

    def __post_init__(self) -> None:
        for name in ("name", "value", "type", "tags"):
            object.__setattr__(self, name, field_of(getattr(self, name)))

    @classmethod
    def from_args(cls, args: Sequence) -> "DogstatsdArgs | None":
        if not args:
            return None
        return cls(*args[:4])


class DogstatsdRenderer(BaseRenderer):
    name = "dogstatsd"

    def format(self, args: DogstatsdArgs | None) -> str | None:
        if args is None:
            return None
        message = self.passthrough(args.name, args.value)
        if message is not None:
            return message

        metric_type = DEFAULT_TYPE if args.type.is_missing else str(args.type)
        segments = [f"{args.name}:{args.value}", metric_type]
        # an empty tag string counts as no tags
        if str(args.tags):
            segments.append(f"#{args.tags}")
        return "|".join(segments)
