"""Format-agnostic metric record"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field, fields
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MetricRecord:
    """One metric event, independent of the wire format it ends up in.

    ``metric_name`` and ``value`` feed every format; the remaining optional
    fields override the name, type or payload for a single format.
    """

    metric_name: str | None = None
    value: str | int | float | None = None
    tags: tuple[tuple[str, str], ...] = field(default_factory=tuple)
    timestamp: int | None = None

    graphite_metric_path: str | None = None
    statsd_metric_name: str | None = None
    statsd_type: str | None = None
    dogstatsd_metric_name: str | None = None
    dogstatsd_type: str | None = None
    influxdb_measurement: str | None = None
    influxdb_fields: str | int | None = None
    json_obj: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", normalize_tags(self.tags))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "MetricRecord":
        """Build a record from a plain mapping such as decoded JSON."""
        if not isinstance(data, Mapping):
            raise ValueError(
                f"metric record must be a mapping, got {type(data).__name__}"
            )
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.debug("Ignoring unknown metric field %r", key)
                continue
            kwargs[key] = value
        return cls(**kwargs)

    def tag_string(self, pair_separator: str) -> str:
        return ",".join(f"{k}{pair_separator}{v}" for k, v in self.tags)


def normalize_tags(tags: Any) -> tuple[tuple[str, str], ...]:
    """Accept tags as a mapping or as a sequence of (key, value) pairs."""
    if tags is None:
        return ()
    if isinstance(tags, Mapping):
        return tuple((str(k), str(v)) for k, v in tags.items())
    if isinstance(tags, (str, bytes)) or not isinstance(tags, Iterable):
        raise ValueError(f"tags must be a mapping or a sequence of pairs, got {tags!r}")

    pairs: list[tuple[str, str]] = []
    for entry in tags:
        if (
            isinstance(entry, (str, bytes))
            or not isinstance(entry, Sequence)
            or len(entry) != 2
        ):
            raise ValueError(f"tag must be a (key, value) pair, got {entry!r}")
        key, value = entry
        pairs.append((str(key), str(value)))
    return tuple(pairs)
