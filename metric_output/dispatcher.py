"""Generic metric output: picks a format and resolves its arguments.

Per-format overrides on the record win over the shared fields:

=========  =======================  ===================================
format     name                     extra arguments
=========  =======================  ===================================
json       json_obj                 built from name/value/timestamp/tags
graphite   graphite_metric_path     value, timestamp
statsd     statsd_metric_name       value, statsd_type
dogstatsd  dogstatsd_metric_name,   value, dogstatsd_type or statsd_type,
           statsd_metric_name       ``k:v`` tags
influxdb   influxdb_measurement     influxdb_fields or value, ``k=v`` tags,
                                    timestamp
=========  =======================  ===================================

Every chain falls back to ``metric_name`` last.
"""

import logging
from collections.abc import Mapping
from typing import Any, TextIO

from metric_output.models.metric import MetricRecord
from metric_output.renderers.dogstatsd import DogstatsdArgs, DogstatsdRenderer
from metric_output.renderers.graphite import GraphiteArgs, GraphiteRenderer
from metric_output.renderers.influxdb import InfluxdbArgs, InfluxdbRenderer
from metric_output.renderers.json_object import JSONRenderer
from metric_output.renderers.statsd import StatsdArgs, StatsdRenderer

logger = logging.getLogger(__name__)

FORMATS: tuple[str, ...] = ("json", "graphite", "statsd", "dogstatsd", "influxdb")
DEFAULT_FORMAT = "graphite"


def first_present(*candidates: Any) -> Any:
    """Return the first candidate that is not None."""
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None


# ---------------------------------------------------------------------------
# Per-format argument resolution
# ---------------------------------------------------------------------------


def json_args(metric: MetricRecord) -> Mapping[str, Any]:
    return first_present(
        metric.json_obj,
        {
            "metric_name": metric.metric_name,
            "value": metric.value,
            "timestamp": metric.timestamp,
            "tags": [list(pair) for pair in metric.tags],
        },
    )


def graphite_args(metric: MetricRecord) -> GraphiteArgs:
    return GraphiteArgs(
        first_present(metric.graphite_metric_path, metric.metric_name),
        metric.value,
        metric.timestamp,
    )


def statsd_args(metric: MetricRecord) -> StatsdArgs:
    return StatsdArgs(
        first_present(metric.statsd_metric_name, metric.metric_name),
        metric.value,
        metric.statsd_type,
    )


def dogstatsd_args(metric: MetricRecord) -> DogstatsdArgs:
    return DogstatsdArgs(
        first_present(
            metric.dogstatsd_metric_name,
            metric.statsd_metric_name,
            metric.metric_name,
        ),
        metric.value,
        first_present(metric.dogstatsd_type, metric.statsd_type),
        metric.tag_string(":"),
    )


def influxdb_args(metric: MetricRecord) -> InfluxdbArgs:
    return InfluxdbArgs(
        first_present(metric.influxdb_measurement, metric.metric_name),
        first_present(metric.influxdb_fields, metric.value),
        metric.tag_string("="),
        metric.timestamp,
    )


_DISPATCH = {
    "json": (JSONRenderer(), json_args),
    "graphite": (GraphiteRenderer(), graphite_args),
    "statsd": (StatsdRenderer(), statsd_args),
    "dogstatsd": (DogstatsdRenderer(), dogstatsd_args),
    "influxdb": (InfluxdbRenderer(), influxdb_args),
}


def to_generic(
    metric_format: str = DEFAULT_FORMAT,
    metric: MetricRecord | Mapping[str, Any] | None = None,
    stream: TextIO | None = None,
) -> str | None:
    """Render ``metric`` in ``metric_format`` and return the emitted line.

    An unrecognised format writes nothing.
    """
    entry = _DISPATCH.get(metric_format)
    if entry is None:
        logger.warning("Unknown metric format %r, nothing emitted", metric_format)
        return None

    if metric is None:
        metric = MetricRecord()
    elif not isinstance(metric, MetricRecord):
        metric = MetricRecord.from_mapping(metric)

    renderer, resolve = entry
    return renderer.render(resolve(metric), stream)
