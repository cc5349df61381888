"""Per-format output classes for check plugins.

A plugin picks the class matching its collector and calls ``output`` with
positional arguments in the order the format documents, e.g.
``GraphiteOutput().output("load.avg", 1.23)``.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, TextIO

from metric_output import config
from metric_output.dispatcher import FORMATS, to_generic
from metric_output.models.metric import MetricRecord
from metric_output.renderers.dogstatsd import DogstatsdArgs, DogstatsdRenderer
from metric_output.renderers.graphite import GraphiteArgs, GraphiteRenderer
from metric_output.renderers.influxdb import InfluxdbArgs, InfluxdbRenderer
from metric_output.renderers.json_object import JSONRenderer
from metric_output.renderers.statsd import StatsdArgs, StatsdRenderer


class BaseOutput(ABC):
    """Base class of every plugin output"""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    @abstractmethod
    def output(self, *args: Any) -> str | None:
        ...


class JSONOutput(BaseOutput):
    def output(self, obj: Any = None) -> str | None:
        return JSONRenderer().render(obj, self.stream)


class GraphiteOutput(BaseOutput):
    """``output(path, value, timestamp=None)``"""

    def output(self, *args: Any) -> str | None:
        return GraphiteRenderer().render(GraphiteArgs.from_args(args), self.stream)


class StatsdOutput(BaseOutput):
    """``output(name, value, type=None)``"""

    def output(self, *args: Any) -> str | None:
        return StatsdRenderer().render(StatsdArgs.from_args(args), self.stream)


class DogstatsdOutput(BaseOutput):
    """``output(name, value, type=None, tags=None)``"""

    def output(self, *args: Any) -> str | None:
        return DogstatsdRenderer().render(DogstatsdArgs.from_args(args), self.stream)


class InfluxdbOutput(BaseOutput):
    """``output(measurement, fields, tags=None, timestamp=None)``"""

    def output(self, *args: Any) -> str | None:
        return InfluxdbRenderer().render(InfluxdbArgs.from_args(args), self.stream)


class GenericOutput(BaseOutput):
    """Output whose format comes from configuration (``METRIC_FORMAT``)."""

    def __init__(
        self, metric_format: str | None = None, stream: TextIO | None = None
    ) -> None:
        super().__init__(stream)
        self.metric_format = metric_format or config.METRIC_FORMAT
        if self.metric_format not in FORMATS:
            raise ValueError(
                f"metric format must be one of {', '.join(FORMATS)}, "
                f"got {self.metric_format!r}"
            )

    def output(
        self, metric: MetricRecord | Mapping[str, Any] | None = None
    ) -> str | None:
        return to_generic(self.metric_format, metric, self.stream)
