"""Renderer abstract base class"""

import logging
import sys
import time
from abc import ABC, abstractmethod
from typing import Any, TextIO

from metric_output.models.field import Field

logger = logging.getLogger(__name__)


def now() -> int:
    """Current Unix time in whole seconds."""
    return int(time.time())


class BaseRenderer(ABC):
    """Base class for every output format.

    Subclasses implement ``format``, which turns renderer arguments into a
    single line of text, or ``None`` when nothing should be emitted.
    ``render`` writes that line to the output stream.
    """

    name: str = ""

    @abstractmethod
    def format(self, args: Any) -> str | None:
        """Return the formatted line without a trailing newline"""
        ...

    def render(self, args: Any, stream: TextIO | None = None) -> str | None:
        line = self.format(args)
        if line is None:
            return None
        print(line, file=stream if stream is not None else sys.stdout)
        return line

    def passthrough(self, head: Field, body: Field) -> str | None:
        """Return the error pass-through text, or None for a normal emission.

        An error as the first argument, or a missing second argument, turns
        the first argument into an already formatted message.
        """
        if head.is_error or body.is_missing:
            logger.debug("%s: passing through %r", self.name, head)
            return str(head)
        return None
