"""Metric output - Entrypoint

Reads one metric record as a JSON object from stdin and prints it in the
format selected by ``METRIC_FORMAT``.
"""

import json
import logging
import sys

from metric_output.config import LOG_LEVEL, METRIC_FORMAT
from metric_output.outputs import GenericOutput

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    try:
        output = GenericOutput(METRIC_FORMAT)
    except ValueError as exc:
        logger.error("Invalid metric output configuration: %s", exc)
        return

    try:
        record = json.loads(sys.stdin.read())
        output.output(record)
    except json.JSONDecodeError as exc:
        logger.error("Metric record is not valid JSON: %s", exc)
    except ValueError as exc:
        logger.error("Invalid metric record: %s", exc)


if __name__ == "__main__":
    main()
