import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=(level or "INFO").upper(),
        stream=sys.stdout,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
