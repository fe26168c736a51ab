import logging
import os
import sys

LOG_LEVEL_ENV = "SWORDMERGE_LOG_LEVEL"


def configure_logging(level: int = logging.INFO) -> None:
    """Configure the root logger for console output.

    Respects the SWORDMERGE_LOG_LEVEL env var if present.
    """
    level_name = os.getenv(LOG_LEVEL_ENV)
    if level_name:
        level = getattr(logging, level_name.upper(), level)

    handler = logging.StreamHandler(stream=sys.stdout)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Remove existing handlers to avoid duplicates in repeated test runs
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
