import logging
import sys

_LOG_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_level(level: str | int) -> int:
    """Turn a LOG_LEVEL value ("info", "WARNING", 10) into a logging level."""
    if isinstance(level, int):
        if logging.getLevelName(level).startswith("Level "):
            raise ValueError(f"Unknown log level: {level}")
        return level
    name = str(level).strip().upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r}; expected one of {', '.join(LOG_LEVELS)}")
    return getattr(logging, name)


def setup_logging(level: str | int = "INFO") -> int:
    """
    Configure the root logger once and return the numeric level in use.
    """
    numeric = resolve_level(level)
    logging.basicConfig(
        level=numeric,
        format=_LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # served through uvicorn, keep its loggers in step with the app
    for name in ("uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(numeric)
    # pymongo heartbeats are DEBUG noise
    logging.getLogger("pymongo").setLevel(max(numeric, logging.INFO))
    return numeric
