import logging, json, sys, time, os

LOG_LEVEL_ENV = "KEYSERVER_LOG_LEVEL"
LOG_FILE_ENV = "KEYSERVER_LOG_FILE"


def resolve_level(level=None) -> int:
    """Map a level name or number to a logging level; unknown names fall back to INFO."""
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def get_logger(name="keyserver", level=None, to_file=None):
    """
    Structured JSON logger shared by all keyserver components.

    Every line is one JSON object with ts/level/name/msg, timestamps in UTC.
    Level and log file default to KEYSERVER_LOG_LEVEL and KEYSERVER_LOG_FILE.
    Records still propagate, so host applications and pytest's caplog see them.
    """
    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(level))

    if not logger.handlers:
        formatter = logging.Formatter(
            fmt=json.dumps({
                "ts": "%(asctime)s",
                "level": "%(levelname)s",
                "name": "%(name)s",
                "msg": "%(message)s"
            }),
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
        formatter.converter = time.gmtime
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        to_file = to_file or os.getenv(LOG_FILE_ENV)
        if to_file:
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(to_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
