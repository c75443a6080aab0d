import logging

LOGGER_NAME = "Pathstar"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a single stream handler to the engine's package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)
    return logger
