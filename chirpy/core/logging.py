import logging
import sys

from loguru import logger

_ROUTED_LOGGERS = ('uvicorn', 'uvicorn.access', 'uvicorn.error', 'sqlalchemy.engine')


class _InterceptHandler(logging.Handler):
    """Forward stdlib log records (uvicorn, SQLAlchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1
        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: str, serialize: bool = False) -> None:
    logger.remove()
    logger.add(
        sys.stdout,
        level=level,
        serialize=serialize,
        enqueue=True,
        backtrace=True,
        diagnose=False,
    )
    logging.root.handlers = [_InterceptHandler()]
    logging.root.setLevel(level)
    for name in _ROUTED_LOGGERS:
        routed = logging.getLogger(name)
        routed.handlers = []
        routed.propagate = True
