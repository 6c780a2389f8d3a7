import os
import logging
import threading
from logging.handlers import RotatingFileHandler
from typing import Optional, TYPE_CHECKING

import structlog

# The config package imports this module while it loads
if TYPE_CHECKING:
    from composition_idioms.config.schemas import LoggingConfig

_configured = False
_setup_lock = threading.RLock()


def _shared_processors():
    return [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def setup_logging(config: Optional["LoggingConfig"] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the library using structlog.

    Args:
        config: Logging configuration. If None, defaults are used with
                IDIOMS_LOG_LEVEL / IDIOMS_LOG_FORMAT applied on top.
    Returns:
        Configured structlog logger instance.
    """
    global _configured
    from composition_idioms.config.schemas import LoggingConfig

    if config is None:
        config = LoggingConfig(
            level=os.environ.get("IDIOMS_LOG_LEVEL", "INFO"),
            format=os.environ.get("IDIOMS_LOG_FORMAT", "console"),
        )

    if config.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handlers = []
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if config.file_path:
        log_path = os.path.expandvars(config.file_path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # Only the package logger is touched; the host application owns the root
    package_logger = logging.getLogger("composition_idioms")
    package_logger.setLevel(getattr(logging, config.level))
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        package_logger.addHandler(handler)
    package_logger.propagate = False

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _configured = True

    logger = structlog.get_logger("composition_idioms")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_format=config.format,
        log_file=config.file_path,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, configuring defaults on first use."""
    if not _configured:
        with _setup_lock:
            if not _configured:
                setup_logging()
    return structlog.get_logger(name)
