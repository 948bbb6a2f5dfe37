import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional, Sequence

from gym_bridge.config import config


LOGGER_NAMES = ('gym_bridge', 'environments')

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def resolve_level(name) -> int:
    """Translate a level name such as 'info' into its numeric value.

    Raises:
        ValueError: if the name is not a registered logging level
    """
    if isinstance(name, int):
        return name
    value = logging.getLevelName(str(name).upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {name!r}")
    return value


def configure_logging(log_dir: Optional[str] = None,
                      level: Optional[str] = None,
                      console: bool = True,
                      logger_names: Sequence[str] = LOGGER_NAMES) -> Path:
    """Attach rotating file (and console) handlers to the project loggers.

    Settings not passed explicitly come from the 'logging' config section.
    Calling this again replaces the handlers instead of duplicating them.

    Args:
        log_dir: Directory to store log files
        level: Level name, e.g. 'INFO' or 'DEBUG'
        console: Also log to stderr
        logger_names: Loggers to configure

    Returns:
        Path of the log file
    """
    level = resolve_level(level or config.get('logging.level'))
    log_dir = Path(log_dir or config.get('logging.log_dir'))
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / config.get('logging.file')
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # File handler with rotation (10 MB max, keep 5 backups by default)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=config.get('logging.max_bytes'),
        backupCount=config.get('logging.backup_count')
    )
    handlers = [file_handler]
    if console:
        handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    for name in logger_names:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Remove existing handlers to avoid duplicates
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        for handler in handlers:
            logger.addHandler(handler)

    return log_file
