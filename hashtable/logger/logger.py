import json
import logging
import logging.config

from hashtable.logger.log_types import LogEvent

logger = logging.getLogger('hashtable')


def configure_logging(config: dict = None):
    """Apply a dictConfig; defaults to the environment-selected hashtable.config.LOGGING"""
    if config is None:
        from hashtable.config import LOGGING
        config = LOGGING
    logging.config.dictConfig(config)
    return logger


def log_table_event(event: LogEvent, **fields):
    """Log a table lifecycle event as a JSON line"""
    log_data = {"event": event}
    log_data.update(fields)
    logger.info(json.dumps(log_data))
