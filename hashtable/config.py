import os

LOGZIO_API_KEY = os.getenv("logzIO_api_key")

IS_TESTING = os.getenv("TESTING", "false").lower() == "true"

LOG_LEVEL = os.getenv("HASHTABLE_LOG_LEVEL", "INFO").upper()

TEST_LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(levelname)s - %(message)s',
        }
    },
    'handlers': {
        'null': {
            'class': 'logging.NullHandler',
            'level': 'DEBUG'
        }
    },
    'loggers': {
        'hashtable': {
            'level': 'DEBUG',
            'handlers': ['null'],  # keep test output quiet
            'propagate': False
        }
    }
}

CONSOLE_LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s: %(message)s',
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': LOG_LEVEL,
            'formatter': 'simple',
            'stream': 'ext://sys.stdout'
        }
    },
    'loggers': {
        'hashtable': {
            'level': LOG_LEVEL,
            'handlers': ['console'],
            'propagate': False
        }
    }
}

# logz.io shipping, used only when an API key is present
PRODUCTION_LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'logzioFormat': {
            'format': '%(message)s',
        }
    },
    'handlers': {
        'logzio': {
            'class': 'logzio.handler.LogzioHandler',
            'level': 'INFO',
            'formatter': 'logzioFormat',
            'token': LOGZIO_API_KEY,
            'logzio_type': 'hashtable-logs',
            'logs_drain_timeout': 5,
            'url': 'https://listener-eu.logz.io:8071',
            'retries_no': 4,
            'retry_timeout': 2,
        }
    },
    'loggers': {
        'hashtable': {
            'level': 'DEBUG',
            'handlers': ['logzio'],
            'propagate': False
        }
    }
}


def select_logging(is_testing: bool = IS_TESTING, api_key: str = LOGZIO_API_KEY) -> dict:
    if is_testing:
        return TEST_LOGGING
    if api_key:
        return PRODUCTION_LOGGING
    return CONSOLE_LOGGING


LOGGING = select_logging()
