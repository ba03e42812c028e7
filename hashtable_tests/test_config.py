from hashtable.config import (
    CONSOLE_LOGGING,
    LOGGING,
    PRODUCTION_LOGGING,
    TEST_LOGGING,
    select_logging,
)


def test_testing_env_selects_test_logging():
    # conftest sets TESTING=true before the config module is imported
    assert LOGGING is TEST_LOGGING


def test_select_logging_testing_wins():
    assert select_logging(is_testing=True, api_key="token") is TEST_LOGGING


def test_select_logging_with_api_key():
    assert select_logging(is_testing=False, api_key="token") is PRODUCTION_LOGGING


def test_select_logging_without_api_key():
    assert select_logging(is_testing=False, api_key=None) is CONSOLE_LOGGING


def test_production_logging_routes_to_logzio():
    handler = PRODUCTION_LOGGING['handlers']['logzio']
    assert handler['class'] == 'logzio.handler.LogzioHandler'
    assert PRODUCTION_LOGGING['loggers']['hashtable']['handlers'] == ['logzio']


def test_all_configs_target_package_logger():
    for config in (TEST_LOGGING, CONSOLE_LOGGING, PRODUCTION_LOGGING):
        assert 'hashtable' in config['loggers']
        assert config['version'] == 1
