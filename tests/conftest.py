"""Test configuration for pytest."""

import logging
import os
import pytest


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    os.environ['LOGSHEET_ANALYTICS_LOG_LEVEL'] = 'WARNING'

    logging.getLogger().setLevel(logging.WARNING)

    # Fetch failures and skipped records are expected in several tests
    for logger_name in ['logsheet_analytics.sources.provider', 'logsheet_analytics.live.coordinator']:
        logging.getLogger(logger_name).setLevel(logging.ERROR)


@pytest.fixture(autouse=True)
def clear_settings_env(monkeypatch):
    """Keep LOGSHEET_ANALYTICS_* overrides from leaking into tests."""
    for name in ['LOGSHEET_ANALYTICS_TOP_N', 'LOGSHEET_ANALYTICS_UPDATE_CHANNEL', 'LOGSHEET_ANALYTICS_REFRESH_TYPES']:
        monkeypatch.delenv(name, raising=False)
