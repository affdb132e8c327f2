"""Unit tests for log level selection."""

import logging

from authn.config import Settings
from authn.util.logging import log_level_for


def test_debug_wins_over_environment():
    assert log_level_for(Settings(environment="production", debug=True)) == logging.DEBUG


def test_production_logs_warnings_only():
    assert log_level_for(Settings(environment="production")) == logging.WARNING


def test_development_logs_info():
    assert log_level_for(Settings(environment="development")) == logging.INFO
