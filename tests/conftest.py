"""Pytest configuration and fixtures."""
import pytest
from click.testing import CliRunner

from strongpass import Validator


@pytest.fixture
def validator():
    """Empty validator with no rules."""
    return Validator()


@pytest.fixture
def standard_validator():
    """Validator carrying the standard rule bundle."""
    return Validator().with_standard_rules()


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def clean_env(monkeypatch):
    """Strip STRONGPASS_* variables so config tests see only what they set."""
    import os

    for key in list(os.environ):
        if key.startswith("STRONGPASS_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch
