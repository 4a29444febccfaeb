"""Settings and logging setup tests."""

import logging

import pytest
from pydantic import ValidationError

from app.config import Settings
from app.core.logging import setup_logging


def test_defaults(monkeypatch):
    monkeypatch.delenv("ELASTICSEARCH_ENABLED", raising=False)
    settings = Settings(_env_file=None)
    assert settings.service_name == "ecom-search-engine"
    assert settings.catalog_variant == "basic"
    assert settings.elasticsearch_enabled is True
    assert settings.elasticsearch_index == "products"
    assert settings.elasticsearch_request_timeout == 2.0
    assert settings.search_max_results == 100
    assert (settings.default_page_size, settings.max_page_size) == (10, 100)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CATALOG_VARIANT", "sku")
    monkeypatch.setenv("ELASTICSEARCH_REQUEST_TIMEOUT", "0.5")
    settings = Settings(_env_file=None)
    assert settings.catalog_variant == "sku"
    assert settings.elasticsearch_request_timeout == 0.5


def test_invalid_variant_rejected(monkeypatch):
    monkeypatch.setenv("CATALOG_VARIANT", "books")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_setup_logging_is_idempotent():
    settings = Settings(_env_file=None, log_level="WARNING")
    root = setup_logging(settings)
    handlers = list(root.handlers)
    assert setup_logging(settings) is root
    assert root.handlers == handlers
    assert root.level == logging.WARNING
