"""
Tests for configuration loading and validation.
"""

import pytest

from jex_update.config import Settings, load_config_file, parse_repositories
from jex_update.entities import CatalogEntry


def test_parse_repositories():
    """Test parsing of identifier=vendor pairs."""
    assert parse_repositories("com_shop=globex, mod_weather=acme,") == {
        "com_shop": "globex",
        "mod_weather": "acme",
    }
    assert parse_repositories("") == {}


@pytest.mark.parametrize("value", ["com_shop", "com_shop=", "=acme"])
def test_parse_repositories_rejects_malformed_pairs(value):
    """Test that malformed pairs are rejected."""
    with pytest.raises(ValueError):
        parse_repositories(value)


def test_load_config_file(tmp_path):
    """Test reading the optional TOML file."""
    path = tmp_path / "config.toml"
    path.write_text(
        """
cache = 120

[server]
name = "Acme Updates"
description = "Acme extension updates"

[repositories]
mod_weather = "acme"
"""
    )
    data = load_config_file(path)
    assert data["cache"] == 120
    assert data["server"]["name"] == "Acme Updates"
    assert data["repositories"] == {"mod_weather": "acme"}


def test_load_missing_config_file(tmp_path):
    """Test that a missing file yields an empty config."""
    assert load_config_file(tmp_path / "absent.toml") == {}


def test_catalog_preserves_order(test_settings):
    """Test that catalog entries follow configuration order."""
    assert test_settings.catalog == (
        CatalogEntry("mod_weather", "acme"),
        CatalogEntry("com_shop", "globex"),
    )


@pytest.mark.parametrize(
    "kwargs",
    [
        {"cache_ttl": -1},
        {"http_timeout": 0},
        {"repositories": {"index": "acme"}},
        {"repositories": {"health": "acme"}},
        {"repositories": {"mod.weather": "acme"}},
    ],
)
def test_invalid_settings(kwargs):
    """Test settings validation."""
    with pytest.raises(ValueError):
        Settings(**kwargs)
