"""Tests for environment-driven settings."""

import pytest

from addon_api.settings import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "BIGCOMMERCE_STORE_HASH",
        "STORE_HASH",
        "BIGCOMMERCE_STOREFRONT_API_TOKEN",
        "BIGCOMMERCE_API_TOKEN",
        "ADD_ON_CATEGORY_ID",
        "PORT",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.bigcommerce_store_hash == ""
    assert settings.bigcommerce_storefront_api_token == ""
    assert settings.add_on_category_id is None
    assert settings.add_on_category_limit == 50
    assert settings.port == 3000


def test_reads_bigcommerce_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BIGCOMMERCE_STORE_HASH", "abc123")
    monkeypatch.setenv("BIGCOMMERCE_STOREFRONT_API_TOKEN", "tok")
    monkeypatch.setenv("ADD_ON_CATEGORY_ID", "42")
    monkeypatch.setenv("PORT", "8081")

    settings = Settings(_env_file=None)

    assert settings.bigcommerce_store_hash == "abc123"
    assert settings.bigcommerce_storefront_api_token == "tok"
    assert settings.add_on_category_id == 42
    assert settings.port == 8081


def test_empty_category_id_is_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ADD_ON_CATEGORY_ID", "  ")
    assert Settings(_env_file=None).add_on_category_id is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('["https://shop.example.com","http://localhost:3000"]', ["https://shop.example.com", "http://localhost:3000"]),
        ("https://shop.example.com, http://localhost:3000", ["https://shop.example.com", "http://localhost:3000"]),
        ("", []),
    ],
)
def test_cors_origins_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected: list[str]) -> None:
    monkeypatch.setenv("CORS_ORIGINS", raw)
    assert Settings(_env_file=None).cors_origins == expected
