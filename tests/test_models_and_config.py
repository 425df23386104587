"""Domain models and settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from conftest import make_page
from core.config import DEFAULT_LOCATION_AREA_URL, DEFAULT_PROMPT, AppSettings
from core.domain.errors import DecodeError, NetworkError, PokedexError
from core.domain.models import LocationPage, PaginationCursor


def test_page_ignores_extra_fields():
    page = LocationPage.model_validate(
        {"results": [{"name": "route-1", "extra": True}], "next": None, "previous": None, "other": 1}
    )
    assert page.names() == ["route-1"]
    assert page.count is None


def test_cursor_advance_copies_absent_links():
    cursor = PaginationCursor(next_url="N", previous_url="P")

    cursor.advance_to(make_page(["route-1"]))

    assert cursor.next_url is None
    assert cursor.previous_url is None


def test_cursor_rejects_non_string_assignment():
    cursor = PaginationCursor()

    with pytest.raises(ValidationError):
        cursor.next_url = 3  # type: ignore[assignment]


def test_errors_share_a_base_and_keep_the_url():
    err = DecodeError("invalid JSON from P2", url="P2")

    assert isinstance(err, PokedexError)
    assert not isinstance(err, NetworkError)
    assert str(err) == "invalid JSON from P2"
    assert err.url == "P2"


def test_settings_defaults():
    settings = AppSettings(_env_file=None)

    assert settings.api_base_url == DEFAULT_LOCATION_AREA_URL
    assert settings.prompt == DEFAULT_PROMPT
    assert settings.log_level == "WARNING"


def test_settings_read_prefixed_env(monkeypatch):
    monkeypatch.setenv("POKEDEX_API_BASE_URL", "http://localhost:8000/api/v2/location-area/")
    monkeypatch.setenv("POKEDEX_LOG_LEVEL", "debug")
    monkeypatch.setenv("POKEDEX_HTTP_TIMEOUT_SECONDS", "5")

    settings = AppSettings(_env_file=None)

    assert settings.api_base_url == "http://localhost:8000/api/v2/location-area/"
    assert settings.log_level == "DEBUG"
    assert settings.http_timeout_seconds == 5.0


@pytest.mark.parametrize("field, value", [("log_level", "chatty"), ("http_timeout_seconds", 0)])
def test_settings_validation(field, value):
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, **{field: value})


def test_page_count_is_informational_only():
    page = LocationPage.model_validate({"results": [{"name": "route-1"}], "count": -1})

    assert page.count == -1
    assert page.names() == ["route-1"]
