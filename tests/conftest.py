"""Shared fixtures: in-memory location source, output sink and scripted input."""

from __future__ import annotations

from typing import Callable

import pytest

from core.config import DEFAULT_LOCATION_AREA_URL, AppSettings
from core.domain.errors import PokedexError
from core.domain.models import LocationPage
from core.services.session import PokedexSession


def make_page(names, *, next=None, previous=None) -> LocationPage:
    return LocationPage.model_validate(
        {
            "count": len(names),
            "results": [{"name": name, "url": f"https://example.test/{name}/"} for name in names],
            "next": next,
            "previous": previous,
        }
    )


class FakeLocationSource:
    """Serves pages (or raises errors) by URL and records every request."""

    def __init__(self, pages: dict[str, LocationPage | PokedexError] | None = None) -> None:
        self.pages = dict(pages or {})
        self.requested: list[str] = []
        self.closed = False

    def __enter__(self) -> FakeLocationSource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.closed = True

    def fetch_page(self, url: str) -> LocationPage:
        self.requested.append(url)
        result = self.pages[url]
        if isinstance(result, PokedexError):
            raise result
        return result


def scripted_input(lines) -> Callable[[str], str]:
    """A `read_line` that replays `lines` and then signals EOF."""

    pending = list(lines)

    def read_line(prompt: str) -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read_line


@pytest.fixture
def output() -> list[str]:
    return []


@pytest.fixture
def source() -> FakeLocationSource:
    return FakeLocationSource(
        {
            DEFAULT_LOCATION_AREA_URL: make_page(["route-1"], next="P2", previous=None),
            "P2": make_page(["route-2"], next=None, previous="P1"),
            "P1": make_page(["route-1"], next="P2", previous=None),
        }
    )


@pytest.fixture
def session(source: FakeLocationSource, output: list[str]) -> PokedexSession:
    return PokedexSession(source=source, emit=output.append)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Ignore the developer's POKEDEX_* variables and .env files."""

    for key in ("API_BASE_URL", "HTTP_TIMEOUT_SECONDS", "USER_AGENT", "PROMPT", "LOG_LEVEL"):
        monkeypatch.delenv(f"POKEDEX_{key}", raising=False)
    monkeypatch.setitem(AppSettings.model_config, "env_file", None)
