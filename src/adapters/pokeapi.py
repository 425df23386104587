"""Fuente de páginas: PokeAPI (`/api/v2/location-area/`).

Implementa `core.interfaces.location_source.LocationSource`.

Traducción de errores en el borde:
- httpx (transporte, status no-2xx, URL inválida) -> `NetworkError`
- JSON inválido / forma inesperada (pydantic)     -> `DecodeError`
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.errors import DecodeError, NetworkError
from core.domain.models import LocationPage
from core.interfaces.location_source import LocationSource

logger = logging.getLogger(__name__)


class PokeAPILocationSource(LocationSource):
    """Descarga páginas del listado con un único `httpx.Client` por sesión."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client
        self._owns_client = client is None

    def __enter__(self) -> PokeAPILocationSource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = build_client(self._settings)
        return self._client

    def fetch_page(self, url: str) -> LocationPage:
        logger.debug("GET %s", url)
        try:
            response = self._get_client().get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("PokeAPI answered HTTP %s for %s", status, url)
            raise NetworkError(f"unexpected status {status} from {url}", url=url) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkError(f"request to {url} failed: {exc}", url=url) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("Invalid JSON body from %s", url)
            raise DecodeError(f"invalid JSON from {url}: {exc}", url=url) from exc

        try:
            return LocationPage.model_validate(payload)
        except ValidationError as exc:
            logger.warning("Unexpected page shape from %s (%d errors)", url, exc.error_count())
            raise DecodeError(f"unexpected response shape from {url}", url=url) from exc
