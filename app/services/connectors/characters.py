from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError as PayloadValidationError

from app.schemas import Character, CharacterPage
from app.services.connectors.base import DecodeError, FetchError, RecordFetcher, RemoteStatusError, TransportError
from app.services.fetch_state import Failed, FetchState, Succeeded

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://rickandmortyapi.com/api/"
CHARACTER_RESOURCE = "character"


def decode_character_page(body: bytes | str) -> list[Character]:
    try:
        page = CharacterPage.model_validate_json(body)
    except PayloadValidationError as exc:
        first = exc.errors()[0] if exc.errors() else {}
        location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
        raise DecodeError(f"{exc.error_count()} error(s), first at {location}: {first.get('msg', 'invalid payload')}") from exc
    return page.results


def build_http_client(base_url: str = DEFAULT_BASE_URL, *, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=base_url, transport=transport)


class CharacterFetcher(RecordFetcher):
    name = "rickandmorty_characters"

    def __init__(self, client: httpx.AsyncClient, *, resource: str = CHARACTER_RESOURCE) -> None:
        self._client = client
        self._resource = resource

    async def _get_body(self) -> bytes:
        try:
            response = await self._client.get(self._resource)
        except httpx.RequestError as exc:
            raise TransportError(f"{type(exc).__name__}: {exc}") from exc
        if not response.is_success:
            raise RemoteStatusError(response.status_code, str(response.request.url))
        return response.content

    async def fetch(self) -> FetchState:
        try:
            body = await self._get_body()
            records = decode_character_page(body)
        except FetchError as exc:
            logger.warning("Character fetch failed (%s): %s", exc.kind.value, exc.describe())
            return Failed(kind=exc.kind.value, error=exc.describe())
        logger.info("Fetched %d characters from %s", len(records), self._resource)
        return Succeeded(records=tuple(records))
