"""Outbound record fetchers for the public character API."""

from app.services.connectors.base import DecodeError, FetchError, RecordFetcher, RemoteStatusError, TransportError
from app.services.connectors.characters import CharacterFetcher, build_http_client, decode_character_page

__all__ = [
    "CharacterFetcher",
    "DecodeError",
    "FetchError",
    "RecordFetcher",
    "RemoteStatusError",
    "TransportError",
    "build_http_client",
    "decode_character_page",
]
