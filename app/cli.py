import argparse
import asyncio
import json

import httpx

from app.config import get_settings
from app.main import configure_logging
from app.schemas import CharacterResponse
from app.services.connectors import CharacterFetcher, build_http_client
from app.services.fetch_state import Failed, FetchState, records_of
from app.services.store import CharacterStore
from app.services.validation import ValidationError, parse_record_id


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch characters once and print the list or one record")
    parser.add_argument("--id", dest="character_id", help="Print only the character with this id")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text lines")
    return parser.parse_args(argv)


async def load_once(transport: httpx.AsyncBaseTransport | None = None) -> CharacterStore:
    settings = get_settings()
    async with build_http_client(settings.api_base_url, transport=transport) as client:
        store = CharacterStore(CharacterFetcher(client, resource=settings.character_resource))
        await store.refresh()
    store.close()
    return store


def _render(characters: list[CharacterResponse], as_json: bool) -> str:
    if as_json:
        return json.dumps([item.model_dump() for item in characters], indent=2)
    return "\n".join(f"{item.id}\t{item.name}\t{item.status}\t{item.species}" for item in characters)


def run(argv: list[str] | None = None, transport: httpx.AsyncBaseTransport | None = None) -> int:
    args = parse_args(argv)
    configure_logging(get_settings())

    if args.character_id is not None:
        try:
            parse_record_id(args.character_id)
        except ValidationError as exc:
            print(f"error: {exc}")
            return 2

    store = asyncio.run(load_once(transport))
    state: FetchState = store.state
    if isinstance(state, Failed):
        print(f"error: {state.description}")
        return 1

    if args.character_id is not None:
        character = store.find_by_id(args.character_id)
        if character is None:
            print(f"Character not found: {args.character_id}")
            return 1
        print(_render([CharacterResponse.from_character(character)], args.json))
        return 0

    characters = [CharacterResponse.from_character(record) for record in records_of(state)]
    print(_render(characters, args.json))
    return 0


def main() -> int:
    return run()


if __name__ == "__main__":
    raise SystemExit(main())
