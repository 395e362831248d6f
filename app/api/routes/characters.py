import asyncio

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from app.api.deps import get_store
from app.schemas import CharacterListResponse, CharacterResponse, RefreshResponse
from app.services.fetch_state import FetchState, error_of, records_of
from app.services.store import CharacterStore
from app.services.validation import ValidationError, parse_record_id

router = APIRouter(prefix="/api/v1/characters", tags=["characters"])


def _list_payload(state: FetchState) -> CharacterListResponse:
    records = records_of(state)
    return CharacterListResponse(
        status=state.status,
        count=len(records),
        characters=[CharacterResponse.from_character(record) for record in records],
        error=error_of(state),
    )


@router.get("", response_model=CharacterListResponse)
def list_characters(store: CharacterStore = Depends(get_store)) -> CharacterListResponse:
    return _list_payload(store.state)


@router.post("/refresh", response_model=None)
async def refresh_characters(wait: bool = False, store: CharacterStore = Depends(get_store)):
    task = store.load()
    if wait:
        state = await asyncio.shield(task)
        return _list_payload(state)
    payload = RefreshResponse(status=store.state.status, accepted=True)
    return JSONResponse(status_code=202, content=payload.model_dump(mode="json"))


@router.get("/{character_id}", response_model=CharacterResponse)
def fetch_character(character_id: str, store: CharacterStore = Depends(get_store)) -> CharacterResponse:
    try:
        parse_record_id(character_id)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    character = store.find_by_id(character_id)
    if character is None:
        raise HTTPException(status_code=404, detail=f"Character not found: {character_id}")
    return CharacterResponse.from_character(character)
