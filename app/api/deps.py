from fastapi import Request

from app.services.store import CharacterStore


def get_store(request: Request) -> CharacterStore:
    return request.app.state.store
