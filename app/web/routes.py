from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from app.api.deps import get_store
from app.services.fetch_state import Loading, error_of, records_of
from app.services.store import CharacterStore

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[1] / "templates"))
router = APIRouter(tags=["web"])

ALIVE_STATUS = "Alive"


def status_css_class(status: str) -> str:
    return "alive" if status == ALIVE_STATUS else "not-alive"


templates.env.filters["status_class"] = status_css_class


@router.get("/")
def character_list_page(request: Request, store: CharacterStore = Depends(get_store)):
    state = store.state
    return templates.TemplateResponse(
        request,
        "character_list.html",
        {
            "characters": records_of(state),
            "loading": isinstance(state, Loading),
            "error": error_of(state),
            "status": state.status.value,
        },
    )


@router.get("/characters/{character_id}")
def character_detail_page(character_id: str, request: Request, store: CharacterStore = Depends(get_store)):
    character = store.find_by_id(character_id)
    return templates.TemplateResponse(
        request,
        "character_detail.html",
        {"character": character, "character_id": character_id},
        status_code=200 if character is not None else 404,
    )


@router.post("/refresh")
async def refresh_page(store: CharacterStore = Depends(get_store)):
    store.load()
    return RedirectResponse(url="/", status_code=303)
