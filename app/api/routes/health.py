from datetime import UTC, datetime

from fastapi import APIRouter, Depends

from app.api.deps import get_store
from app.schemas import HealthResponse
from app.services.store import CharacterStore

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health(store: CharacterStore = Depends(get_store)) -> HealthResponse:
    return HealthResponse(status="ok", fetch_status=store.state.status, timestamp=datetime.now(UTC))
