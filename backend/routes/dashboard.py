"""Health check, state document, and dashboard/view endpoints."""

from fastapi import APIRouter

from backend.session import get_store

router = APIRouter()


def mutation_response(**fields):
    """Body shared by mutating endpoints: extra fields + views + level-ups."""
    store = get_store()
    return {
        **fields,
        "views": store.views.model_dump(),
        "level_ups": [
            {"level": lu.level, "xp": lu.xp, "message": lu.message}
            for lu in store.drain_level_ups()
        ],
        "persistent": store.persistent,
    }


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/state")
async def get_state():
    """The persisted state document."""
    return get_store().snapshot().to_document()


@router.get("/views")
async def get_views():
    """All panel snapshots."""
    return get_store().views.model_dump()


@router.get("/dashboard")
async def get_dashboard():
    """Level, XP progress, and the skill chart series."""
    return get_store().views.dashboard.model_dump()
