"""Content library endpoints."""

from fastapi import APIRouter

from backend.session import get_store

from .dashboard import mutation_response
from .models import CreateContent

router = APIRouter()


@router.get("/library")
async def get_library():
    """Content items in insertion order."""
    return get_store().views.library.model_dump()


@router.post("/content")
async def add_content(body: CreateContent):
    """Add a reference video to the library (+10 XP)."""
    item = get_store().add_content(body.title, body.url, body.type, body.category)
    return mutation_response(item=item.model_dump(by_alias=True))
