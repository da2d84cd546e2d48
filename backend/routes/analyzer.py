"""Deconstruction note endpoints."""

from fastapi import APIRouter

from backend.session import get_store

from .dashboard import mutation_response
from .models import SubmitNote

router = APIRouter()


@router.get("/analyzer")
async def get_analyzer():
    """Content dropdown options and the five most recent notes."""
    return get_store().views.analyzer.model_dump()


@router.post("/notes")
async def submit_note(body: SubmitNote):
    """Submit a deconstruction note (+50 XP, tallies skill tags)."""
    note = get_store().submit_note(
        content_id=body.content_id,
        script=body.script,
        intent=body.intent,
        technique=body.technique,
        emotion=body.emotion,
        keywords=body.keywords,
        rewriting=body.rewriting,
        tags=body.tags,
    )
    return mutation_response(note=note.model_dump(by_alias=True))
