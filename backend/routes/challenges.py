"""Challenge endpoints."""

from fastapi import APIRouter

from backend.session import get_store

from .dashboard import mutation_response

router = APIRouter()


@router.get("/challenges")
async def get_challenges():
    """The challenge catalog with completed/pending state."""
    return get_store().views.challenges.model_dump()


@router.post("/challenges/{challenge_id}/complete")
async def complete_challenge(challenge_id: int):
    """Complete a challenge and grant its reward.

    Unknown or already-completed challenges are a no-op, not an error:
    the response says `completed: false`.
    """
    completed = get_store().complete_challenge(challenge_id)
    return mutation_response(completed=completed)
