"""FastAPI API endpoints under /api.

Endpoint groups: dashboard (health, state document, all views), library
(content items), analyzer (deconstruction notes), challenges. Every mutating
endpoint answers with the refreshed views and any level-ups it caused, so a
client never has to re-fetch after a change.
"""

from fastapi import APIRouter

from .analyzer import router as analyzer_router
from .challenges import router as challenges_router
from .dashboard import router as dashboard_router
from .library import router as library_router

router = APIRouter()
router.include_router(dashboard_router)
router.include_router(library_router)
router.include_router(analyzer_router)
router.include_router(challenges_router)
