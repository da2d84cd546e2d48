import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from backend import session
from backend.routes import router

load_dotenv(Path(__file__).parent.parent / ".env")

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"
DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"


def create_app(data_dir: Path | None = None) -> FastAPI:
    """Build the API app around a store loaded from `data_dir`.

    Falls back to $DATA_DIR, then ./data. A built frontend in backend/static
    is served alongside the API when present.
    """
    resolved = data_dir or Path(os.getenv("DATA_DIR", str(DEFAULT_DATA_DIR)))
    session.init_store(resolved)
    logger.debug("store opened data_dir=%s", resolved)

    app = FastAPI(title="Speech Lab")
    app.include_router(router, prefix="/api")

    if (STATIC_DIR / "index.html").is_file():
        app.mount("/assets", StaticFiles(directory=STATIC_DIR / "assets", check_dir=False), name="assets")

        # Any non-API path loads the single-page frontend
        @app.get("/{path:path}")
        async def frontend(path: str):
            return FileResponse(STATIC_DIR / "index.html")

    return app


# Instance uvicorn imports (backend.app:app)
app = create_app()
