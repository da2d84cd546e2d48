"""Speech Lab — dev launcher. Starts the backend with uvicorn."""

import argparse
import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from backend.logging_config import configure_logging, logging_config

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
BACKEND_PORT = os.getenv("BACKEND_PORT", "13013")


def main():
    parser = argparse.ArgumentParser(description="Speech Lab dev launcher")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Directory holding the saved state (default: ./data)")
    parser.add_argument("--host", default=HOST,
                        help=f"Bind address (default: {HOST})")
    parser.add_argument("--port", type=int, default=int(BACKEND_PORT),
                        help=f"Backend port (default: {BACKEND_PORT})")
    parser.add_argument("--reload", action="store_true",
                        help="Restart the server when source files change")
    args = parser.parse_args()

    configure_logging()

    # The app reads DATA_DIR when uvicorn imports it
    if args.data_dir:
        os.environ["DATA_DIR"] = str(args.data_dir.resolve())

    print(f"Starting backend on http://localhost:{args.port} ...")
    uvicorn.run(
        "backend.app:app",
        host=args.host, port=args.port, reload=args.reload,
        log_config=logging_config(),
    )


if __name__ == "__main__":
    main()
