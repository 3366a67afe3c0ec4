# oche/server/__main__.py
"""Entry point: python -m oche.server"""

from __future__ import annotations

import argparse
from pathlib import Path

import uvicorn

from .config import settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Oche Ladder Server")
    parser.add_argument("--host", type=str, default=settings.HOST)
    parser.add_argument("--port", type=int, default=settings.PORT)
    parser.add_argument(
        "--state",
        type=Path,
        default=settings.STATE_PATH,
        help="Path to the ladder JSON file",
    )
    args = parser.parse_args()

    from . import create_app

    app = create_app(state_path=args.state)
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
