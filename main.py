"""
main.py — Server launcher and entry point.

Run this file to start the reservation API:

    python main.py

This file does NOT contain application logic. See app.py for the FastAPI
application, service wiring, and startup sequence.

Direct uvicorn usage:
    uvicorn app:app --reload
"""

from __future__ import annotations

import uvicorn

from hotel_backend.utils.config import get_settings


def main() -> None:
    """Start the reservation API server."""
    settings = get_settings()
    print("=" * 60)
    print(f"  {settings.app_name} v{settings.app_version}")
    print("=" * 60)
    print(f"  Server  : http://{settings.host}:{settings.port}")
    print(f"  API docs: http://{settings.host}:{settings.port}/docs")
    print("=" * 60)
    print("  Press CTRL+C to stop\n")

    # Start uvicorn — this blocks until CTRL+C
    uvicorn.run(
        "app:app",       # points to app.py → app object
        host=settings.host,
        port=settings.port,
        reload=False,    # reservations live in memory; a reload would drop them
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
