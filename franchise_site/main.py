"""
Application entry point.

Runs the FastAPI app assembled in franchise_site.api.main under uvicorn.

Usage:
    python -m franchise_site.main

Dependencies: uvicorn, franchise_site.api.main
System role: Process launcher
"""

import uvicorn

from franchise_site.api.main import app
from franchise_site.configs import get_settings

__all__ = ["app"]


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "franchise_site.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
