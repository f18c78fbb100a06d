"""
Main module entry point.

This allows serving the API as: python -m src.main
"""

import uvicorn

from .config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "src.main.app:app",
        host="0.0.0.0",
        port=settings.ge.port,
        reload=settings.ge.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
