"""
Run the API server.

Usage:
    python -m shifolink

Or with uvicorn directly:
    uvicorn shifolink.main:app --host localhost --port 8080
"""

import uvicorn

from shifolink.core.config import settings


def main() -> None:
    uvicorn.run("shifolink.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
