#!/usr/bin/env python3
"""
Main entry point for running the product catalog API locally
"""

import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "app:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("RELOAD", "false").lower() in {"1", "true", "yes", "on"},
    )


if __name__ == "__main__":
    main()
