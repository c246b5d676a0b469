#!/usr/bin/env python3
"""Run script for Sprint03."""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "sprint03.api.app:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
