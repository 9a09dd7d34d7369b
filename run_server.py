#!/usr/bin/env python
"""Script to run the task API server."""
import uvicorn

from taskapi.config import HOST, PORT, RELOAD

if __name__ == "__main__":
    uvicorn.run(
        "taskapi.main:app",
        host=HOST,
        port=PORT,
        reload=RELOAD,
    )
