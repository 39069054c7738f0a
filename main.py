"""
Naretbox FastAPI Application
============================
Entry point for running the scoring and scheduling API.

The actual FastAPI application is defined in naretbox/main.py and imported here.
"""

from naretbox.main import app

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
