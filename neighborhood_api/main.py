"""ASGI entry point: ``uvicorn neighborhood_api.main:app``."""
from neighborhood_api.app import create_app

app = create_app()


if __name__ == "__main__":  # pragma: no cover - uso local
    import os

    import uvicorn

    uvicorn.run(app, host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "8000")))
