from fastapi import FastAPI

from shelfcat.config import SECRET_KEY_BASE, SECRET_TOKEN
from shelfcat.routers import primary_categories


def create_app() -> FastAPI:
    app = FastAPI(title="Shelfcat", version="0.1.0")
    app.state.secret_token = SECRET_TOKEN
    app.state.secret_key_base = SECRET_KEY_BASE
    app.include_router(primary_categories.router)
    return app


app = create_app()
