"""the beautiful world start from here."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from hookcast.config import settings
from hookcast.routers import gh

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="GitHub → IRC notification renderer")


@app.get("/")
def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(gh.router)
