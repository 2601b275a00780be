#!/usr/bin/env python3

import logging
from fastapi import FastAPI, Request
from libraryapp.core.db import session as db
from libraryapp.routes import api
from libraryapp.configs import OPTIONS, LOG_LEVEL
from libraryapp import __version__ as VERSION

logging.basicConfig(
    level=LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = FastAPI(
    title="Library API",
    description="libraryapp: books, users, loans & statistics",
    version=VERSION,
)

@app.middleware("http")
async def remove_session(request: Request, call_next):
    try:
        return await call_next(request)
    finally:
        db.remove()

app.include_router(api.router, prefix="/v1/api")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("libraryapp.app:app", **OPTIONS)
