"""
Numerals API Server.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from numerals.core import config
from numerals.core.tables import build_decomposer
from numerals.logging_config import setup_logging
from numerals.server.routes import numerals


logger = logging.getLogger(__name__)

VERSION = "0.1.0"


def log_routes(app: FastAPI):
    routes = []
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(sorted(route.methods - {"HEAD", "OPTIONS"}))
            routes.append((methods, route.path, route.name))

    routes.sort(key=lambda r: (r[1], r[0]))

    for methods, path, name in routes:
        logger.info(f"  {methods:8} {path:30} → {name}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    # tables are loaded once and shared read-only by every request
    app.state.decomposer = build_decomposer(config.TABLE_SOURCE)
    log_routes(app)
    yield


app = FastAPI(title="Numerals API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(numerals.router)


@app.get("/")
async def root():
    return {"name": "Numerals API", "version": VERSION}
