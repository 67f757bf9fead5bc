"""Module: main."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shifolink import __version__
from shifolink.api.v1.api import api_router
from shifolink.api.v1.response import register_exception_handlers
from shifolink.core.config import settings
from shifolink.core.logging import setup_logging
from shifolink.db.init_db import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.log_format)
    init_db()
    yield


app = FastAPI(
    title="ShifoLink API",
    description="Online doctor appointments and drug orders",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(api_router, prefix=settings.api_prefix)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
