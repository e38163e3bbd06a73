"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

from app.adapters.inbound.http.routes import admin_router, router
from app.infrastructure.db import dispose_engine

# Load environment variables from .env file
load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    dispose_engine()


app = FastAPI(
    title="Car Dealership Inventory",
    description="Public car catalog and admin inventory management",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(router)
app.include_router(admin_router)
