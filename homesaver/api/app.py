"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from homesaver.api.routes import sale_options, timeline, valuation
from homesaver.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    description="Foreclosure help calculators: property value, sale options, foreclosure timeline",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(valuation.router)
app.include_router(sale_options.router)
app.include_router(timeline.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
