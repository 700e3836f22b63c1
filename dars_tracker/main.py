#!/usr/bin/env python
"""
main.py - Main entry point for the DARS Progress Tracker

Serves a paste form for plain-text DARS degree-audit reports and renders
the extracted credits, GPA and requirement status as an HTML summary.
A JSON endpoint exposes the same extraction.
"""

import uvicorn
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from . import __version__
from .config import settings
from .middleware import RequestLoggingMiddleware
from .report.router import router as report_router

# Configure logging centrally
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


# --- Application lifespan (startup/shutdown) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s starting up (minimum GPA %s)...", settings.app_title, settings.minimum_gpa)
    yield  # app runs here
    logger.info("%s shutting down...", settings.app_title)


# Create the FastAPI app
app = FastAPI(
    title=settings.app_title,
    description="Summarizes pasted DARS degree-audit reports: credits, GPA and requirement status.",
    version=__version__,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
logger.info("CORS middleware configured")

app.add_middleware(RequestLoggingMiddleware)
logger.info("Request logging middleware added")

# --- Include Routers ---
app.include_router(report_router)  # / and /api/report
logger.info("  - Report router (/, /api/report)")


# --- Health Check ---
@app.get("/health", tags=["General"], summary="Health Check")
async def health():
    return {
        "message": f"Welcome to the {settings.app_title}",
        "status": "OK",
        "docs_url": "/docs",
    }


# --- Run server ---
if __name__ == "__main__":
    logger.info("Starting Uvicorn server...")
    uvicorn.run("dars_tracker.main:app", host=settings.host, port=settings.port, reload=settings.reload)
