"""
Tour Core — Traveling Salesman Backend
======================================

FastAPI entry point.
Start with:  uvicorn main:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from salesman.api.routes import router
from salesman.solver.registry import list_algorithms

# ── Logging ────────────────────────────────────────────────────────
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)

# ── App ────────────────────────────────────────────────────────────
app = FastAPI(
    title="Tour Core",
    description=(
        "Traveling salesman backend.  Reads a weighted undirected graph "
        "of cities and returns the cheapest closed tour found by an "
        "exact permutation search or a nearest-neighbor heuristic."
    ),
    version="0.1.0",
)

# CORS: the API is stateless, any origin may call it
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount all routes
app.include_router(router, prefix="/api")


@app.get("/")
async def root():
    return {
        "name": "Tour Core",
        "version": "0.1.0",
        "status": "running",
        "algorithms": list_algorithms(),
        "docs": "/docs",
    }
