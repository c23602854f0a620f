"""
Top‑level API router.

Domain routers are included here under their path prefixes and the
result is mounted by ``main.create_app`` under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import patterns

router = APIRouter()

router.include_router(patterns.router, prefix="/patterns", tags=["patterns"])
