"""
Top-level router for version 1 of the API.

This router aggregates the resource routers under a unified prefix.
When a new resource is added, include its router here with the path
prefix it should be served under.
"""

from fastapi import APIRouter

from .endpoints import clubs, instances

router = APIRouter()

router.include_router(clubs.router, prefix="/clubs", tags=["clubs"])
router.include_router(instances.router, prefix="/instances", tags=["instances"])
