"""
BARRIER TRACKER Planner API - Barrier Router

Read-only access to the barrier catalog.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from barrier_tracker.auth.dependencies import CurrentUser
from barrier_tracker.barriers.catalog import BarrierKind, get_barrier, list_barriers
from barrier_tracker.barriers.schemas import BarrierListResponse, BarrierResponse


router = APIRouter(prefix="/barriers", tags=["Barriers"])


@router.get("", response_model=BarrierListResponse, summary="List barriers")
async def list_all_barriers(
    current_user: CurrentUser,
    kind: Optional[BarrierKind] = Query(default=None, description="Filter by storm/drift"),
) -> BarrierListResponse:
    barriers = [BarrierResponse.from_barrier(b) for b in list_barriers(kind)]
    return BarrierListResponse(barriers=barriers, total=len(barriers))


@router.get("/{slug}", response_model=BarrierResponse, summary="Get a barrier")
async def get_one_barrier(slug: str, current_user: CurrentUser) -> BarrierResponse:
    barrier = get_barrier(slug)
    if barrier is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Barrier not found",
        )
    return BarrierResponse.from_barrier(barrier)
