"""
BARRIER TRACKER Planner API - Barrier Schemas
"""

from typing import List

from pydantic import BaseModel, Field

from barrier_tracker.barriers.catalog import Barrier, BarrierKind, BarrierType


class MicroStrategyResponse(BaseModel):
    id: str
    title: str
    description: str
    action: str = Field(description="The immediate 'do this' step")


class BarrierResponse(BaseModel):
    id: BarrierType
    label: str
    kind: BarrierKind = Field(description="storm (big challenge) or drift (sneaky distraction)")
    description: str
    strategies: List[MicroStrategyResponse]

    @classmethod
    def from_barrier(cls, barrier: Barrier) -> "BarrierResponse":
        return cls(
            id=barrier.id,
            label=barrier.label,
            kind=barrier.kind,
            description=barrier.description,
            strategies=[
                MicroStrategyResponse(
                    id=s.id,
                    title=s.title,
                    description=s.description,
                    action=s.action,
                )
                for s in barrier.strategies
            ],
        )


class BarrierListResponse(BaseModel):
    barriers: List[BarrierResponse]
    total: int
