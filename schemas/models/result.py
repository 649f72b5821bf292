"""Health-check results: one ConditionResult per evaluated condition."""

from __future__ import annotations

from pydantic import Field

from schemas.models.base import ConfigModel


class ConditionResult(ConfigModel):
    condition: str
    success: bool


class Result(ConfigModel):
    # Order is the order the conditions were evaluated in
    condition_results: tuple[ConditionResult, ...] = Field(
        default=(), alias="condition-results"
    )
