"""Flexible rollout strategy."""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .context import EvaluationContext
from .hashing import normalized_value
from .stickiness import (
    RandomGenerator,
    Stickiness,
    default_random_generator,
    resolve_stickiness,
)

logger = logging.getLogger(__name__)


class RolloutParameters(BaseModel):
    """Typed view over the stored parameters of a flexibleRollout strategy.

    Parsing never fails: an unparseable rollout becomes 0 and missing
    values fall back to their defaults.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    group_id: str = Field(default="", alias="groupId")
    rollout: float = 0.0
    stickiness: str = Stickiness.DEFAULT

    @field_validator("group_id", mode="before")
    @classmethod
    def _coerce_group_id(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("rollout", mode="before")
    @classmethod
    def _coerce_rollout(cls, value: Any) -> float:
        if isinstance(value, bool):
            return float(value)
        try:
            percentage = float(str(value).strip())
        except (TypeError, ValueError):
            return 0.0
        return 0.0 if math.isnan(percentage) else percentage

    @field_validator("stickiness", mode="before")
    @classmethod
    def _coerce_stickiness(cls, value: Any) -> str:
        return str(value) if value else Stickiness.DEFAULT

    @classmethod
    def from_mapping(cls, parameters: Mapping[str, Any] | None) -> RolloutParameters:
        return cls.model_validate(dict(parameters or {}))


class FlexibleRolloutStrategy:
    """Percentage rollout keyed on a sticky identity.

    Instances hold no mutable state and can be shared between threads.
    """

    name = "flexibleRollout"

    def __init__(self, random_generator: RandomGenerator | None = None) -> None:
        self._random_generator = random_generator or default_random_generator

    def is_enabled(
        self, parameters: Mapping[str, Any], context: EvaluationContext
    ) -> bool:
        params = RolloutParameters.from_mapping(parameters)
        group_id = params.group_id or context.feature_toggle or ""
        identity = self.resolve_stickiness(params.stickiness, context)
        if not identity:
            logger.debug(
                "No stickiness identity resolved",
                extra={"stickiness": params.stickiness, "group_id": group_id},
            )
            return False

        bucket = normalized_value(identity, group_id)
        enabled = params.rollout > 0 and bucket <= params.rollout
        logger.debug(
            "Flexible rollout evaluated",
            extra={
                "group_id": group_id,
                "rollout": params.rollout,
                "bucket": bucket,
                "enabled": enabled,
            },
        )
        return enabled

    def resolve_stickiness(self, stickiness: str, context: EvaluationContext) -> str:
        return resolve_stickiness(stickiness, context, self._random_generator)
