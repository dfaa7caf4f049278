"""k1s0 rollout library."""

from .client import FeatureFlagClientProtocol
from .config import ClientConfig
from .context import EvaluationContext, resolve_context_value
from .exceptions import FeatureFlagError, FeatureFlagErrorCodes
from .flexible_rollout import FlexibleRolloutStrategy, RolloutParameters
from .hashing import DEFAULT_NORMALIZER, VARIANT_HASH_SEED, normalized_value
from .memory import InMemoryFeatureFlagClient
from .models import (
    EvaluationReason,
    EvaluationResult,
    FeatureFlag,
    FlagVariant,
    StrategyDefinition,
)
from .stickiness import (
    RandomGenerator,
    Stickiness,
    default_random_generator,
    resolve_stickiness,
)
from .strategy import Strategy, StrategyRegistry, default_registry
from .variants import select_variant

__all__ = [
    "ClientConfig",
    "DEFAULT_NORMALIZER",
    "EvaluationContext",
    "EvaluationReason",
    "EvaluationResult",
    "FeatureFlag",
    "FeatureFlagClientProtocol",
    "FeatureFlagError",
    "FeatureFlagErrorCodes",
    "FlagVariant",
    "FlexibleRolloutStrategy",
    "InMemoryFeatureFlagClient",
    "RandomGenerator",
    "RolloutParameters",
    "Stickiness",
    "Strategy",
    "StrategyDefinition",
    "StrategyRegistry",
    "VARIANT_HASH_SEED",
    "default_random_generator",
    "default_registry",
    "normalized_value",
    "resolve_context_value",
    "resolve_stickiness",
    "select_variant",
]
