"""Weighted variant selection."""

from __future__ import annotations

from .context import EvaluationContext
from .hashing import VARIANT_HASH_SEED, normalized_value
from .models import FeatureFlag, FlagVariant
from .stickiness import RandomGenerator, default_random_generator, resolve_stickiness


def select_variant(
    flag: FeatureFlag,
    context: EvaluationContext,
    random_generator: RandomGenerator | None = None,
) -> FlagVariant | None:
    """Pick a variant for the context, sticky on the first variant's stickiness.

    Returns None when the flag has no positively weighted variants or no
    identity can be resolved.
    """
    total_weight = sum(max(variant.weight, 0) for variant in flag.variants)
    if total_weight <= 0:
        return None

    identity = resolve_stickiness(
        flag.variants[0].stickiness,
        context,
        random_generator or default_random_generator,
    )
    if not identity:
        return None

    target = normalized_value(identity, flag.flag_key, total_weight, VARIANT_HASH_SEED)
    counter = 0
    for variant in flag.variants:
        if variant.weight <= 0:
            continue
        counter += variant.weight
        if counter >= target:
            return variant
    return None
