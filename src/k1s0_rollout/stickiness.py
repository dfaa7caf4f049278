"""Stickiness resolution for rollout bucketing."""

from __future__ import annotations

import random
from typing import Callable

from .context import EvaluationContext, resolve_context_value

RandomGenerator = Callable[[], str]


class Stickiness:
    """Built-in stickiness modes. Any other value names a context field."""

    DEFAULT: str = "default"
    RANDOM: str = "random"


def default_random_generator() -> str:
    """Roll a dice-style number as a string ("1" to "101")."""
    return str(round(random.random() * 100) + 1)


def resolve_stickiness(
    stickiness: str,
    context: EvaluationContext,
    random_generator: RandomGenerator = default_random_generator,
) -> str:
    """Return the identity to hash for a context.

    ``default`` falls back from user_id to session_id to a random value,
    ``random`` always draws a random value, and any other mode looks up the
    named context field. An empty string means no identity is available.
    """
    if stickiness == Stickiness.DEFAULT:
        return context.user_id or context.session_id or random_generator()
    if stickiness == Stickiness.RANDOM:
        return random_generator()
    return resolve_context_value(context, stickiness)
