"""MurmurHash3 based bucket normalization."""

from __future__ import annotations

import mmh3

DEFAULT_NORMALIZER = 100
VARIANT_HASH_SEED = 86028157


def normalized_value(
    identity: str,
    group_id: str,
    normalizer: int = DEFAULT_NORMALIZER,
    seed: int = 0,
) -> int:
    """Map an identity to a stable bucket in [1, normalizer].

    The hash input is ``"<group_id>:<identity>"`` hashed with unsigned
    MurmurHash3 x86 32-bit, which keeps buckets identical across the other
    Unleash-compatible SDKs. Empty strings are valid input.
    """
    key = f"{group_id}:{identity}"
    return mmh3.hash(key, seed=seed, signed=False) % normalizer + 1
