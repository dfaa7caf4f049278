"""FeatureFlagClient プロトコル"""

from __future__ import annotations

from typing import Protocol

from .context import EvaluationContext
from .models import EvaluationResult, FeatureFlag


class FeatureFlagClientProtocol(Protocol):
    """フィーチャーフラグクライアントプロトコル。"""

    def evaluate(self, flag_key: str, context: EvaluationContext) -> EvaluationResult: ...

    def get_flag(self, flag_key: str) -> FeatureFlag: ...

    def is_enabled(
        self, flag_key: str, context: EvaluationContext, default: bool = False
    ) -> bool: ...
