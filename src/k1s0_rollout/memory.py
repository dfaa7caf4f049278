"""InMemoryFeatureFlagClient 実装"""

from __future__ import annotations

import dataclasses
import logging

from .config import ClientConfig
from .context import EvaluationContext
from .exceptions import FeatureFlagError, FeatureFlagErrorCodes
from .models import EvaluationReason, EvaluationResult, FeatureFlag
from .stickiness import RandomGenerator
from .strategy import StrategyRegistry, default_registry
from .variants import select_variant

logger = logging.getLogger(__name__)


class InMemoryFeatureFlagClient:
    """保持しているフラグ定義を戦略レジストリで評価するクライアント。"""

    def __init__(
        self,
        registry: StrategyRegistry | None = None,
        config: ClientConfig | None = None,
        random_generator: RandomGenerator | None = None,
    ) -> None:
        self._registry = registry or default_registry()
        self._config = config or ClientConfig()
        self._random_generator = random_generator
        self._flags: dict[str, FeatureFlag] = {}

    def set_flag(self, flag: FeatureFlag) -> None:
        """フラグを設定する。"""
        self._flags[flag.flag_key] = flag

    def remove_flag(self, flag_key: str) -> None:
        """フラグを削除する。存在しない場合は何もしない。"""
        self._flags.pop(flag_key, None)

    def get_flag(self, flag_key: str) -> FeatureFlag:
        flag = self._flags.get(flag_key)
        if flag is None:
            raise FeatureFlagError(
                FeatureFlagErrorCodes.FLAG_NOT_FOUND,
                f"Flag not found: {flag_key}",
            )
        return flag

    def evaluate(self, flag_key: str, context: EvaluationContext) -> EvaluationResult:
        """フラグを評価する。

        Args:
            flag_key: フラグキー
            context: 評価コンテキスト

        Returns:
            評価結果。有効な場合はバリアントを含む

        Raises:
            FeatureFlagError: フラグが存在しない場合
        """
        flag = self.get_flag(flag_key)
        if not flag.enabled:
            return EvaluationResult(
                flag_key=flag_key, enabled=False, reason=EvaluationReason.FLAG_DISABLED
            )

        ctx = self._complete_context(flag, context)
        if not flag.strategies:
            reason = EvaluationReason.NO_STRATEGIES
        elif self._any_strategy_enabled(flag, ctx):
            reason = EvaluationReason.STRATEGY_MATCH
        else:
            return EvaluationResult(
                flag_key=flag_key, enabled=False, reason=EvaluationReason.NO_STRATEGY_MATCH
            )

        variant = select_variant(flag, ctx, self._random_generator)
        return EvaluationResult(
            flag_key=flag_key,
            enabled=True,
            variant=variant.name if variant else None,
            reason=reason,
        )

    def is_enabled(
        self, flag_key: str, context: EvaluationContext, default: bool = False
    ) -> bool:
        """フラグが有効か判定する。未登録のフラグは default を返す。"""
        if flag_key not in self._flags:
            logger.debug("Unknown feature flag", extra={"flag_key": flag_key})
            return default
        return self.evaluate(flag_key, context).enabled

    def _any_strategy_enabled(self, flag: FeatureFlag, context: EvaluationContext) -> bool:
        for definition in flag.strategies:
            strategy = self._registry.get(definition.name)
            if strategy is None:
                logger.warning(
                    "Strategy not registered, treating as disabled",
                    extra={"flag_key": flag.flag_key, "strategy": definition.name},
                )
                continue
            if strategy.is_enabled(definition.parameters, context):
                return True
        return False

    def _complete_context(
        self, flag: FeatureFlag, context: EvaluationContext
    ) -> EvaluationContext:
        """フラグ名と設定値で空のフィールドを補ったコンテキストを返す。"""
        return dataclasses.replace(
            context,
            feature_toggle=flag.flag_key,
            app_name=context.app_name or self._config.app_name or None,
            environment=context.environment or self._config.environment or None,
        )
