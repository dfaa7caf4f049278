"""Strategy プロトコルとレジストリ"""

from __future__ import annotations

from typing import Any, Iterator, Mapping, Protocol, runtime_checkable

from .context import EvaluationContext
from .exceptions import FeatureFlagError, FeatureFlagErrorCodes
from .flexible_rollout import FlexibleRolloutStrategy


@runtime_checkable
class Strategy(Protocol):
    """有効化ルールのプロトコル。"""

    name: str

    def is_enabled(
        self, parameters: Mapping[str, Any], context: EvaluationContext
    ) -> bool: ...


class StrategyRegistry:
    """戦略名から Strategy 実装を引くレジストリ。"""

    def __init__(self, strategies: list[Strategy] | None = None) -> None:
        self._strategies: dict[str, Strategy] = {}
        for strategy in strategies or []:
            self.register(strategy)

    def register(self, strategy: Strategy, *, replace: bool = False) -> None:
        """戦略を登録する。

        Args:
            strategy: 登録する戦略
            replace: True の場合、同名の戦略を置き換える

        Raises:
            FeatureFlagError: 同名の戦略が登録済みで replace=False の場合
        """
        if strategy.name in self._strategies and not replace:
            raise FeatureFlagError(
                FeatureFlagErrorCodes.DUPLICATE_STRATEGY,
                f"Strategy already registered: {strategy.name}",
            )
        self._strategies[strategy.name] = strategy

    def get(self, name: str) -> Strategy | None:
        return self._strategies.get(name)

    def require(self, name: str) -> Strategy:
        """戦略を取得する。未登録ならエラー。"""
        strategy = self._strategies.get(name)
        if strategy is None:
            raise FeatureFlagError(
                FeatureFlagErrorCodes.STRATEGY_NOT_FOUND,
                f"Strategy not registered: {name}",
            )
        return strategy

    def names(self) -> list[str]:
        return sorted(self._strategies)

    def __contains__(self, name: object) -> bool:
        return name in self._strategies

    def __iter__(self) -> Iterator[Strategy]:
        return iter(list(self._strategies.values()))

    def __len__(self) -> int:
        return len(self._strategies)


def default_registry() -> StrategyRegistry:
    """組み込み戦略を登録したレジストリを返す。"""
    return StrategyRegistry([FlexibleRolloutStrategy()])
