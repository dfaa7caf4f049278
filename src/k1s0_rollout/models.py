"""フラグ定義・評価結果データモデル"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .stickiness import Stickiness


@dataclass
class StrategyDefinition:
    """フラグに紐づく戦略定義。"""

    name: str
    parameters: dict[str, Any] = field(default_factory=dict)


@dataclass
class FlagVariant:
    """フラグバリアント。"""

    name: str
    value: str = ""
    weight: int = 0
    stickiness: str = Stickiness.DEFAULT


@dataclass
class FeatureFlag:
    """フィーチャーフラグ。"""

    id: str
    flag_key: str
    description: str = ""
    enabled: bool = False
    strategies: list[StrategyDefinition] = field(default_factory=list)
    variants: list[FlagVariant] = field(default_factory=list)


class EvaluationReason:
    """評価理由の定数。"""

    FLAG_DISABLED: str = "FLAG_DISABLED"
    NO_STRATEGIES: str = "NO_STRATEGIES"
    STRATEGY_MATCH: str = "STRATEGY_MATCH"
    NO_STRATEGY_MATCH: str = "NO_STRATEGY_MATCH"


@dataclass
class EvaluationResult:
    """フラグ評価結果。"""

    flag_key: str
    enabled: bool
    variant: str | None = None
    reason: str = ""
