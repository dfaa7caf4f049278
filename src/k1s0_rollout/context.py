"""フラグ評価コンテキスト"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping

# 外部定義のフィールド名 (camelCase) と属性名の対応
_FIELD_ALIASES: dict[str, str] = {
    "userId": "user_id",
    "sessionId": "session_id",
    "remoteAddress": "remote_address",
    "appName": "app_name",
    "featureToggle": "feature_toggle",
    "currentTime": "current_time",
}

_BUILTIN_FIELDS = frozenset(_FIELD_ALIASES.values()) | {"environment"}


@dataclass(frozen=True)
class EvaluationContext:
    """フラグ評価コンテキスト。

    評価中は読み取り専用。複数回の評価で再利用してよい。
    """

    user_id: str | None = None
    session_id: str | None = None
    remote_address: str | None = None
    environment: str | None = None
    app_name: str | None = None
    feature_toggle: str | None = None
    current_time: datetime | None = None
    properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def with_feature_toggle(self, name: str) -> EvaluationContext:
        """フラグ名を設定したコピーを返す。"""
        return dataclasses.replace(self, feature_toggle=name)


def resolve_context_value(context: EvaluationContext, field_name: str) -> str:
    """コンテキストからフィールド値を取り出す。

    組み込みフィールド (userId などの camelCase 名も可) を優先し、
    なければ properties を参照する。見つからない場合は空文字列を返す。
    """
    attr = _FIELD_ALIASES.get(field_name, field_name)
    if attr in _BUILTIN_FIELDS:
        value = getattr(context, attr)
        if value:
            return value.isoformat() if isinstance(value, datetime) else str(value)
    value = context.properties.get(field_name)
    return str(value) if value else ""
