"""rollout ライブラリのテスト共通ヘルパー"""

from __future__ import annotations


class FixedSequence:
    """決まった値を順に返す乱数ジェネレータ。"""

    def __init__(self, *values: str) -> None:
        self._values = list(values)
        self.calls = 0

    def __call__(self) -> str:
        value = self._values[self.calls % len(self._values)]
        self.calls += 1
        return value
