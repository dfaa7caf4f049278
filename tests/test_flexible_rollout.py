"""flexibleRollout 戦略のユニットテスト"""

import pytest
from k1s0_rollout import (
    EvaluationContext,
    FlexibleRolloutStrategy,
    RolloutParameters,
    normalized_value,
)

from conftest import FixedSequence


def test_name() -> None:
    assert FlexibleRolloutStrategy().name == "flexibleRollout"


def test_enabled_for_full_rollout() -> None:
    strategy = FlexibleRolloutStrategy()
    ctx = EvaluationContext(user_id="anything")
    assert strategy.is_enabled({"rollout": "100"}, ctx) is True


def test_disabled_for_zero_rollout() -> None:
    """rollout=0 は常に無効。"""
    strategy = FlexibleRolloutStrategy()
    for i in range(200):
        ctx = EvaluationContext(user_id=f"user-{i}")
        assert strategy.is_enabled({"rollout": "0"}, ctx) is False


@pytest.mark.parametrize("rollout", [None, "", "abc", "NaN", [], {}])
def test_invalid_rollout_is_disabled(rollout: object) -> None:
    strategy = FlexibleRolloutStrategy()
    ctx = EvaluationContext(user_id="u1")
    assert strategy.is_enabled({"rollout": rollout}, ctx) is False


def test_missing_rollout_is_disabled() -> None:
    strategy = FlexibleRolloutStrategy()
    assert strategy.is_enabled({}, EvaluationContext(user_id="u1")) is False


def test_numeric_rollout_accepted() -> None:
    strategy = FlexibleRolloutStrategy()
    assert strategy.is_enabled({"rollout": 100}, EvaluationContext(user_id="u1")) is True


def test_same_input_same_decision() -> None:
    """同じ入力なら常に同じ判定。"""
    strategy = FlexibleRolloutStrategy()
    params = {"rollout": "50", "groupId": "g1", "stickiness": "default"}
    ctx = EvaluationContext(user_id="u1")
    first = strategy.is_enabled(params, ctx)
    assert all(strategy.is_enabled(params, ctx) is first for _ in range(50))


@pytest.mark.parametrize("percentage", [1, 10, 33, 50, 99])
def test_decision_matches_bucket(percentage: int) -> None:
    """バケット <= rollout の場合のみ有効 (上限を含む)。"""
    strategy = FlexibleRolloutStrategy()
    for i in range(100):
        user_id = f"user-{i}"
        bucket = normalized_value(user_id, "g1")
        enabled = strategy.is_enabled(
            {"rollout": str(percentage), "groupId": "g1"}, EvaluationContext(user_id=user_id)
        )
        assert enabled is (bucket <= percentage)


def test_boundary_bucket_is_inclusive() -> None:
    strategy = FlexibleRolloutStrategy()
    bucket = normalized_value("u1", "g1")
    ctx = EvaluationContext(user_id="u1")
    assert strategy.is_enabled({"rollout": str(bucket), "groupId": "g1"}, ctx) is True
    if bucket > 1:
        assert strategy.is_enabled({"rollout": str(bucket - 1), "groupId": "g1"}, ctx) is False


def test_rollout_is_monotonic() -> None:
    """ある割合で有効なら、それより大きい割合でも有効。"""
    strategy = FlexibleRolloutStrategy()
    for i in range(50):
        ctx = EvaluationContext(user_id=f"user-{i}")
        decisions = [
            strategy.is_enabled({"rollout": str(p), "groupId": "g1"}, ctx) for p in range(101)
        ]
        first_enabled = decisions.index(True)
        assert all(decisions[first_enabled:])
        assert not any(decisions[:first_enabled])


def test_group_id_defaults_to_feature_toggle() -> None:
    strategy = FlexibleRolloutStrategy()
    bucket = normalized_value("u1", "feature-a")
    ctx = EvaluationContext(user_id="u1", feature_toggle="feature-a")
    assert strategy.is_enabled({"rollout": str(bucket)}, ctx) is True
    assert strategy.is_enabled({"rollout": str(bucket), "groupId": ""}, ctx) is True


def test_group_id_defaults_to_empty_string() -> None:
    strategy = FlexibleRolloutStrategy()
    bucket = normalized_value("u1", "")
    ctx = EvaluationContext(user_id="u1")
    assert strategy.is_enabled({"rollout": str(bucket)}, ctx) is True


def test_session_id_used_without_user_id() -> None:
    gen = FixedSequence("1")
    strategy = FlexibleRolloutStrategy(gen)
    bucket = normalized_value("s1", "g1")
    ctx = EvaluationContext(session_id="s1")
    assert strategy.is_enabled({"rollout": str(bucket), "groupId": "g1"}, ctx) is True
    assert gen.calls == 0


def test_default_stickiness_uses_random_without_identity() -> None:
    gen = FixedSequence("42")
    strategy = FlexibleRolloutStrategy(gen)
    bucket = normalized_value("42", "g1")
    params = {"rollout": str(bucket), "groupId": "g1"}
    assert strategy.is_enabled(params, EvaluationContext()) is True
    assert gen.calls == 1


def test_random_stickiness_ignores_user_id() -> None:
    gen = FixedSequence("42")
    strategy = FlexibleRolloutStrategy(gen)
    params = {"rollout": "100", "groupId": "g1", "stickiness": "random"}
    assert strategy.is_enabled(params, EvaluationContext(user_id="u1", session_id="s1")) is True
    assert gen.calls == 1
    assert strategy.resolve_stickiness("random", EvaluationContext(user_id="u1")) == "42"


def test_custom_stickiness_field() -> None:
    strategy = FlexibleRolloutStrategy()
    bucket = normalized_value("c-9", "g1")
    params = {"rollout": str(bucket), "groupId": "g1", "stickiness": "customerId"}
    ctx = EvaluationContext(user_id="u1", properties={"customerId": "c-9"})
    assert strategy.is_enabled(params, ctx) is True


def test_missing_custom_field_is_disabled() -> None:
    """コンテキストにないフィールドは常に無効。"""
    gen = FixedSequence("1")
    strategy = FlexibleRolloutStrategy(gen)
    params = {"rollout": "100", "stickiness": "customerId"}
    assert strategy.is_enabled(params, EvaluationContext(user_id="u1")) is False
    assert gen.calls == 0


def test_parameters_are_not_mutated() -> None:
    strategy = FlexibleRolloutStrategy()
    params = {"rollout": "50"}
    strategy.is_enabled(params, EvaluationContext(user_id="u1"))
    assert params == {"rollout": "50"}


def test_rollout_parameters_defaults() -> None:
    params = RolloutParameters.from_mapping(None)
    assert params.group_id == ""
    assert params.rollout == 0.0
    assert params.stickiness == "default"


def test_rollout_parameters_parse_aliases() -> None:
    params = RolloutParameters.from_mapping(
        {"groupId": "g1", "rollout": " 25 ", "stickiness": "tenantId", "extra": "x"}
    )
    assert params.group_id == "g1"
    assert params.rollout == 25.0
    assert params.stickiness == "tenantId"


def test_rollout_parameters_empty_stickiness_is_default() -> None:
    assert RolloutParameters.from_mapping({"stickiness": ""}).stickiness == "default"
