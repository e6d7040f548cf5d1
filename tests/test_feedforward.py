import math

import pytest

from drive_constraints.feedforward import SimpleMotorFeedforward


@pytest.fixture
def feedforward():
    return SimpleMotorFeedforward(0.5, 2.0, 0.25)


class TestSimpleMotorFeedforward:
    def test_calculate(self, feedforward):
        assert feedforward.calculate(1.0, 2.0) == pytest.approx(0.5 + 2.0 + 0.5)

    def test_calculate_reverse_opposes_static_friction(self, feedforward):
        assert feedforward.calculate(-1.0) == pytest.approx(-2.5)

    def test_calculate_at_rest_has_no_static_term(self, feedforward):
        assert feedforward.calculate(0.0, 0.0) == 0.0

    def test_max_achievable_acceleration(self, feedforward):
        # (10 - 0.5 - 2*2) / 0.25
        assert feedforward.max_achievable_acceleration(10.0, 2.0) == pytest.approx(22.0)

    def test_min_achievable_acceleration(self, feedforward):
        # (-10 - 0.5 - 2*2) / 0.25
        assert feedforward.min_achievable_acceleration(10.0, 2.0) == pytest.approx(-58.0)

    def test_achievable_acceleration_at_rest(self, feedforward):
        assert feedforward.max_achievable_acceleration(10.0, 0.0) == pytest.approx(40.0)
        assert feedforward.min_achievable_acceleration(10.0, 0.0) == pytest.approx(-40.0)

    def test_max_acceleration_inverts_calculate(self, feedforward):
        acceleration = feedforward.max_achievable_acceleration(10.0, 1.2)

        assert feedforward.calculate(1.2, acceleration) == pytest.approx(10.0)

    def test_achievable_velocity(self, feedforward):
        assert feedforward.max_achievable_velocity(10.0, 2.0) == pytest.approx((10.0 - 0.5 - 0.5) / 2.0)
        assert feedforward.min_achievable_velocity(10.0, 2.0) == pytest.approx((-10.0 + 0.5 - 0.5) / 2.0)

    def test_achievable_velocity_without_kv_is_unbounded(self):
        feedforward = SimpleMotorFeedforward(0.0, 0.0, 1.0)

        assert feedforward.max_achievable_velocity(10.0, 0.0) == math.inf
        assert feedforward.min_achievable_velocity(10.0, 0.0) == -math.inf

    def test_returns_python_floats(self, feedforward):
        assert type(feedforward.max_achievable_acceleration(10.0, -1.0)) is float
        assert type(feedforward.calculate(1.0)) is float

    @pytest.mark.parametrize("kv,ka", [(-1.0, 0.2), (1.0, 0.0), (1.0, -0.1)])
    def test_invalid_gains_are_rejected(self, kv, ka):
        with pytest.raises(ValueError):
            SimpleMotorFeedforward(0.1, kv, ka)

    def test_get_diagnostics(self, feedforward):
        diagnostics = feedforward.get_diagnostics(10.0, 2.0)

        assert diagnostics["max_acceleration"] == pytest.approx(22.0)
        assert diagnostics["min_acceleration"] == pytest.approx(-58.0)
        assert diagnostics["ka"] == 0.25
