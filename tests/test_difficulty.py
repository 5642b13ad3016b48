# Area: Core Tests
"""Tests for difficulty scaling."""

import pytest

from car_counter.config import GameConfig
from car_counter._core.difficulty import RoundParams, params_for_round, time_level
from car_counter._core.enums import TimeLevel


class TestParamsForRound:
    """Tests for params_for_round()."""

    def test_round_one_uses_start_values(self):
        params = params_for_round(1, GameConfig())
        assert params == RoundParams(max_items=18, time_limit=14)

    def test_round_four(self):
        params = params_for_round(4, GameConfig())
        assert params.max_items == 18 + 3 * 2
        assert params.time_limit == 14 - 3

    def test_time_limit_bottoms_out(self):
        # 14 - 8 = 6 at round 9, stays at 6 afterwards
        config = GameConfig()
        assert params_for_round(9, config).time_limit == 6
        assert params_for_round(50, config).time_limit == 6

    def test_max_items_capped(self):
        # 18 + 21 * 2 = 60 at round 22
        config = GameConfig()
        assert params_for_round(22, config).max_items == 60
        assert params_for_round(500, config).max_items == 60

    @pytest.mark.parametrize("cfg", [
        GameConfig(),
        GameConfig(min_items=1, start_max_items=5, max_items_cap=9,
                   max_items_increment=3, start_time_limit=10,
                   min_time_limit=2, time_decrement=4),
    ])
    def test_formulas_and_monotonicity(self, cfg):
        previous = None
        for r in range(1, 80):
            params = params_for_round(r, cfg)
            assert params.max_items == min(
                cfg.start_max_items + (r - 1) * cfg.max_items_increment, cfg.max_items_cap)
            assert params.time_limit == max(
                cfg.start_time_limit - (r - 1) * cfg.time_decrement, cfg.min_time_limit)
            assert params.max_items <= cfg.max_items_cap
            assert params.time_limit >= cfg.min_time_limit
            if previous is not None:
                assert params.max_items >= previous.max_items
                assert params.time_limit <= previous.time_limit
            previous = params


class TestTimeLevel:
    """Tests for the HUD urgency classification."""

    def test_levels_follow_thresholds(self):
        config = GameConfig()
        assert time_level(14, config) is TimeLevel.NORMAL
        assert time_level(7, config) is TimeLevel.NORMAL
        assert time_level(6, config) is TimeLevel.WARN
        assert time_level(4, config) is TimeLevel.WARN
        assert time_level(3, config) is TimeLevel.PANIC
        assert time_level(0, config) is TimeLevel.PANIC
