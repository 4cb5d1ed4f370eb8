import pytest

from party.logic.accumulator import apply_round_result, normalized_totals
from party.logic.enums import Category
from party.tests.conftest import create_player, scores


class TestApplyRoundResult:
    def test_adds_points_to_round_category(self):
        player = create_player(0)
        apply_round_result([player], {0: 7}, Category.MASH)
        assert player.category_totals == {Category.REFLEX: 0, Category.MASH: 7, Category.HOLD: 0}

    def test_totals_across_rounds(self):
        """Three reflex rounds awarding 10, 7, 10 total 27."""
        player = create_player(0)
        for awarded in (10, 7, 10):
            apply_round_result([player], {0: awarded}, Category.REFLEX)
        assert player.category_totals[Category.REFLEX] == 27

    def test_applying_twice_double_counts(self):
        """Application is not idempotent; callers must apply each round once."""
        player = create_player(0)
        apply_round_result([player], {0: 10}, Category.HOLD)
        apply_round_result([player], {0: 10}, Category.HOLD)
        assert player.category_totals[Category.HOLD] == 20

    def test_absent_player_untouched(self):
        present = create_player(0)
        absent = create_player(1)
        absent.last_points = 4
        absent.last_raw_score = 321
        apply_round_result([present, absent], {0: 10}, Category.REFLEX, scores({0: 150}))
        assert absent.category_totals[Category.REFLEX] == 0
        assert absent.last_points == 4
        assert absent.last_raw_score == 321

    def test_records_last_round_fields(self):
        player = create_player(0)
        apply_round_result([player], {0: 5}, Category.MASH, scores({0: 42}))
        assert player.last_points == 5
        assert player.last_raw_score == 42

    def test_points_for_players_not_passed_are_ignored(self):
        player = create_player(0)
        apply_round_result([player], {0: 3, 9: 10}, Category.MASH)
        assert player.category_totals[Category.MASH] == 3


class TestNormalizedTotals:
    def test_scales_and_clamps(self):
        totals = {Category.REFLEX: 10, Category.MASH: 25, Category.HOLD: 0}
        assert normalized_totals(totals, 20) == {Category.REFLEX: 0.5, Category.MASH: 1.0, Category.HOLD: 0.0}

    def test_missing_category_reads_as_zero(self):
        assert normalized_totals({Category.REFLEX: 20}, 20)[Category.HOLD] == 0.0

    def test_rejects_non_positive_scale(self):
        with pytest.raises(ValueError, match="scale"):
            normalized_totals({}, 0)
