"""Tests for the calorie calculation engine."""

import unittest

from calorie_estimator.calculator import (
    RESTING_BURN_NOT_READY,
    calculate_lifestyle_adjustment,
    calculate_lifestyle_breakdown,
    calculate_resting_burn,
    calculate_total_daily_burn,
    compose_target,
    medical_adjustment,
    round_half_up,
)
from calorie_estimator.models import BiometricInput, LifestyleInput


def _male(**overrides):
    values = dict(sex="male", age=30, weight_kg=80, height_cm=180)
    values.update(overrides)
    return BiometricInput(**values)


class TestRestingBurn(unittest.TestCase):
    def test_male(self):
        # 10*80 + 6.25*180 - 5*30 + 5 = 800 + 1125 - 150 + 5 = 1780
        self.assertEqual(calculate_resting_burn(_male()), 1780)

    def test_female(self):
        profile = BiometricInput(sex="female", age=25, weight_kg=60, height_cm=165)
        # 600 + 1031.25 - 125 - 161 = 1345.25
        self.assertEqual(calculate_resting_burn(profile), 1345)

    def test_rounds_half_up(self):
        # 802.5 + 1125 - 150 + 5 = 1782.5
        self.assertEqual(calculate_resting_burn(_male(weight_kg=80.25)), 1783)

    def test_imperial_height(self):
        profile = BiometricInput(
            sex="male", age=30, weight_kg=80,
            height_unit="imperial", height_feet=5, height_inches=10,
        )
        # 800 + 6.25*177.8 - 150 + 5 = 1766.25
        self.assertEqual(calculate_resting_burn(profile), 1766)

    def test_minimum_age_accepted(self):
        self.assertGreater(calculate_resting_burn(_male(age=15)), 0)

    def test_not_ready(self):
        cases = [
            _male(age=14),
            _male(weight_kg=0),
            _male(weight_kg=-5),
            _male(height_cm=99.9),
            _male(age=None),
            _male(weight_kg="abc"),
            _male(height_cm=None),
            _male(age=""),
        ]
        for profile in cases:
            self.assertEqual(calculate_resting_burn(profile), RESTING_BURN_NOT_READY, f"Failed for {profile}")

    def test_negative_formula_result_passes_through(self):
        # 10 + 625 - 1000 - 161 = -526
        profile = BiometricInput(sex="female", age=200, weight_kg=1, height_cm=100)
        self.assertEqual(calculate_resting_burn(profile), -526)

    def test_formula_result_of_zero_is_not_ready(self):
        # 10 + 625 - 640 + 5 = 0 collides with the reserved value
        profile = BiometricInput(sex="male", age=128, weight_kg=1, height_cm=100)
        self.assertEqual(calculate_resting_burn(profile), RESTING_BURN_NOT_READY)

    def test_increases_with_weight(self):
        self.assertGreater(calculate_resting_burn(_male(weight_kg=90)), calculate_resting_burn(_male()))


class TestTotalDailyBurn(unittest.TestCase):
    def test_moderate_balanced(self):
        # 1780 * 1.55 = 2759
        self.assertEqual(calculate_total_daily_burn(1780, "moderate", "balanced"), 2759)

    def test_sedentary(self):
        self.assertEqual(calculate_total_daily_burn(1780, "sedentary", "balanced"), 2136)

    def test_unknown_activity_defaults_to_sedentary(self):
        self.assertEqual(
            calculate_total_daily_burn(1780, "unknown", "balanced"),
            calculate_total_daily_burn(1780, "sedentary", "balanced"),
        )

    def test_food_quality(self):
        # 2759 * 1.03 = 2841.77, 2759 * 0.97 = 2676.23
        self.assertEqual(calculate_total_daily_burn(1780, "moderate", "high_protein"), 2842)
        self.assertEqual(calculate_total_daily_burn(1780, "moderate", "high_processed"), 2676)

    def test_unknown_food_quality_is_neutral(self):
        self.assertEqual(calculate_total_daily_burn(1780, "moderate", "keto"), 2759)


class TestLifestyleAdjustment(unittest.TestCase):
    def test_neutral(self):
        self.assertEqual(calculate_lifestyle_adjustment(LifestyleInput()), 0)

    def test_all_factors(self):
        lifestyle = LifestyleInput(
            sleep_quality="less_than_six",
            stress_level="high",
            water_intake="low",
            medical_conditions=frozenset({"hypothyroid"}),
        )
        # 100 + 150 + 75 + 150
        self.assertEqual(calculate_lifestyle_adjustment(lifestyle), 475)

    def test_breakdown(self):
        lifestyle = LifestyleInput(
            sleep_quality="six_to_seven",
            stress_level="moderate",
            water_intake="adequate",
            medical_conditions=frozenset({"pcos", "appetite_meds"}),
        )
        self.assertEqual(
            calculate_lifestyle_breakdown(lifestyle),
            {"sleep": 50, "stress": 75, "water": 25, "medical": 220},
        )

    def test_unknown_keys_contribute_zero(self):
        lifestyle = LifestyleInput(sleep_quality="nap", stress_level="zen", water_intake="ocean")
        self.assertEqual(calculate_lifestyle_adjustment(lifestyle), 0)

    def test_medical_sum(self):
        self.assertEqual(medical_adjustment({"hypothyroid", "pcos"}), 250)
        self.assertEqual(medical_adjustment(["pcos", "hypothyroid"]), 250)
        self.assertEqual(medical_adjustment(set()), 0)
        self.assertEqual(medical_adjustment({"none_apply"}), 0)
        self.assertEqual(medical_adjustment({"none_apply", "insulin_resistance"}), 80)

    def test_medical_uncapped(self):
        everything = {"hypothyroid", "pcos", "insulin_resistance", "appetite_meds"}
        self.assertEqual(medical_adjustment(everything), 450)


class TestComposeTarget(unittest.TestCase):
    def test_moderate_loss(self):
        target = compose_target(2759, "moderate_loss", 0)
        self.assertEqual(target.goal_deficit, 500)
        self.assertEqual(target.base_target_calories, 2259)
        self.assertEqual(target.final_target_calories, 2259)
        # 17500 / 500 / 7 = 5.0
        self.assertAlmostEqual(target.weeks_to_goal, 5.0)
        self.assertEqual(
            target.timeline_message,
            "Achieving this target aims for a 5lb loss in approximately 5.0 weeks.",
        )

    def test_daily_deficit_ignores_lifestyle(self):
        target = compose_target(2759, "moderate_loss", 475)
        self.assertEqual(target.final_target_calories, 2734)
        self.assertEqual(target.daily_deficit, 500)
        self.assertAlmostEqual(target.weeks_to_goal, 5.0)

    def test_aggressive_loss(self):
        target = compose_target(2759, "aggressive_loss", 0)
        self.assertEqual(target.base_target_calories, 2009)
        # 17500 / 750 / 7 = 3.33
        self.assertIn("approximately 3.3 weeks", target.timeline_message)

    def test_gain(self):
        target = compose_target(2759, "moderate_gain", 0)
        self.assertEqual(target.base_target_calories, 3009)
        self.assertIsNone(target.weeks_to_goal)
        self.assertEqual(
            target.timeline_message,
            "Targeting a surplus of 250 kcal/day to support gaining weight.",
        )

    def test_maintenance(self):
        target = compose_target(2759, "maintenance", 100)
        self.assertEqual(target.base_target_calories, 2759)
        self.assertEqual(target.final_target_calories, 2859)
        self.assertEqual(
            target.timeline_message,
            "This target aims to keep your weight stable (maintenance).",
        )

    def test_unknown_goal_is_neutral(self):
        target = compose_target(2759, "bulk", 0)
        self.assertEqual(target.goal_deficit, 0)
        self.assertEqual(target.base_target_calories, 2759)

    def test_loss_named_goal_without_deficit(self):
        # Unknown goal named like a loss goal has no deficit
        target = compose_target(2759, "slow_loss", 0)
        self.assertEqual(target.timeline_message, "You are currently aiming for maintenance or gain.")
        self.assertIsNone(target.weeks_to_goal)


class TestRounding(unittest.TestCase):
    def test_round_half_up(self):
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(3.5), 4)
        self.assertEqual(round_half_up(2.49), 2)
        self.assertEqual(round_half_up(-2.5), -2)


if __name__ == "__main__":
    unittest.main()
