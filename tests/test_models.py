"""Tests for data models."""

import dataclasses
import unittest

from calorie_estimator.models import NOT_READY, BiometricInput, EstimationResult, LifestyleInput, NotReady


class TestBiometricInput(unittest.TestCase):
    def test_resolved_height_metric(self):
        b = BiometricInput(sex="female", age=40, weight_kg=70, height_cm=165)
        self.assertEqual(b.resolved_height_cm(), 165)

    def test_resolved_height_imperial(self):
        b = BiometricInput(sex="female", age=40, weight_kg=70,
                           height_unit="imperial", height_feet=5, height_inches=10)
        self.assertEqual(b.resolved_height_cm(), 177.8)

    def test_resolved_height_missing(self):
        b = BiometricInput(sex="female", age=40, weight_kg=70)
        self.assertEqual(b.resolved_height_cm(), 0)

    def test_frozen(self):
        b = BiometricInput(sex="male", age=30, weight_kg=80, height_cm=180)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            b.age = 31


class TestLifestyleInput(unittest.TestCase):
    def test_defaults_are_neutral(self):
        lifestyle = LifestyleInput()
        self.assertEqual(lifestyle.sleep_quality, "optimal")
        self.assertEqual(lifestyle.stress_level, "low")
        self.assertEqual(lifestyle.water_intake, "ideal")
        self.assertEqual(lifestyle.food_quality, "balanced")
        self.assertEqual(lifestyle.medical_conditions, frozenset())

    def test_equal_condition_sets(self):
        a = LifestyleInput(medical_conditions=frozenset({"pcos", "hypothyroid"}))
        b = LifestyleInput(medical_conditions=frozenset({"hypothyroid", "pcos"}))
        self.assertEqual(a, b)


class TestEstimationResult(unittest.TestCase):
    def test_breakdown_dict(self):
        result = EstimationResult(
            resting_burn=1780, total_daily_burn=2759, base_target_calories=2259,
            lifestyle_adjustment=100, final_target_calories=2359, timeline_message="",
            adjustment_breakdown=(("sleep", 100), ("stress", 0)),
        )
        self.assertEqual(result.breakdown_dict(), {"sleep": 100, "stress": 0})


class TestNotReady(unittest.TestCase):
    def test_default_message(self):
        self.assertEqual(NotReady(), NOT_READY)
        self.assertEqual(NOT_READY.message, "Please enter your Age, Weight, and Height.")


if __name__ == "__main__":
    unittest.main()
