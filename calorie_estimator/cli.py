"""Command-line interface for the calorie estimator."""

import argparse
import logging
import sys

from calorie_estimator.calculator import RESTING_BURN_NOT_READY, calculate_resting_burn
from calorie_estimator.config import (
    ACTIVITY_MULTIPLIERS,
    DEFAULT_ACTIVITY,
    DEFAULT_FOOD_QUALITY,
    DEFAULT_GOAL,
    DEFAULT_SEX,
    DEFAULT_SLEEP,
    DEFAULT_STRESS,
    DEFAULT_WATER,
    FOOD_QUALITY_MULTIPLIERS,
    GOAL_DEFICITS,
    LOG_LEVEL,
    MEDICAL_ADJUSTMENTS,
    SEX_CONSTANTS,
    SLEEP_ADJUSTMENTS,
    STRESS_ADJUSTMENTS,
    WATER_ADJUSTMENTS,
)
from calorie_estimator.estimator import estimate
from calorie_estimator.models import BiometricInput, GoalInput, LifestyleInput, NotReady
from calorie_estimator.report import format_resting_burn, format_result
from calorie_estimator.units import IMPERIAL, METRIC, UNIT_SYSTEMS, lbs_to_kg

logger = logging.getLogger(__name__)


# --- Input helpers ---

def _biometrics_from_args(args) -> BiometricInput:
    if args.units == IMPERIAL:
        weight_kg = lbs_to_kg(args.weight) if args.weight is not None else None
        return BiometricInput(
            sex=args.sex,
            age=args.age,
            weight_kg=weight_kg,
            height_unit=IMPERIAL,
            height_feet=args.feet,
            height_inches=args.inches if args.inches is not None else 0,
        )
    return BiometricInput(
        sex=args.sex,
        age=args.age,
        weight_kg=args.weight,
        height_cm=args.height,
        height_unit=METRIC,
    )


def _check_unit_flags(parser: argparse.ArgumentParser, args) -> None:
    if args.units == IMPERIAL and args.height is not None:
        parser.error("--height is for metric units; use --feet/--inches with --units imperial")
    if args.units == METRIC and (args.feet is not None or args.inches is not None):
        parser.error("--feet/--inches need --units imperial; use --height in cm for metric")


def _lifestyle_from_args(args) -> LifestyleInput:
    return LifestyleInput(
        sleep_quality=args.sleep,
        stress_level=args.stress,
        water_intake=args.water,
        food_quality=args.food,
        medical_conditions=frozenset(args.medical or ()),
    )


def _goal_from_args(args) -> GoalInput:
    return GoalInput(target_goal=args.goal, activity_level=args.activity)


# --- Command handlers ---

def cmd_bmr(args):
    resting_burn = calculate_resting_burn(_biometrics_from_args(args))
    print(format_resting_burn(resting_burn))
    if resting_burn == RESTING_BURN_NOT_READY:
        sys.exit(1)


def cmd_estimate(args):
    result = estimate(
        _biometrics_from_args(args),
        _lifestyle_from_args(args),
        _goal_from_args(args),
    )
    if isinstance(result, NotReady):
        print(result.message)
        sys.exit(1)
    print(format_result(result))


# --- Argument parser ---

def _add_biometric_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--units", choices=UNIT_SYSTEMS, default=METRIC,
                        help="Unit system for weight and height (default: metric)")
    parser.add_argument("--sex", choices=list(SEX_CONSTANTS.keys()), default=DEFAULT_SEX)
    parser.add_argument("--age", type=int, required=True, help="Age in years (15 or older)")
    parser.add_argument("--weight", type=float, required=True,
                        help="Weight in kg (metric) or lbs (imperial)")
    parser.add_argument("--height", type=float, help="Height in cm (metric)")
    parser.add_argument("--feet", type=int, help="Height feet (imperial)")
    parser.add_argument("--inches", type=int, help="Height inches (imperial, default: 0)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calorie_estimator",
        description="Personalized daily calorie target estimator",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- bmr ---
    bmr_p = subparsers.add_parser("bmr", help="Show resting burn (BMR) only")
    _add_biometric_arguments(bmr_p)
    bmr_p.set_defaults(func=cmd_bmr)

    # --- estimate ---
    est_p = subparsers.add_parser("estimate", help="Calculate the daily calorie target")
    _add_biometric_arguments(est_p)
    est_p.add_argument("--activity", choices=list(ACTIVITY_MULTIPLIERS.keys()),
                       default=DEFAULT_ACTIVITY, help="Activity level")
    est_p.add_argument("--goal", choices=list(GOAL_DEFICITS.keys()),
                       default=DEFAULT_GOAL, help="Weight goal")
    est_p.add_argument("--food", choices=list(FOOD_QUALITY_MULTIPLIERS.keys()),
                       default=DEFAULT_FOOD_QUALITY, help="Food quality")
    est_p.add_argument("--sleep", choices=list(SLEEP_ADJUSTMENTS.keys()),
                       default=DEFAULT_SLEEP, help="Sleep quality")
    est_p.add_argument("--stress", choices=list(STRESS_ADJUSTMENTS.keys()),
                       default=DEFAULT_STRESS, help="Stress level")
    est_p.add_argument("--water", choices=list(WATER_ADJUSTMENTS.keys()),
                       default=DEFAULT_WATER, help="Water intake")
    est_p.add_argument("--medical", nargs="*", choices=list(MEDICAL_ADJUSTMENTS.keys()),
                       default=[], help="Medical conditions (any number)")
    est_p.set_defaults(func=cmd_estimate)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return

    _check_unit_flags(parser, args)
    logger.debug("Running %s with %s", args.command, vars(args))
    args.func(args)
