"""
Command-line entry point for generating a synthetic fishing forecast.

Generates the forecast set (daily records with three-hourly tide and wind
slices), evaluates each day's fishing and drone conditions, and writes the
result as JSON to stdout or a file.
"""
import argparse
import sys
from datetime import date
from pathlib import Path

from forecast_core.config import HORIZON_DAYS
from forecast_core.services import condition_evaluator
from forecast_core.services.forecast_generator import ForecastGenerator
from forecast_core.services.random_source import NumpyRandomSource
from forecast_core.utils.file_utils import forecasts_to_json, save_json


def print_summary(forecasts) -> None:
    """Print a one-line condition summary per day to stderr."""
    for day in forecasts:
        verdict = condition_evaluator.evaluate(
            day.wind_speed, day.wind_direction, day.wind_gust
        )
        drone = "no drone" if verdict.drone_not_an_option else (
            "drone caution" if verdict.should_warn_drone else "drone ok"
        )
        reason = f" ({verdict.drone_warning_reason})" if verdict.drone_warning_reason else ""
        print(
            f"{day.date_key}  {day.description:<13} {day.wind_direction:>2} "
            f"{day.wind_speed:>2}/{day.wind_gust:>2} km/h  "
            f"{verdict.condition:<4}  {drone}{reason}",
            file=sys.stderr,
        )


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Generate a synthetic fishing forecast")
    parser.add_argument(
        "--days",
        type=int,
        default=HORIZON_DAYS,
        help=f"Number of forecast days (default: {HORIZON_DAYS})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible output (default: entropy-seeded)",
    )
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=None,
        help="First forecast date, YYYY-MM-DD (default: current date)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write JSON to this file instead of stdout",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a per-day condition summary to stderr",
    )

    args = parser.parse_args()
    if args.days < 0:
        parser.error("--days must be non-negative")

    generator = ForecastGenerator(random_source=NumpyRandomSource(seed=args.seed))
    forecasts = generator.generate(horizon_days=args.days, today=args.today)

    if args.summary:
        print_summary(forecasts)

    payload = forecasts_to_json(forecasts)
    if args.output is not None:
        save_json(payload, args.output)
        print(f"Wrote {len(forecasts)} days to {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(payload.decode("utf-8") + "\n")


if __name__ == "__main__":
    main()
