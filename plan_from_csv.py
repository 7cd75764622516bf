# plan_from_csv.py
# Reads delivery jobs from CSV, works out pickups and drops, prints results.
# Also saves the plan into output/delivery_plan.csv

import argparse
import csv
import logging
import os
import sys

from delivery_planner.inputs import (
    InputError,
    build_job,
    is_done,
    normalize_location_names,
)
from delivery_planner.logging_config import get_logger, setup_logging
from delivery_planner.models import PlannerConfig
from delivery_planner.planner import plan_to_rows, process_jobs
from delivery_planner.report import format_report

logger = get_logger(__name__)

PLAN_COLUMNS = ["section", "location", "job", "units", "box4", "box2", "box1"]


def load_jobs_from_csv(csv_path, location_count=4):
    """
    First column is the resource name, the other columns are locations.
    Returns (location_names, jobs).
    """
    jobs = []
    with open(csv_path, newline="", encoding="utf-8-sig") as f:
        reader = csv.reader(f)
        header = next(reader, None)
        if header is None:
            raise InputError(f"{csv_path} is empty")

        location_names = normalize_location_names(header[1:], location_count)

        for row in reader:
            if len(row) == 0 or row[0].strip() == "":
                continue
            if is_done(row[0]):
                break

            try:
                job = build_job(row[0], row[1:], location_names)
            except InputError as e:
                raise InputError(f"{csv_path}, line {reader.line_num}: {e}") from e

            if job is not None:
                jobs.append(job)

    return location_names, jobs


def parse_args(argv=None):
    defaults = PlannerConfig()
    parser = argparse.ArgumentParser(
        description="Plan resource pickups and drop-offs from a CSV file."
    )

    parser.add_argument(
        "--file",
        default="delivery_planner/data/jobs_example.csv",
        help="Path to the CSV file with one job per row."
    )

    parser.add_argument(
        "--output",
        default="output/delivery_plan.csv",
        help="Where to save the plan as CSV."
    )

    parser.add_argument(
        "--locations",
        type=int,
        default=defaults.location_count,
        help="Number of delivery locations."
    )

    parser.add_argument(
        "--name-width",
        type=int,
        default=defaults.name_width,
        help="Width of the job name column in the printed report."
    )

    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level."
    )

    return parser.parse_args(argv)


def save_results_to_csv(result, output_path):
    folder = os.path.dirname(output_path)
    if folder != "" and not os.path.exists(folder):
        os.makedirs(folder)

    rows = plan_to_rows(result)

    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=PLAN_COLUMNS)
        writer.writeheader()
        writer.writerows(rows)

        # Blank line, then the grand total
        writer.writerow({})
        writer.writerow({"section": "TOTAL", "units": result["total_units"]})


def main(argv=None):
    # 1. Read command-line arguments
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    cfg = PlannerConfig(location_count=args.locations, name_width=args.name_width)
    logger.info(f"Using CSV file: {args.file}")

    # 2. Load jobs from CSV
    try:
        location_names, jobs = load_jobs_from_csv(args.file, cfg.location_count)
    except (InputError, OSError, UnicodeDecodeError) as e:
        logger.error(str(e))
        sys.exit(2)

    print("Locations set:", ", ".join(location_names))

    if len(jobs) == 0:
        print(format_report(None))
        return None

    # 3. Work out pickups and drops
    result = process_jobs(jobs, location_names)

    # 4. Print results to terminal
    print(format_report(result, cfg.name_width))

    # 5. Save results to CSV file
    save_results_to_csv(result, args.output)
    print()
    print("Saved delivery plan to:", args.output)
    return result


if __name__ == "__main__":
    main()
