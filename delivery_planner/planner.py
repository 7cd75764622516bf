# planner.py
# This file contains all logic for turning delivery jobs into a pickup
# summary and a drop-off list per location.

from .logging_config import get_logger
from .models import BoxCount

logger = get_logger(__name__)


def name_key(name):
    # Alphabetical ignoring case; ties keep a fixed order
    return (name.casefold(), name)


def calculate_boxes(amount):
    # Nothing to carry for zero or negative amounts
    if amount <= 0:
        return BoxCount()

    # Largest box first: 4, then 2, then whatever is left in 1s
    box4, amount = divmod(amount, 4)
    box2, box1 = divmod(amount, 2)

    return BoxCount(box4=box4, box2=box2, box1=box1)


def process_jobs(jobs, location_names):
    """
    jobs:           list of DeliveryJob objects, in the order they were entered
    location_names: the delivery locations declared for the session

    Each job gets a unique name ("Carbon 1", "Carbon 2", ...) from its
    position in the list. The result holds:
      pickup_summary -> [(unique name, BoxCount)] sorted by name
      location_drops -> {location: [(unique name, BoxCount)]} with every
                        declared location as a key, each list sorted by name
    """

    location_drops = {}
    for name in location_names:
        location_drops[name] = []

    pickup_summary = []

    for number, job in enumerate(jobs, start=1):
        unique_name = f"{job.resource_name} {number}"

        # Pickup is the whole job, boxed up once
        pickup_summary.append((unique_name, calculate_boxes(job.total_needed)))

        for location, amount in job.drops.items():
            if amount > 0:
                location_drops.setdefault(location, []).append(
                    (unique_name, calculate_boxes(amount))
                )

    pickup_summary.sort(key=lambda entry: name_key(entry[0]))
    for drop_list in location_drops.values():
        drop_list.sort(key=lambda entry: name_key(entry[0]))

    used = [name for name, drop_list in location_drops.items() if drop_list]
    logger.info(f"Processed {len(pickup_summary)} jobs across {len(used)} locations")
    logger.debug(f"Locations with drops: {used}")

    # Return results as a simple dictionary
    return {
        "pickup_summary": pickup_summary,
        "location_drops": location_drops,
        "total_units": sum(boxes.total for _, boxes in pickup_summary),
    }


def plan_to_rows(result):
    """
    Flatten a processed plan into one dict per line of the report.
    Pickups come first, then drops grouped by location (alphabetical).
    """
    rows = []

    for job_name, boxes in result["pickup_summary"]:
        rows.append(_row("pickup", "", job_name, boxes))

    for location in sorted(result["location_drops"], key=name_key):
        for job_name, boxes in result["location_drops"][location]:
            rows.append(_row("drop", location, job_name, boxes))

    return rows


def _row(section, location, job_name, boxes):
    return {
        "section": section,
        "location": location,
        "job": job_name,
        "units": boxes.total,
        "box4": boxes.box4,
        "box2": boxes.box2,
        "box1": boxes.box1,
    }
