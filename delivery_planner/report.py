# report.py
# Plain-text rendering of a processed plan (see planner.process_jobs).

from .planner import name_key

RULE = "=" * 55


def format_pickup_summary(pickup_summary, name_width=15):
    lines = [
        RULE,
        "RESOURCE PICKUP SUMMARY".center(55).rstrip(),
        RULE,
        "This is the breakdown of what boxes to collect for each job:",
    ]

    for job_name, boxes in sorted(pickup_summary, key=lambda entry: name_key(entry[0])):
        lines.append(
            f"  - {job_name:<{name_width}}: Total Units: {boxes.total} | {boxes}"
        )

    lines.append(RULE)
    return "\n".join(lines)


def format_location_drops(location_drops, name_width=15):
    lines = [
        RULE,
        "LOCATION DROPOFF LIST".center(55).rstrip(),
        RULE,
        "This is the breakdown of what boxes to drop at each location:",
    ]

    for location in sorted(location_drops, key=name_key):
        drop_list = location_drops[location]
        # Declared but unused locations are left out
        if len(drop_list) == 0:
            continue

        lines.append("")
        lines.append(f"--- Location: {location} ---")
        for job_name, boxes in sorted(drop_list, key=lambda entry: name_key(entry[0])):
            lines.append(
                f"  - {job_name:<{name_width}}: Drop Units: {boxes.total} | {boxes}"
            )

    lines.append("")
    lines.append(RULE)
    return "\n".join(lines)


def format_report(result, name_width=15):
    if result is None or len(result["pickup_summary"]) == 0:
        return "No jobs were entered."

    return "\n\n".join([
        format_pickup_summary(result["pickup_summary"], name_width),
        format_location_drops(result["location_drops"], name_width),
    ])
