"""
Unit tests for box decomposition and job processing.
"""

import pytest

from delivery_planner.models import BoxCount, DeliveryJob
from delivery_planner.planner import calculate_boxes, plan_to_rows, process_jobs


# calculate_boxes

@pytest.mark.parametrize("amount", range(0, 41))
def test_boxes_add_back_up_to_amount(amount):
    boxes = calculate_boxes(amount)
    assert boxes.box4 * 4 + boxes.box2 * 2 + boxes.box1 == amount
    assert boxes.box2 < 2
    assert boxes.box1 < 2


@pytest.mark.parametrize("amount", [0, -1, -4, -1000])
def test_zero_and_negative_give_no_boxes(amount):
    assert calculate_boxes(amount) == BoxCount(0, 0, 0)


@pytest.mark.parametrize("amount, expected", [
    (7, BoxCount(1, 1, 1)),
    (4, BoxCount(1, 0, 0)),
    (3, BoxCount(0, 1, 1)),
    (1, BoxCount(0, 0, 1)),
    (10, BoxCount(2, 1, 0)),
    (5, BoxCount(1, 0, 1)),
])
def test_known_breakdowns(amount, expected):
    assert calculate_boxes(amount) == expected


def test_box_count_text_and_total():
    boxes = BoxCount(box4=2, box2=1, box1=1)
    assert boxes.total == 11
    assert str(boxes) == "4u: 2, 2u: 1, 1u: 1"


# process_jobs

def test_same_resource_gets_numbered_names():
    jobs = [
        DeliveryJob("Iron", {"A": 10}),
        DeliveryJob("Iron", {"A": 5}),
    ]
    result = process_jobs(jobs, ["A", "B"])

    assert result["pickup_summary"] == [
        ("Iron 1", BoxCount(2, 1, 0)),
        ("Iron 2", BoxCount(1, 0, 1)),
    ]


def test_pickup_summary_sorted_by_unique_name():
    jobs = [
        DeliveryJob("Quartz", {"A": 1}),
        DeliveryJob("Carbon", {"A": 2}),
        DeliveryJob("Iron", {"A": 3}),
    ]
    result = process_jobs(jobs, ["A"])

    names = [name for name, _ in result["pickup_summary"]]
    assert names == ["Carbon 2", "Iron 3", "Quartz 1"]


def test_only_positive_drops_are_listed():
    jobs = [DeliveryJob("Gold", {"A": 3, "B": 0})]
    result = process_jobs(jobs, ["A", "B"])

    assert result["location_drops"]["A"] == [("Gold 1", BoxCount(0, 1, 1))]
    assert result["location_drops"]["B"] == []


def test_every_declared_location_is_a_key(sample_jobs, locations):
    result = process_jobs(sample_jobs[:1], locations)

    assert list(result["location_drops"]) == locations
    assert result["location_drops"]["Lorville"] == []
    assert result["location_drops"]["New Babbage"] == []


def test_sample_run(sample_jobs, locations):
    result = process_jobs(sample_jobs, locations)

    assert result["pickup_summary"] == [
        ("Carbon 1", BoxCount(2, 0, 1)),
        ("Carbon 3", BoxCount(1, 0, 1)),
        ("Iron 2", BoxCount(2, 1, 0)),
        ("Quartz 4", BoxCount(1, 1, 1)),
    ]
    assert result["location_drops"]["Port Olisar"] == [
        ("Carbon 1", BoxCount(1, 1, 0)),
        ("Iron 2", BoxCount(1, 0, 0)),
    ]
    assert result["location_drops"]["New Babbage"] == [
        ("Carbon 3", BoxCount(1, 0, 1)),
        ("Iron 2", BoxCount(0, 1, 0)),
    ]
    assert result["total_units"] == 31


def test_jobs_are_not_modified(sample_jobs, locations):
    before = [dict(job.drops) for job in sample_jobs]
    process_jobs(sample_jobs, locations)
    assert [job.drops for job in sample_jobs] == before


def test_no_jobs():
    result = process_jobs([], ["A"])
    assert result["pickup_summary"] == []
    assert result["location_drops"] == {"A": []}
    assert result["total_units"] == 0


# plan_to_rows

def test_rows_pickups_first_then_drops_by_location(sample_jobs, locations):
    rows = plan_to_rows(process_jobs(sample_jobs, locations))

    pickups = [r for r in rows if r["section"] == "pickup"]
    drops = [r for r in rows if r["section"] == "drop"]
    assert rows == pickups + drops
    assert len(pickups) == 4
    assert [r["location"] for r in drops] == [
        "Area18",
        "Lorville", "Lorville",
        "New Babbage", "New Babbage",
        "Port Olisar", "Port Olisar",
    ]
    assert pickups[0] == {
        "section": "pickup",
        "location": "",
        "job": "Carbon 1",
        "units": 9,
        "box4": 2,
        "box2": 0,
        "box1": 1,
    }


def test_mixed_case_names_sort_alphabetically():
    jobs = [
        DeliveryJob("iron", {"A": 1, "b": 2}),
        DeliveryJob("Quartz", {"A": 1, "b": 1}),
        DeliveryJob("carbon", {"A": 1}),
    ]
    result = process_jobs(jobs, ["b", "A"])

    assert [name for name, _ in result["pickup_summary"]] == ["carbon 3", "iron 1", "Quartz 2"]
    assert [name for name, _ in result["location_drops"]["A"]] == ["carbon 3", "iron 1", "Quartz 2"]

    rows = plan_to_rows(result)
    assert [r["location"] for r in rows if r["section"] == "drop"] == ["A", "A", "A", "b", "b"]


def test_box_count_is_read_only_and_hashable():
    boxes = BoxCount(1, 1, 1)
    with pytest.raises(AttributeError):
        boxes.box4 = 5
    assert {boxes, BoxCount(1, 1, 1)} == {BoxCount(1, 1, 1)}


def test_job_drops_cannot_be_changed_from_outside():
    job = DeliveryJob("Iron", {"A": 3})
    job.drops["A"] = 100
    with pytest.raises(AttributeError):
        job.resource_name = "Gold"
    assert job.drops == {"A": 3}
    assert job.total_needed == 3
