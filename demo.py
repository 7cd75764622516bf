from delivery_planner.models import DeliveryJob
from delivery_planner.planner import process_jobs
from delivery_planner.report import format_report


def main():
    # A typical hauling run: four stops, a few resources
    locations = ["Port Olisar", "Lorville", "Area18", "New Babbage"]

    jobs = [
        DeliveryJob("Carbon", {"Port Olisar": 6, "Lorville": 0, "Area18": 3, "New Babbage": 0}),
        DeliveryJob("Iron",   {"Port Olisar": 4, "Lorville": 4, "Area18": 0, "New Babbage": 2}),
        DeliveryJob("Carbon", {"Port Olisar": 0, "Lorville": 0, "Area18": 0, "New Babbage": 5}),
        DeliveryJob("Quartz", {"Port Olisar": 0, "Lorville": 7, "Area18": 0, "New Babbage": 0}),
    ]

    result = process_jobs(jobs, locations)

    print(format_report(result))
    print(f"\nTotal units to haul: {result['total_units']}")


if __name__ == "__main__":
    main()
