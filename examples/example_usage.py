"""Example: use the service layer directly (without Flask).

Controllers are only a thin layer; the business rules live in the services.
"""

from src.school_dashboard.school_dashboard.container import build_container
from src.school_dashboard.school_dashboard.database.bootstrap import seed_demo_data


def main():
    container = build_container()
    seed_demo_data(container)

    print(container.dashboard_service.stats())
    for row in container.dashboard_service.top_schools():
        print(row)
    for activity in container.activity_service.list_recent(3):
        print(activity.date.date(), activity.title)


if __name__ == "__main__":
    main()
