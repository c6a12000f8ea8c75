"""Example: use the service layer without Flask.

Controllers are a thin layer; attendance rules live in the services.
"""

import importlib
from datetime import date

from chess_club.common.datetime_utils import target_session_date
from chess_club.config import get_settings_module
from chess_club.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    view = container.attendance_service.roster_for(target_session_date(date.today()))
    print(view.stats)
    for entry in view.entries:
        print(entry.student.full_name, entry.checked_in, entry.checked_out)


if __name__ == "__main__":
    main()
