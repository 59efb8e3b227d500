# -*- coding: utf-8 -*-
# file: streamlit_app.py: Streamlit entry for the Mess Cut calendar
from __future__ import annotations

from app.calendar_page import show_calendar_page
from app.theme import use_theme

APP_TITLE = "Mess Cut"
APP_VERSION = "1.0.0"


def main() -> None:
    use_theme(APP_TITLE)
    show_calendar_page()


if __name__ == "__main__":
    main()
