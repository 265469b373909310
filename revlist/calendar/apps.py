"""The app definition for revlist.calendar."""

from __future__ import annotations

from django.apps import AppConfig


class CalendarAppConfig(AppConfig):
    """App configuration for revlist.calendar."""

    name = 'revlist.calendar'
    label = 'revlist_calendar'
