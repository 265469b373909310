"""The app definition for revlist.flags."""

from __future__ import annotations

from django.apps import AppConfig


class FlagsAppConfig(AppConfig):
    """App configuration for revlist.flags."""

    name = 'revlist.flags'
