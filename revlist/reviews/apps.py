"""The app definition for revlist.reviews."""

from __future__ import annotations

from django.apps import AppConfig


class ReviewsAppConfig(AppConfig):
    """App configuration for revlist.reviews."""

    name = 'revlist.reviews'
