"""The app definition for revlist."""

from __future__ import annotations

from django.apps import AppConfig, apps
from django.db.models.signals import post_migrate


def _on_post_migrate(**kwargs) -> None:
    """Create or upgrade the site configuration after migrating.

    Args:
        **kwargs (dict):
            Keyword arguments passed by the signal.
    """
    from revlist.admin.management.sites import init_siteconfig

    init_siteconfig()


class RevListAppConfig(AppConfig):
    """App configuration for revlist."""

    name = 'revlist'
    verbose_name = 'Revision List'

    def ready(self) -> None:
        """Configure the app once it's ready.

        The site configuration is initialized once the reviews app has been
        migrated. This app has no models of its own, so it never receives
        the signal itself.
        """
        post_migrate.connect(_on_post_migrate,
                             sender=apps.get_app_config('reviews'),
                             dispatch_uid='revlist-init-siteconfig')
