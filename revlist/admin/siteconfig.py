"""Site configuration definitions for Revision List.

This expands on :py:mod:`djblets.siteconfig` to declare the settings
administrators can change at runtime, such as the number of business days
before a revision is considered stale.
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from djblets.log import siteconfig as log_siteconfig
from djblets.siteconfig.django_settings import (apply_django_settings,
                                                get_django_defaults,
                                                get_django_settings_map)
from djblets.siteconfig.models import SiteConfiguration

from revlist.signals import site_settings_loaded


logger = logging.getLogger(__name__)


#: The siteconfig key for the number of business days a revision stays fresh.
DAYS_FRESH_KEY = 'revisions_days_fresh'

#: The siteconfig key for the number of business days before a revision is old.
DAYS_STALE_KEY = 'revisions_days_stale'


# A mapping of siteconfig setting names to Django settings.py names.
# This also contains all the djblets-provided mappings as well.
settings_map = {}
settings_map.update(get_django_settings_map())
settings_map.update(log_siteconfig.settings_map)


# All the default values for settings.
defaults = get_django_defaults()
defaults.update(log_siteconfig.defaults)
defaults.update({
    # Revisions untouched for longer than this many business days are
    # shown as stale. Set to 0 to disable.
    DAYS_FRESH_KEY: 1,

    # Revisions untouched for longer than this many business days are
    # shown as old. Set to 0 to disable.
    DAYS_STALE_KEY: 3,
})


def load_site_config():
    """Load stored site configuration settings.

    This populates the Django settings object with any keys that need to be
    there, and registers the defaults for the Revision List settings.

    Returns:
        djblets.siteconfig.models.SiteConfiguration:
        The loaded site configuration, or ``None`` if it could not be loaded.

    Raises:
        django.core.exceptions.ImproperlyConfigured:
            The site configuration entry is missing from the database.
    """
    try:
        siteconfig = SiteConfiguration.objects.get_current()
    except SiteConfiguration.DoesNotExist:
        raise ImproperlyConfigured(
            'The site configuration entry does not exist in the database. '
            'Run `./manage.py migrate` to fix this.')
    except Exception as e:
        # We got something else. Likely, this doesn't exist yet and we're
        # doing a migrate or something, so log and move on.
        logger.error('Could not load siteconfig: %s', e)
        return None

    # Populate defaults if they weren't already set.
    if not siteconfig.get_defaults():
        siteconfig.add_defaults(defaults)

    # Populate the settings object with anything relevant from the siteconfig.
    apply_django_settings(siteconfig, settings_map)

    site_settings_loaded.send(sender=settings, siteconfig=siteconfig)

    return siteconfig


def get_freshness_days(siteconfig=None):
    """Return the configured freshness and staleness business day counts.

    Args:
        siteconfig (djblets.siteconfig.models.SiteConfiguration, optional):
            The site configuration to read from. The current one is used if
            not provided.

    Returns:
        tuple:
        A 2-tuple of ``(days_fresh, days_stale)``. A value of ``0`` means
        the corresponding highlight is disabled.
    """
    if siteconfig is None:
        siteconfig = SiteConfiguration.objects.get_current()

    return (
        int(siteconfig.get(DAYS_FRESH_KEY, defaults[DAYS_FRESH_KEY]) or 0),
        int(siteconfig.get(DAYS_STALE_KEY, defaults[DAYS_STALE_KEY]) or 0),
    )
