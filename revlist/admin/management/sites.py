"""Site configuration setup for new and upgraded installs."""

from __future__ import annotations

import logging

from django.contrib.sites.models import Site
from djblets.siteconfig.models import SiteConfiguration

from revlist import get_version_string
from revlist.admin.siteconfig import defaults


logger = logging.getLogger(__name__)


def init_siteconfig():
    """Initialize the site configuration.

    This will create a SiteConfiguration object if one does not exist, or
    update the existing one with the current version number.

    Returns:
        djblets.siteconfig.models.SiteConfiguration:
        The new or updated site configuration.
    """
    siteconfig, is_new = SiteConfiguration.objects.get_or_create(
        site=Site.objects.get_current())

    new_version = get_version_string()

    if is_new:
        siteconfig.add_defaults(defaults)
        siteconfig.version = new_version
        siteconfig.save()
    elif siteconfig.version != new_version:
        logger.info('Upgraded site configuration from %s to %s',
                    siteconfig.version, new_version)
        siteconfig.version = new_version
        siteconfig.save(update_fields=('version',))

    return siteconfig
