"""Revision List version and package information.

These variables and functions can be used to identify the version of
Revision List. They're largely used for packaging purposes.
"""

from __future__ import annotations


#: The version of Revision List.
#:
#: This is in the format of:
#:
#: (Major, Minor, Micro, Patch, alpha/beta/rc/final, Release Number, Released)
#:
VERSION: tuple[int, int, int, int, str, int, bool] = \
    (1, 0, 0, 0, 'alpha', 0, False)


def get_version_string() -> str:
    """Return the Revision List version as a human-readable string.

    Returns:
        str:
        The Revision List version string.
    """
    major, minor, micro, patch, tag, release_num, released = VERSION
    version = f'{major}.{minor}'

    if micro or patch:
        version += f'.{micro}'

    if patch:
        version += f'.{patch}'

    if tag != 'final':
        if tag == 'rc':
            version += f' RC{release_num}'
        else:
            version += f' {tag} {release_num}'

    if not released:
        version += ' (dev)'

    return version


def get_package_version() -> str:
    """Return the Revision List version as a Python package version string.

    Returns:
        str:
        The Revision List package version.
    """
    major, minor, micro, patch, tag, release_num = VERSION[:-1]
    version = f'{major}.{minor}'

    if micro or patch:
        version += f'.{micro}'

    if patch:
        version += f'.{patch}'

    if tag != 'final':
        if tag == 'alpha':
            tag = 'a'
        elif tag == 'beta':
            tag = 'b'

        version += f'{tag}{release_num}'

    return version


def is_release() -> bool:
    """Return whether this is a released version of Revision List.

    Returns:
        bool:
        True if the current version of Revision List is a release.
    """
    return VERSION[-1]


def initialize(
    setup_logging: bool = True,
) -> None:
    """Begin initialization of Revision List.

    This sets up logging and loads the stored site configuration. Once it
    has finished, it will fire the :py:data:`revlist.signals.initializing`
    signal.

    This must be called at some point before most features will work, but it
    will be called automatically by the WSGI application and
    :file:`manage.py`.

    Args:
        setup_logging (bool, optional):
            Whether to set up logging based on the configured settings.
            This can be disabled if the caller has their own logging
            configuration.
    """
    import logging
    import os

    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'revlist.settings')

    from django import setup
    from django.apps import apps

    if not apps.ready:
        setup()

    from django.conf import settings
    from djblets import log

    from revlist import signals
    from revlist.admin.siteconfig import load_site_config

    if setup_logging:
        log.init_logging()

    load_site_config()

    if settings.DEBUG:
        logging.debug('Log file for Revision List v%s (PID %s)',
                      get_version_string(), os.getpid())

    signals.initializing.send(sender=None)


#: An alias for the the version information from :py:data:`VERSION`.
#:
#: This does not include the last entry in the tuple (the released state).
__version_info__ = VERSION[:-1]

#: An alias for the version used for the Python package.
__version__ = get_package_version()
