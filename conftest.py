"""Configures pytest and Django environment setup for Revision List.

.. important::

   Do not define plugins in this file! Plugins must be in a different
   package (such as in revlist/testing/). pytest overrides importers for
   plugins and all modules descending from that module level.
"""

import os
import sys

import django
import djblets

import revlist


sys.path.insert(0, os.path.join(os.path.dirname(__file__)))


pytest_plugins = ['revlist.testing.pytest_fixtures']


def pytest_report_header(config):
    """Return information for the report header.

    This will log the versions of Revision List, Djblets and Django.

    Args:
        config (object):
            The pytest configuration object.

    Returns:
        list of str:
        The report header entries to log.
    """
    return [
        'Revision List: %s' % revlist.get_version_string(),
        'Djblets: %s' % djblets.get_version_string(),
        'Django: %s' % django.get_version(),
    ]
