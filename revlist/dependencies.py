"""Version information for Revision List dependencies.

This contains constants that other parts of Revision List (primarily
packaging) can use to look up information on major dependencies.
"""

from __future__ import annotations

import sys
import textwrap
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from djblets.dependencies import Dependency


###########################################################################
# Python and Django compatibility
###########################################################################

#: The minimum supported version of Python.
PYTHON_MIN_VERSION = (3, 9)

#: A string representation of the minimum supported version of Python.
PYTHON_MIN_VERSION_STR = '%s.%s' % (PYTHON_MIN_VERSION)


# NOTE: This file may not import other (non-Python) modules! (Except for
#       the parent revlist module, which must be importable anyway). This
#       module is used for packaging and be needed before any dependencies
#       have been installed.


#: The version of Django required for the current version of Python.
django_version = '~=4.2.23'

#: The version range required for Djblets.
djblets_version = '>=5.0,<7'


###########################################################################
# Python dependencies
###########################################################################

#: All dependencies required to install Revision List.
package_dependencies: Mapping[str, Dependency] = {
    'Django': django_version,
    'Djblets': djblets_version,
}

#: Dependencies required only for running the test suite.
test_dependencies: Mapping[str, Dependency] = {
    'kgb': '>=7.1',
    'pytest': '>=7.4',
    'pytest-django': '>=4.5',
}


###########################################################################
# Packaging utilities
###########################################################################
_dependency_error_count = 0


def build_dependency_list(
    deps: Mapping[str, Dependency],
    version_prefix: str = '',
) -> Sequence[str]:
    """Build a list of dependency specifiers from a dependency map.

    This can be used along with :py:data:`package_dependencies`
    or other dependency dictionaries to build a list of dependency specifiers
    for use on the command line or in :file:`setup.py`.

    Args:
        deps (dict):
            A dictionary of dependencies.

        version_prefix (str, optional):
            A prefix to include before any package versions.

    Returns:
        list of str:
        A list of dependency specifiers.
    """
    new_deps: list[str] = []

    for dep_name, dep_details in deps.items():
        if isinstance(dep_details, list):
            new_deps += [
                f'{dep_name}{version_prefix}{entry["version"]}; '
                f'python_version{entry["python"]}'
                for entry in dep_details
            ]
        else:
            new_deps.append(
                f'{dep_name}{version_prefix}{dep_details}')

    return sorted(new_deps, key=lambda s: s.lower())


def _dependency_message(
    message: str,
    prefix: str = '',
) -> None:
    """Utility function to print and track a dependency-related message.

    Args:
        message (str):
            The dependency-related message to display. This will be wrapped,
            but long strings (like paths) will not contain line breaks.

        prefix (str, optional):
            The prefix for the message. All text will be aligned after this.
    """
    wrapped = textwrap.fill(
        message,
        initial_indent=prefix,
        subsequent_indent=' ' * len(prefix),
        break_long_words=False,
        break_on_hyphens=False)
    sys.stderr.write(f'\n{wrapped}\n')


def dependency_error(
    message: str,
) -> None:
    """Print a dependency error.

    This will track that a message was printed, allowing us to determine if
    any messages were shown to the user.

    Args:
        message (str):
            The dependency error to display.
    """
    global _dependency_error_count

    _dependency_message(message, prefix='ERROR: ')
    _dependency_error_count += 1


def fail_if_missing_dependencies() -> None:
    """Exit the process with an error if dependency errors were shown."""
    if _dependency_error_count > 0:
        _dependency_message(
            'Please install the missing dependencies and try again.')
        sys.exit(1)
