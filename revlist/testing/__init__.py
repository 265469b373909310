"""Unit test infrastructure for Revision List."""

from __future__ import annotations

import importlib
from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from revlist.testing.testcase import TestCase


__all__ = [
    'TestCase',
]


_TestCase: Optional[TestCase] = None


def __getattr__(
    name: str,
) -> Any:
    """Return an attribute for the module.

    This will handle lazily-importing
    :py:class:`revlist.testing.testcase.TestCase`. The lazy import is
    necessary to avoid importing models when this module is imported.

    Args:
        name (str):
            The attribute to import.

    Returns:
        object:
        The resulting attribute value.

    Raises:
        AttributeError:
            The attribute was not found.
    """
    global _TestCase

    if name == 'TestCase':
        if _TestCase is None:
            _TestCase = (
                importlib.import_module('revlist.testing.testcase')
                .TestCase
            )

        return _TestCase

    raise AttributeError(f'module {__name__!r} has no attribute {name!r}')
