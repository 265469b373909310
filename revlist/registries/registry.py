"""Registry base classes used throughout Revision List."""

from djblets.registries.mixins import ExceptionFreeGetterMixin
from djblets.registries.registry import (
    OrderedRegistry as DjbletsOrderedRegistry)


class OrderedRegistry(ExceptionFreeGetterMixin, DjbletsOrderedRegistry):
    """A registry that keeps track of registration order.

    Lookups for unregistered items return ``None`` instead of raising.
    """
