"""Definitions for revision list fields.

Each column of information shown for a revision in a list is provided by a
field. Fields are registered in :py:data:`field_registry`, which is
populated with the built-in fields by default. Additional fields can be
registered to add attributes to every revision shown in a list.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, TYPE_CHECKING

from django.utils.html import format_html
from django.utils.translation import gettext_lazy as _
from djblets.registries.registry import ALREADY_REGISTERED, NOT_REGISTERED

from revlist.registries.registry import OrderedRegistry

if TYPE_CHECKING:
    from django.contrib.auth.models import User
    from django.http import HttpRequest
    from django.utils.safestring import SafeString

    from revlist.accounts.handles import UserHandle
    from revlist.reviews.models import Revision


logger = logging.getLogger(__name__)


#: The IDs of the fields making up the standard revision list columns.
#:
#: Fields with these IDs are sorted first, in this order. The revision list
#: places their values in dedicated spots on each item, rather than as
#: generic attributes.
REVISION_LIST_FIELD_ORDER = (
    'revision_id',
    'title',
    'status',
    'author',
    'reviewers',
    'date_modified',
    'date_created',
)


class FieldRegistry(OrderedRegistry):
    """A registry for revision list fields.

    This keeps the fields in the registered order, so iterating through them
    will do so in the same order.
    """

    lookup_attrs = ('field_id',)

    errors = {
        ALREADY_REGISTERED: _(
            '"%(item)s" is already a registered revision list field. Field '
            'IDs must be unique.'
        ),
        NOT_REGISTERED: _(
            '"%(attr_value)s" is not a registered revision list field.'
        ),
    }

    def get_defaults(self):
        """Return the list of built-in fields.

        Returns:
            list:
            A list of the built-in :py:class:`BaseRevisionListField`
            subclasses.
        """
        from revlist.reviews.builtin_fields import builtin_fields

        return builtin_fields


field_registry = FieldRegistry()


class BaseRevisionListField:
    """Base class for a field shown for revisions in a list.

    Subclasses must set :py:attr:`field_id` and :py:attr:`label`, and
    implement :py:meth:`render_value`.

    Fields that reference users should return their IDs from
    :py:meth:`get_required_user_ids`. The list will load handles for all of
    them at once and provide them through :py:attr:`handles` before any
    values are rendered.
    """

    #: The unique ID of the field.
    #:
    #: Type:
    #:     str
    field_id: Optional[str] = None

    #: The label shown as the column header for the field.
    #:
    #: Type:
    #:     str
    label = None

    #: Whether the field is shown on revision lists.
    #:
    #: Type:
    #:     bool
    should_appear_on_revision_list: bool = False

    def __init__(
        self,
        user: Optional[User] = None,
        request: Optional[HttpRequest] = None,
    ) -> None:
        """Initialize the field.

        Args:
            user (django.contrib.auth.models.User, optional):
                The user viewing the list.

            request (django.http.HttpRequest, optional):
                The HTTP request from the client.
        """
        self.user = user
        self.request = request
        self.handles: dict[int, UserHandle] = {}

    def get_required_user_ids(
        self,
        revision: Revision,
    ) -> Sequence[int]:
        """Return the IDs of users needed to render a revision's value.

        Args:
            revision (revlist.reviews.models.Revision):
                The revision that will be rendered.

        Returns:
            list of int:
            The user IDs. By default, this is empty.
        """
        return []

    def render_label(self) -> str:
        """Return the header for the field.

        Returns:
            str:
            The field's label.
        """
        return str(self.label)

    def render_value(
        self,
        revision: Revision,
    ) -> SafeString:
        """Render the value of the field for a revision.

        Args:
            revision (revlist.reviews.models.Revision):
                The revision to render.

        Returns:
            django.utils.safestring.SafeString:
            The rendered HTML.
        """
        raise NotImplementedError

    def render_user(
        self,
        user_id: int,
    ) -> SafeString:
        """Render a link to a user, using the loaded handles.

        Args:
            user_id (int):
                The ID of the user to render.

        Returns:
            django.utils.safestring.SafeString:
            The rendered link, or a placeholder if no handle was loaded.
        """
        handle = self.handles.get(user_id)

        if handle is None:
            logger.warning('%s.render_user: No handle was loaded for user '
                           'ID %s',
                           type(self).__name__, user_id)
            return format_html('<span class="user">{0}</span>',
                               _('Unknown user'))

        return handle.render_link()

    def __str__(self) -> str:
        """Represent the field as a string.

        Returns:
            str:
            The field's ID.
        """
        return self.field_id or '<Unset Field ID>'


def sort_fields_for_revision_list(fields):
    """Sort fields into the order they're shown on revision lists.

    Fields listed in :py:data:`REVISION_LIST_FIELD_ORDER` come first, in
    that order. All other fields follow in their original order.

    Args:
        fields (list of BaseRevisionListField):
            The fields to sort.

    Returns:
        list of BaseRevisionListField:
        The sorted fields.
    """
    standard_fields = {}
    other_fields = []

    for field in fields:
        if (field.field_id in REVISION_LIST_FIELD_ORDER and
            field.field_id not in standard_fields):
            standard_fields[field.field_id] = field
        else:
            other_fields.append(field)

    return [
        standard_fields[field_id]
        for field_id in REVISION_LIST_FIELD_ORDER
        if field_id in standard_fields
    ] + other_fields


def get_revision_list_fields(user, request=None):
    """Return instances of all fields that appear on revision lists.

    Args:
        user (django.contrib.auth.models.User):
            The user viewing the list.

        request (django.http.HttpRequest, optional):
            The HTTP request from the client.

    Returns:
        list of BaseRevisionListField:
        The field instances, sorted for revision lists.

    Raises:
        revlist.reviews.errors.NoRevisionListFieldsError:
            No registered fields appear on revision lists.
    """
    from revlist.reviews.errors import NoRevisionListFieldsError

    fields = []

    for field_cls in field_registry:
        try:
            field = field_cls(user=user, request=request)
        except Exception as e:
            logger.exception('Error instantiating field %r: %s',
                             field_cls, e)
            continue

        if field.should_appear_on_revision_list:
            fields.append(field)

    if not fields:
        raise NoRevisionListFieldsError()

    return sort_fields_for_revision_list(fields)
