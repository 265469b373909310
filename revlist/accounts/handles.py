"""Lightweight handles for rendering references to users."""

from __future__ import annotations

import logging

from django.contrib.auth.models import User
from django.urls import reverse
from django.utils.functional import cached_property
from django.utils.html import format_html


logger = logging.getLogger(__name__)


class UserHandle:
    """A handle used to display a user in lists and bylines.

    Handles are loaded in bulk ahead of rendering, so that rendering a list
    of objects referencing many users doesn't result in a query per user.
    """

    def __init__(self, user):
        """Initialize the handle.

        Args:
            user (django.contrib.auth.models.User):
                The user this handle represents.
        """
        self.user = user

    @property
    def user_id(self):
        """The ID of the user.

        Type:
            int
        """
        return self.user.pk

    @cached_property
    def display_name(self):
        """The name shown for the user.

        This is the user's full name, falling back on the username.

        Type:
            str
        """
        return self.user.get_full_name() or self.user.username

    @cached_property
    def url(self):
        """The URL to the user's list of revisions.

        Type:
            str
        """
        return reverse('user-revisions',
                       kwargs={'username': self.user.username})

    def render_link(self):
        """Render a link to the user.

        Returns:
            django.utils.safestring.SafeString:
            The HTML for the link.
        """
        return format_html('<a class="user" href="{0}">{1}</a>',
                           self.url, self.display_name)

    def __repr__(self):
        return '<UserHandle(%s)>' % self.user.username


def load_user_handles(user_ids):
    """Load handles for a list of users.

    Duplicate IDs are only looked up once. IDs that don't match any user are
    left out of the result.

    Args:
        user_ids (list of int):
            The IDs of the users to load.

    Returns:
        dict:
        A mapping of user IDs to :py:class:`UserHandle` instances.
    """
    user_ids = set(user_ids)

    if not user_ids:
        return {}

    users = User.objects.in_bulk(user_ids)
    missing_ids = user_ids - set(users)

    if missing_ids:
        logger.warning('Could not load handles for unknown user IDs: %s',
                       ', '.join(str(user_id)
                                 for user_id in sorted(missing_ids)))

    return {
        user_id: UserHandle(user)
        for user_id, user in users.items()
    }
