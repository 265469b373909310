"""Managers for revlist.reviews.models."""

from __future__ import annotations

from django.db.models import QuerySet


class RevisionQuerySet(QuerySet):
    """A queryset for looking up revisions."""

    def open(self):
        """Return revisions that haven't been closed or abandoned.

        Returns:
            RevisionQuerySet:
            The filtered queryset.
        """
        from revlist.reviews.models import Revision

        return self.exclude(status__in=Revision.CLOSED_STATUSES)

    def authored_by(self, user):
        """Return revisions authored by a user.

        Args:
            user (django.contrib.auth.models.User):
                The author.

        Returns:
            RevisionQuerySet:
            The filtered queryset.
        """
        return self.filter(author=user)

    def reviewable_by(self, user):
        """Return open revisions that list a user as a reviewer.

        Args:
            user (django.contrib.auth.models.User):
                The reviewer.

        Returns:
            RevisionQuerySet:
            The filtered queryset.
        """
        return self.open().filter(reviewers=user).distinct()

    def with_draft_replies_by(self, users):
        """Return revisions that have unsaved reply drafts by any given user.

        Args:
            users (list of django.contrib.auth.models.User):
                The users who own the drafts.

        Returns:
            RevisionQuerySet:
            The filtered queryset.
        """
        return self.filter(reply_drafts__user__in=users).distinct()
