"""Definitions for the Revision model."""

from __future__ import annotations

from django.contrib.auth.models import User
from django.db import models
from django.urls import reverse
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from djblets.db.fields import ModificationTimestampField

from revlist.reviews.managers import RevisionQuerySet


class Revision(models.Model):
    """A revision of a change up for code review.

    A revision tracks its author, the users asked to review it, and where it
    is in the review process.
    """

    NEEDS_REVIEW = 0
    NEEDS_REVISION = 1
    ACCEPTED = 2
    CLOSED = 3
    ABANDONED = 4
    CHANGES_PLANNED = 5
    IN_PREPARATION = 6

    STATUSES = (
        (NEEDS_REVIEW, _('Needs Review')),
        (NEEDS_REVISION, _('Needs Revision')),
        (ACCEPTED, _('Accepted')),
        (CLOSED, _('Closed')),
        (ABANDONED, _('Abandoned')),
        (CHANGES_PLANNED, _('Changes Planned')),
        (IN_PREPARATION, _('In Preparation')),
    )

    #: Statuses for revisions that are no longer being worked on.
    CLOSED_STATUSES = (CLOSED, ABANDONED)

    title = models.CharField(_('title'), max_length=255)
    summary = models.TextField(_('summary'), blank=True)
    test_plan = models.TextField(_('test plan'), blank=True)
    author = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='revisions',
        verbose_name=_('author'))
    reviewers = models.ManyToManyField(
        User,
        blank=True,
        related_name='reviewed_revisions',
        verbose_name=_('reviewers'))
    status = models.PositiveSmallIntegerField(_('status'),
                                              choices=STATUSES,
                                              default=NEEDS_REVIEW,
                                              db_index=True)
    line_count = models.PositiveIntegerField(_('line count'), default=0)
    time_added = models.DateTimeField(_('time added'), default=timezone.now)
    last_updated = ModificationTimestampField(_('last updated'))

    objects = RevisionQuerySet.as_manager()

    @staticmethod
    def status_to_string(status):
        """Return a human-readable name for a status.

        Args:
            status (int):
                One of the status constants.

        Returns:
            str:
            The name of the status, or "Unknown" for unrecognized values.
        """
        return dict(Revision.STATUSES).get(status, _('Unknown'))

    @property
    def display_id(self):
        """The identifier shown to users for this revision.

        Type:
            str
        """
        return 'D%d' % self.pk

    @property
    def is_closed(self):
        """Whether the revision was closed or abandoned.

        Type:
            bool
        """
        return self.status in self.CLOSED_STATUSES

    def get_absolute_url(self):
        """Return the URL to the revision's page.

        Returns:
            str:
            The revision's URL.
        """
        return reverse('revision-detail', kwargs={'revision_id': self.pk})

    def __str__(self):
        """Return a string representation of the revision.

        Returns:
            str:
            The display ID and title.
        """
        return '%s: %s' % (self.display_id, self.title)

    class Meta:
        app_label = 'reviews'
        ordering = ['-last_updated', '-pk']
        verbose_name = _('Revision')
        verbose_name_plural = _('Revisions')
