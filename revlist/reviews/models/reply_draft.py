"""Definitions for the ReplyDraft model."""

from __future__ import annotations

from django.contrib.auth.models import User
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class ReplyDraft(models.Model):
    """A reply to a revision that a user has saved but not yet published.

    Each user has at most one draft per revision.
    """

    revision = models.ForeignKey(
        'reviews.Revision',
        on_delete=models.CASCADE,
        related_name='reply_drafts',
        verbose_name=_('revision'))
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='reply_drafts',
        verbose_name=_('user'))
    text = models.TextField(_('text'), blank=True)
    timestamp = models.DateTimeField(_('timestamp'), default=timezone.now)

    def __str__(self):
        """Return a string representation of the draft.

        Returns:
            str:
            A description of the draft.
        """
        return 'Draft reply by %s on D%s' % (self.user.username,
                                            self.revision_id)

    class Meta:
        app_label = 'reviews'
        unique_together = ('revision', 'user')
        verbose_name = _('Reply Draft')
        verbose_name_plural = _('Reply Drafts')
