"""Models for the calendar app."""

from __future__ import annotations

from django.db import models
from django.utils.translation import gettext_lazy as _


class Holiday(models.Model):
    """A non-working day.

    Holidays are skipped, along with weekends, when counting business days.
    """

    day = models.DateField(_('day'), unique=True)
    name = models.CharField(_('name'), max_length=64)

    def __str__(self):
        """Return a string representation of the holiday.

        Returns:
            str:
            The day and name of the holiday.
        """
        return '%s (%s)' % (self.name, self.day.isoformat())

    class Meta:
        app_label = 'revlist_calendar'
        ordering = ['day']
        verbose_name = _('Holiday')
        verbose_name_plural = _('Holidays')
