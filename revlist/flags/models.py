"""Models for user flags."""

from __future__ import annotations

from django.contrib.auth.models import User
from django.contrib.contenttypes.fields import GenericForeignKey
from django.contrib.contenttypes.models import ContentType
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from revlist.flags.managers import FlagQuerySet


class Flag(models.Model):
    """A personal, colored marker a user places on an object.

    Flags are only visible to their owner. An owner can place at most one
    flag on a given object.
    """

    RED = 0
    ORANGE = 1
    YELLOW = 2
    GREEN = 3
    BLUE = 4
    PINK = 5
    PURPLE = 6
    CHECKERED = 7

    COLORS = (
        (RED, _('Red')),
        (ORANGE, _('Orange')),
        (YELLOW, _('Yellow')),
        (GREEN, _('Green')),
        (BLUE, _('Blue')),
        (PINK, _('Pink')),
        (PURPLE, _('Purple')),
        (CHECKERED, _('Checkered')),
    )

    #: The icon-friendly names for each color.
    COLOR_NAMES = {
        RED: 'red',
        ORANGE: 'orange',
        YELLOW: 'yellow',
        GREEN: 'green',
        BLUE: 'blue',
        PINK: 'pink',
        PURPLE: 'purple',
        CHECKERED: 'checkered',
    }

    owner = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='flags',
        verbose_name=_('owner'))
    content_type = models.ForeignKey(
        ContentType,
        on_delete=models.CASCADE,
        verbose_name=_('content type'))
    object_id = models.PositiveIntegerField(_('object ID'))
    flagged_object = GenericForeignKey('content_type', 'object_id')
    color = models.PositiveSmallIntegerField(_('color'),
                                             choices=COLORS,
                                             default=BLUE)
    note = models.TextField(_('note'), blank=True)
    timestamp = models.DateTimeField(_('timestamp'), default=timezone.now)

    objects = FlagQuerySet.as_manager()

    @property
    def color_name(self):
        """The icon-friendly name of the flag's color.

        Type:
            str
        """
        return self.COLOR_NAMES.get(self.color, 'blue')

    def __str__(self):
        """Return a string representation of the flag.

        Returns:
            str:
            A description of the flag.
        """
        return '%s flag by %s' % (self.get_color_display(),
                                  self.owner.username)

    class Meta:
        app_label = 'flags'
        unique_together = ('owner', 'content_type', 'object_id')
        verbose_name = _('Flag')
        verbose_name_plural = _('Flags')
