"""Administration form for revision list settings."""

from __future__ import annotations

from django import forms
from django.utils.translation import gettext_lazy as _
from djblets.siteconfig.forms import SiteSettingsForm

from revlist.admin.siteconfig import DAYS_FRESH_KEY, DAYS_STALE_KEY


class RevisionListSettingsForm(SiteSettingsForm):
    """Revision list settings for Revision List."""

    revisions_days_fresh = forms.IntegerField(
        label=_('Days before stale'),
        help_text=_(
            'The number of business days a revision can go without an '
            'update before it is highlighted as stale. Enter 0 to disable.'
        ),
        min_value=0,
        initial=1,
        widget=forms.TextInput(attrs={'size': '5'}))

    revisions_days_stale = forms.IntegerField(
        label=_('Days before old'),
        help_text=_(
            'The number of business days a revision can go without an '
            'update before it is highlighted as old. Enter 0 to disable.'
        ),
        min_value=0,
        initial=3,
        widget=forms.TextInput(attrs={'size': '5'}))

    def clean(self):
        """Validate the form.

        The stale threshold must not be shorter than the fresh threshold,
        unless either is disabled.

        Returns:
            dict:
            The cleaned form data.

        Raises:
            django.core.exceptions.ValidationError:
                The thresholds are out of order.
        """
        cleaned_data = super().clean()
        days_fresh = cleaned_data.get(DAYS_FRESH_KEY)
        days_stale = cleaned_data.get(DAYS_STALE_KEY)

        if days_fresh and days_stale and days_stale < days_fresh:
            self.add_error(
                DAYS_STALE_KEY,
                _('This must be at least the number of days before stale.'))

        return cleaned_data

    class Meta:
        title = _('Revision List Settings')
        fieldsets = (
            {
                'fields': (DAYS_FRESH_KEY, DAYS_STALE_KEY),
            },
        )
