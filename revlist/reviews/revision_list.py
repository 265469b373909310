"""Rendering of revisions as a list of cards."""

from __future__ import annotations

import logging

from django.utils import timezone
from django.utils.html import format_html
from django.utils.translation import gettext as _

from revlist.admin.siteconfig import get_freshness_days
from revlist.calendar.business_days import (get_holidays,
                                            get_nth_business_day)
from revlist.flags.models import Flag
from revlist.reviews.builtin_fields import DateModifiedField
from revlist.reviews.errors import RevisionListStateError
from revlist.reviews.fields import (REVISION_LIST_FIELD_ORDER,
                                    get_revision_list_fields)
from revlist.reviews.models import Revision
from revlist.ui.object_items import (NO_ICON,
                                     ObjectItemListView,
                                     ObjectItemView)


logger = logging.getLogger(__name__)


#: The icon shown for revisions with unsaved reply drafts by the viewer.
DRAFT_ICON = 'file-grey'

#: The icon shown for revisions past the stale threshold.
STALE_ICON = 'perflab-grey'

#: The icon shown for revisions past the old threshold.
OLD_ICON = 'warning-grey'


class RevisionList:
    """Renders a list of revisions for a viewing user.

    Each revision becomes a card showing its status, author, reviewers and
    when it was last updated, along with any extra fields. Cards are
    decorated with the viewer's flags, markers for unsaved reply drafts, and
    (if :py:attr:`highlight_age` is set) how long the revision has gone
    without an update.

    Typical usage:

    .. code-block:: python

       revision_list = RevisionList(
           user=request.user,
           revisions=revisions,
           fields=RevisionList.get_default_fields(request.user))
       revision_list.handles = load_user_handles(
           revision_list.get_required_user_ids())
       html = revision_list.load_assets().render(request)
    """

    def __init__(self, user=None, revisions=None, fields=None, handles=None,
                 header=None, no_data_string=None, highlight_age=False):
        """Initialize the list.

        Args:
            user (django.contrib.auth.models.User, optional):
                The user viewing the list. This must be set before loading
                assets or rendering.

            revisions (list of revlist.reviews.models.Revision, optional):
                The revisions to show. This must be set before loading
                assets.

            fields (list of revlist.reviews.fields.BaseRevisionListField,
                    optional):
                The fields to render for each revision.

            handles (dict, optional):
                A mapping of user IDs to
                :py:class:`~revlist.accounts.handles.UserHandle` instances.

            header (str, optional):
                The header shown above the list.

            no_data_string (str, optional):
                The text shown when there are no revisions.

            highlight_age (bool, optional):
                Whether to show an icon for revisions that haven't been
                updated recently.
        """
        self.user = user
        self.revisions = revisions
        self.fields = fields or []
        self.handles = handles or {}
        self.header = header
        self.no_data_string = no_data_string
        self.highlight_age = highlight_age
        self.flags = []
        self.drafts = {}

    @classmethod
    def get_default_fields(cls, user, request=None):
        """Return the fields shown on revision lists by default.

        Args:
            user (django.contrib.auth.models.User):
                The user viewing the list.

            request (django.http.HttpRequest, optional):
                The HTTP request from the client.

        Returns:
            list of revlist.reviews.fields.BaseRevisionListField:
            The field instances, sorted for revision lists.

        Raises:
            revlist.reviews.errors.NoRevisionListFieldsError:
                No registered fields appear on revision lists.
        """
        return get_revision_list_fields(user, request=request)

    def get_required_user_ids(self):
        """Return the IDs of all users the fields need handles for.

        Returns:
            list of int:
            The user IDs. This may contain duplicates.
        """
        user_ids = []

        for field in self.fields:
            for revision in self.revisions or []:
                user_ids += field.get_required_user_ids(revision)

        return user_ids

    def load_assets(self):
        """Load the viewer's flags and reply drafts for the revisions.

        Returns:
            RevisionList:
            This instance, for chaining.

        Raises:
            revlist.reviews.errors.RevisionListStateError:
                The viewing user or the revisions were not set.
        """
        user = self.user

        if user is None:
            raise RevisionListStateError(
                'A user must be set before loading assets.')

        if self.revisions is None:
            raise RevisionListStateError(
                'Revisions must be set before loading assets.')

        self.flags = list(
            Flag.objects
            .owned_by([user])
            .for_objects(self.revisions))

        self.drafts = (
            Revision.objects
            .filter(pk__in=[revision.pk for revision in self.revisions])
            .with_draft_replies_by([user])
            .in_bulk())

        logger.debug('Loaded %d flags and %d drafts for %d revisions for '
                     'user %s',
                     len(self.flags), len(self.drafts), len(self.revisions),
                     user.username)

        return self

    def build_item_list(self):
        """Build the list widget for the revisions.

        Returns:
            revlist.ui.object_items.ObjectItemListView:
            The populated list.

        Raises:
            revlist.reviews.errors.RevisionListStateError:
                The viewing user was not set.
        """
        if self.user is None:
            raise RevisionListStateError(
                'A user must be set before rendering.')

        now = timezone.now()
        days_fresh, days_stale = get_freshness_days()
        fresh_cutoff = None
        stale_cutoff = None

        if days_fresh or days_stale:
            holidays = get_holidays()

            if days_fresh:
                fresh_cutoff = get_nth_business_day(now, -days_fresh,
                                                    holidays=holidays)

            if days_stale:
                stale_cutoff = get_nth_business_day(now, -days_stale,
                                                    holidays=holidays)

        flagged = {
            flag.object_id: flag
            for flag in self.flags
        }

        for field in self.fields:
            field.handles = self.handles

        item_list = ObjectItemListView(header=self.header,
                                       no_data_string=self.no_data_string,
                                       cards=True)

        for revision in self.revisions or []:
            item_list.add_item(self._build_item(
                revision=revision,
                now=now,
                flag=flagged.get(revision.pk),
                fresh_cutoff=fresh_cutoff,
                stale_cutoff=stale_cutoff))

        return item_list

    def render(self, request=None):
        """Render the list of revisions.

        Args:
            request (django.http.HttpRequest, optional):
                The HTTP request from the client.

        Returns:
            django.utils.safestring.SafeString:
            The rendered HTML.
        """
        return self.build_item_list().render(request=request)

    def _build_item(self, revision, now, flag, fresh_cutoff, stale_cutoff):
        """Build the list item for a revision.

        Args:
            revision (revlist.reviews.models.Revision):
                The revision to build an item for.

            now (datetime.datetime):
                The current time.

            flag (revlist.flags.models.Flag):
                The viewer's flag on the revision, if any.

            fresh_cutoff (datetime.datetime):
                Revisions modified before this are stale, if set.

            stale_cutoff (datetime.datetime):
                Revisions modified before this are old, if set.

        Returns:
            revlist.ui.object_items.ObjectItemView:
            The populated item.
        """
        item = ObjectItemView()
        age_icon = None
        field_values = {}
        field_labels = {}

        for field in self.fields:
            if (isinstance(field, DateModifiedField) and
                (fresh_cutoff or stale_cutoff)):
                age_icon = self._get_age_icon(
                    modified=revision.last_updated,
                    now=now,
                    fresh_cutoff=fresh_cutoff,
                    stale_cutoff=stale_cutoff)

            field_labels[field.field_id] = field.render_label()
            field_values[field.field_id] = \
                self._render_field_value(field, revision)

        item.object_name = revision.display_id
        item.header = format_html('<a href="{0}">{1}</a>',
                                  revision.get_absolute_url(),
                                  revision.title)
        item.add_attribute(revision.status_to_string(revision.status))

        author_handle = self.handles.get(revision.author_id)

        if author_handle is not None:
            item.add_byline(format_html(_('Author: {0}'),
                                        author_handle.render_link()))
        else:
            logger.warning('No handle was loaded for the author of %s '
                           '(user ID %s)',
                           revision.display_id, revision.author_id)

        if 'reviewers' in field_values:
            item.add_attribute(format_html(_('Reviewers: {0}'),
                                           field_values['reviewers']))

        if self.highlight_age:
            item.state_icon_columns = 2

            if age_icon is not None and not revision.is_closed:
                item.add_state_icon(*age_icon)
            else:
                item.add_state_icon(NO_ICON)
        else:
            item.state_icon_columns = 1

        if revision.pk in self.drafts:
            item.add_state_icon(DRAFT_ICON, _('Saved Comments'))
        else:
            item.add_state_icon(NO_ICON)

        if flag is not None:
            item.add_state_icon('flag-%s' % flag.color_name, _('Flagged'))
        else:
            item.add_state_icon(NO_ICON)

        if 'date_modified' in field_values:
            item.add_icon(NO_ICON, field_values['date_modified'])

        for field_id, value in field_values.items():
            if field_id not in REVISION_LIST_FIELD_ORDER:
                item.add_attribute(format_html('{0}: {1}',
                                               field_labels[field_id],
                                               value))

        return item

    def _get_age_icon(self, modified, now, fresh_cutoff, stale_cutoff):
        """Return the age icon for a revision.

        Args:
            modified (datetime.datetime):
                When the revision was last modified.

            now (datetime.datetime):
                The current time.

            fresh_cutoff (datetime.datetime):
                Revisions modified before this are stale, if set.

            stale_cutoff (datetime.datetime):
                Revisions modified before this are old, if set.

        Returns:
            tuple:
            A 2-tuple of ``(icon, label)``, or ``None`` if the revision is
            fresh.
        """
        days = (now - modified).days

        if stale_cutoff and modified < stale_cutoff:
            return OLD_ICON, _('Old (%d days)') % days
        elif fresh_cutoff and modified < fresh_cutoff:
            return STALE_ICON, _('Stale (%d days)') % days

        return None

    def _render_field_value(self, field, revision):
        """Render a field's value for a revision.

        Errors from the field are logged, and result in an empty value.

        Args:
            field (revlist.reviews.fields.BaseRevisionListField):
                The field to render.

            revision (revlist.reviews.models.Revision):
                The revision to render the field for.

        Returns:
            django.utils.safestring.SafeString:
            The rendered value.
        """
        try:
            return field.render_value(revision)
        except Exception as e:
            logger.exception('Error rendering field "%s" for revision %s: '
                             '%s',
                             field.field_id, revision.display_id, e)
            return ''
