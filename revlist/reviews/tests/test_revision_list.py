"""Unit tests for revlist.reviews.revision_list."""

from datetime import datetime, timezone as dt_timezone

import kgb
from django.utils import timezone
from django.utils.html import format_html

from revlist.accounts.handles import load_user_handles
from revlist.admin.siteconfig import DAYS_FRESH_KEY, DAYS_STALE_KEY
from revlist.calendar.business_days import get_holidays
from revlist.flags.models import Flag
from revlist.reviews.errors import RevisionListStateError
from revlist.reviews.fields import BaseRevisionListField
from revlist.reviews.models import Revision
from revlist.reviews.revision_list import (DRAFT_ICON,
                                           OLD_ICON,
                                           RevisionList,
                                           STALE_ICON)
from revlist.testing import TestCase
from revlist.ui.object_items import NO_ICON


class BrokenField(BaseRevisionListField):
    field_id = 'broken'
    label = 'Broken'
    should_appear_on_revision_list = True

    def render_value(self, revision):
        raise Exception('Oh no')


class CustomField(BaseRevisionListField):
    field_id = 'custom'
    label = 'Custom'
    should_appear_on_revision_list = True

    def render_value(self, revision):
        return format_html('<b>{0}</b>', revision.title)


class RevisionListTests(kgb.SpyAgency, TestCase):
    """Unit tests for revlist.reviews.revision_list.RevisionList."""

    # A Wednesday.
    NOW = datetime(2026, 10, 14, 12, 0, tzinfo=dt_timezone.utc)

    def setUp(self):
        super().setUp()

        self.spy_on(timezone.now, op=kgb.SpyOpReturn(self.NOW))

        self.user = self.create_user()

    def test_load_assets_without_user(self):
        """Testing RevisionList.load_assets without a user"""
        revision_list = RevisionList(revisions=[])

        message = 'A user must be set before loading assets.'

        with self.assertRaisesMessage(RevisionListStateError, message):
            revision_list.load_assets()

    def test_load_assets_without_revisions(self):
        """Testing RevisionList.load_assets without revisions"""
        revision_list = RevisionList(user=self.user)

        message = 'Revisions must be set before loading assets.'

        with self.assertRaisesMessage(RevisionListStateError, message):
            revision_list.load_assets()

    def test_build_item_list_without_user(self):
        """Testing RevisionList.build_item_list without a user"""
        revision_list = RevisionList(revisions=[])

        message = 'A user must be set before rendering.'

        with self.assertRaisesMessage(RevisionListStateError, message):
            revision_list.build_item_list()

    def test_load_assets_flags(self):
        """Testing RevisionList.load_assets loads only the viewer's flags
        on the listed revisions
        """
        other_user = self.create_user(username='other-user')
        revision1 = self.create_revision(title='Revision 1')
        revision2 = self.create_revision(title='Revision 2')
        unlisted = self.create_revision(title='Unlisted')

        flag = self.create_flag(self.user, revision1)
        self.create_flag(other_user, revision2)
        self.create_flag(self.user, unlisted)

        revision_list = RevisionList(user=self.user,
                                     revisions=[revision1, revision2])

        self.assertIs(revision_list.load_assets(), revision_list)
        self.assertEqual(revision_list.flags, [flag])

    def test_load_assets_drafts(self):
        """Testing RevisionList.load_assets loads revisions with the
        viewer's reply drafts
        """
        other_user = self.create_user(username='other-user')
        revision1 = self.create_revision(title='Revision 1')
        revision2 = self.create_revision(title='Revision 2')
        revision3 = self.create_revision(title='Revision 3')

        self.create_reply_draft(revision1, self.user)
        self.create_reply_draft(revision1, other_user)
        self.create_reply_draft(revision2, other_user)

        revision_list = RevisionList(
            user=self.user,
            revisions=[revision1, revision2, revision3])
        revision_list.load_assets()

        self.assertEqual(set(revision_list.drafts), {revision1.pk})

    def test_get_required_user_ids(self):
        """Testing RevisionList.get_required_user_ids"""
        reviewer = self.create_user(username='reviewer')
        revision = self.create_revision(author=self.user,
                                        reviewers=[reviewer])

        revision_list = RevisionList(
            user=self.user,
            revisions=[revision],
            fields=RevisionList.get_default_fields(self.user))

        self.assertEqual(set(revision_list.get_required_user_ids()),
                         {self.user.pk, reviewer.pk})

    def test_build_item(self):
        """Testing RevisionList.build_item_list item contents"""
        reviewer = self.create_user(username='reviewer',
                                    first_name='Rae',
                                    last_name='Viewer')
        revision = self.create_revision(reviewers=[reviewer])

        item = self._build_item(revision)

        self.assertEqual(item.object_name, 'D%d' % revision.pk)
        self.assertEqual(item.header,
                         '<a href="/D%d">Test Revision</a>' % revision.pk)
        self.assertEqual(
            item.bylines,
            ['Author: <a class="user" href="/users/author/">author</a>'])
        self.assertEqual(
            [str(attribute) for attribute in item.attributes],
            [
                'Needs Review',
                'Reviewers: <a class="user" href="/users/reviewer/">'
                'Rae Viewer</a>',
                'Lines: 0',
            ])

        self.assertEqual(len(item.icons), 1)
        icon, label = item.icons[0]
        self.assertEqual(icon, NO_ICON)
        self.assertTrue(label.startswith('<time datetime="'))

    def test_build_item_without_reviewers(self):
        """Testing RevisionList.build_item_list with no reviewers"""
        item = self._build_item(self.create_revision())

        self.assertEqual(str(item.attributes[1]),
                         'Reviewers: <em>None</em>')

    def test_build_item_with_unknown_status(self):
        """Testing RevisionList.build_item_list with an unknown status"""
        item = self._build_item(self.create_revision(status=42))

        self.assertEqual(str(item.attributes[0]), 'Unknown')

    def test_build_item_without_author_handle(self):
        """Testing RevisionList.build_item_list without a handle for the
        author
        """
        revision = self.create_revision()
        revision_list = RevisionList(
            user=self.user,
            revisions=[revision],
            fields=RevisionList.get_default_fields(self.user))

        with self.assertLogs('revlist.reviews.revision_list',
                             level='WARNING') as logs:
            item = revision_list.load_assets().build_item_list().items[0]

        self.assertEqual(item.bylines, [])
        self.assertEqual(
            logs.output,
            [
                'WARNING:revlist.reviews.revision_list:No handle was loaded '
                'for the author of D%d (user ID %d)'
                % (revision.pk, revision.author_id),
            ])

    def test_build_item_with_extra_field(self):
        """Testing RevisionList.build_item_list with an extra field"""
        revision = self.create_revision(title='<Extra>')
        fields = (RevisionList.get_default_fields(self.user) +
                  [CustomField(user=self.user)])

        item = self._build_item(revision, fields=fields)

        self.assertEqual(str(item.attributes[-1]),
                         'Custom: <b>&lt;Extra&gt;</b>')

    def test_build_item_with_field_error(self):
        """Testing RevisionList.build_item_list with a field that fails to
        render
        """
        revision = self.create_revision()
        fields = (RevisionList.get_default_fields(self.user) +
                  [BrokenField(user=self.user)])

        with self.assertLogs('revlist.reviews.revision_list',
                             level='ERROR') as logs:
            item = self._build_item(revision, fields=fields)

        self.assertEqual(str(item.attributes[-1]), 'Broken: ')
        self.assertEqual(len(logs.records), 1)
        self.assertIn('Error rendering field "broken" for revision D%d'
                      % revision.pk,
                      logs.output[0])

    def test_build_item_without_highlight_age(self):
        """Testing RevisionList.build_item_list without highlight_age"""
        revision = self.create_revision(
            last_updated=datetime(2026, 10, 5, 12, 0, tzinfo=dt_timezone.utc))

        item = self._build_item(revision)

        self.assertEqual(item.state_icon_columns, 1)
        self.assertEqual(item.state_icons,
                         [(NO_ICON, None), (NO_ICON, None)])

    def test_build_item_with_highlight_age_fresh(self):
        """Testing RevisionList.build_item_list with highlight_age and a
        recently updated revision
        """
        revision = self.create_revision(
            last_updated=datetime(2026, 10, 14, 9, 0, tzinfo=dt_timezone.utc))

        item = self._build_item(revision, highlight_age=True)

        self.assertEqual(item.state_icon_columns, 2)
        self.assertEqual(item.state_icons,
                         [(NO_ICON, None), (NO_ICON, None), (NO_ICON, None)])

    def test_build_item_with_highlight_age_stale(self):
        """Testing RevisionList.build_item_list with highlight_age and a
        stale revision
        """
        revision = self.create_revision(
            last_updated=datetime(2026, 10, 12, 12, 0, tzinfo=dt_timezone.utc))

        item = self._build_item(revision, highlight_age=True)

        self.assertEqual(item.state_icons[0], (STALE_ICON, 'Stale (2 days)'))

    def test_build_item_with_highlight_age_old(self):
        """Testing RevisionList.build_item_list with highlight_age and an
        old revision
        """
        revision = self.create_revision(
            last_updated=datetime(2026, 10, 5, 12, 0, tzinfo=dt_timezone.utc))

        item = self._build_item(revision, highlight_age=True)

        self.assertEqual(item.state_icons[0], (OLD_ICON, 'Old (9 days)'))

    def test_build_item_with_highlight_age_over_weekend(self):
        """Testing RevisionList.build_item_list with highlight_age counts
        only business days
        """
        # Friday, 3 business days before the current Wednesday.
        revision = self.create_revision(
            last_updated=datetime(2026, 10, 9, 13, 0, tzinfo=dt_timezone.utc))

        item = self._build_item(revision, highlight_age=True)

        self.assertEqual(item.state_icons[0], (STALE_ICON, 'Stale (4 days)'))

    def test_build_item_with_highlight_age_and_holiday(self):
        """Testing RevisionList.build_item_list with highlight_age skips
        holidays
        """
        self.create_holiday(datetime(2026, 10, 12).date())
        revision = self.create_revision(
            last_updated=datetime(2026, 10, 8, 13, 0, tzinfo=dt_timezone.utc))

        item = self._build_item(revision, highlight_age=True)

        self.assertEqual(item.state_icons[0], (STALE_ICON, 'Stale (5 days)'))

    def test_build_item_list_loads_holidays_once(self):
        """Testing RevisionList.build_item_list loads holidays once for both
        cutoffs
        """
        self.spy_on(get_holidays)

        self._build_item(self.create_revision(), highlight_age=True)

        self.assertSpyCallCount(get_holidays, 1)

    def test_build_item_list_with_cutoffs_disabled_skips_holidays(self):
        """Testing RevisionList.build_item_list with day counts set to 0
        does not load holidays
        """
        self.spy_on(get_holidays)

        with self.siteconfig_settings({DAYS_FRESH_KEY: 0,
                                       DAYS_STALE_KEY: 0}):
            self._build_item(self.create_revision(), highlight_age=True)

        self.assertSpyNotCalled(get_holidays)

    def test_build_item_with_highlight_age_closed(self):
        """Testing RevisionList.build_item_list with highlight_age and an
        old closed revision
        """
        for status in Revision.CLOSED_STATUSES:
            revision = self.create_revision(
                status=status,
                last_updated=datetime(2026, 10, 5, 12, 0,
                                      tzinfo=dt_timezone.utc))

            item = self._build_item(revision, highlight_age=True)

            self.assertEqual(item.state_icons[0], (NO_ICON, None))

    def test_build_item_with_highlight_age_disabled(self):
        """Testing RevisionList.build_item_list with highlight_age and day
        counts set to 0
        """
        revision = self.create_revision(
            last_updated=datetime(2026, 10, 5, 12, 0, tzinfo=dt_timezone.utc))

        with self.siteconfig_settings({DAYS_FRESH_KEY: 0,
                                       DAYS_STALE_KEY: 0}):
            item = self._build_item(revision, highlight_age=True)

        self.assertEqual(item.state_icons[0], (NO_ICON, None))

    def test_build_item_with_custom_days(self):
        """Testing RevisionList.build_item_list with highlight_age and
        custom day counts
        """
        revision = self.create_revision(
            last_updated=datetime(2026, 10, 12, 12, 0, tzinfo=dt_timezone.utc))

        with self.siteconfig_settings({DAYS_FRESH_KEY: 0,
                                       DAYS_STALE_KEY: 1}):
            item = self._build_item(revision, highlight_age=True)

        self.assertEqual(item.state_icons[0], (OLD_ICON, 'Old (2 days)'))

    def test_build_item_with_draft(self):
        """Testing RevisionList.build_item_list with a reply draft"""
        revision = self.create_revision()
        self.create_reply_draft(revision, self.user)

        item = self._build_item(revision)

        self.assertEqual(item.state_icons[0], (DRAFT_ICON, 'Saved Comments'))

    def test_build_item_with_flag(self):
        """Testing RevisionList.build_item_list with a flag"""
        revision = self.create_revision()
        self.create_flag(self.user, revision, color=Flag.RED)

        item = self._build_item(revision)

        self.assertEqual(item.state_icons[1], ('flag-red', 'Flagged'))

    def test_build_item_with_other_users_flag(self):
        """Testing RevisionList.build_item_list ignores flags from other
        users
        """
        revision = self.create_revision()
        self.create_flag(self.create_user(username='other-user'), revision)

        item = self._build_item(revision)

        self.assertEqual(item.state_icons[1], (NO_ICON, None))

    def test_render(self):
        """Testing RevisionList.render"""
        revision = self.create_revision(
            last_updated=datetime(2026, 10, 5, 12, 0, tzinfo=dt_timezone.utc))
        self.create_flag(self.user, revision, color=Flag.CHECKERED)

        revision_list = self._create_revision_list([revision],
                                                   header='My Revisions',
                                                   highlight_age=True)
        html = revision_list.render()

        self.assertIn('object-item-list-cards', html)
        self.assertIn('<h2 class="object-item-list-header">My Revisions</h2>',
                      html)
        self.assertIn('state-icon-columns-2', html)
        self.assertIn('<span class="icon icon-warning-grey" '
                      'data-tooltip="Old (9 days)" title="Old (9 days)">',
                      html)
        self.assertIn('icon-flag-checkered', html)

    def test_render_with_no_revisions(self):
        """Testing RevisionList.render with no revisions"""
        revision_list = self._create_revision_list(
            [],
            no_data_string='Nothing to see here.')

        html = revision_list.render()

        self.assertIn(
            '<p class="object-item-list-empty">Nothing to see here.</p>',
            html)

    def _create_revision_list(self, revisions, **kwargs):
        """Return a revision list with loaded handles and assets.

        Args:
            revisions (list of revlist.reviews.models.Revision):
                The revisions to show.

            **kwargs (dict):
                Additional keyword arguments for the list.

        Returns:
            revlist.reviews.revision_list.RevisionList:
            The revision list.
        """
        kwargs.setdefault('fields',
                          RevisionList.get_default_fields(self.user))

        revision_list = RevisionList(user=self.user,
                                     revisions=revisions,
                                     **kwargs)
        revision_list.handles = load_user_handles(
            revision_list.get_required_user_ids())

        return revision_list.load_assets()

    def _build_item(self, revision, **kwargs):
        """Return the list item built for a single revision.

        Args:
            revision (revlist.reviews.models.Revision):
                The revision to build an item for.

            **kwargs (dict):
                Additional keyword arguments for the list.

        Returns:
            revlist.ui.object_items.ObjectItemView:
            The built item.
        """
        item_list = self._create_revision_list([revision],
                                               **kwargs).build_item_list()
        self.assertEqual(len(item_list), 1)

        return item_list.items[0]
