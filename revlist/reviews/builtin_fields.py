"""Built-in fields for revision lists."""

from __future__ import annotations

from django.utils.formats import date_format
from django.utils.html import escape, format_html, format_html_join
from django.utils.timezone import localtime
from django.utils.translation import gettext_lazy as _

from revlist.reviews.fields import BaseRevisionListField


class RevisionIDField(BaseRevisionListField):
    """The revision's display ID, linked to the revision."""

    field_id = 'revision_id'
    label = _('ID')
    should_appear_on_revision_list = True

    def render_value(self, revision):
        return format_html('<a href="{0}">{1}</a>',
                           revision.get_absolute_url(),
                           revision.display_id)


class TitleField(BaseRevisionListField):
    """The revision's title, linked to the revision."""

    field_id = 'title'
    label = _('Revision')
    should_appear_on_revision_list = True

    def render_value(self, revision):
        return format_html('<a href="{0}">{1}</a>',
                           revision.get_absolute_url(),
                           revision.title)


class StatusField(BaseRevisionListField):
    """The name of the revision's status."""

    field_id = 'status'
    label = _('Status')
    should_appear_on_revision_list = True

    def render_value(self, revision):
        return escape(revision.status_to_string(revision.status))


class AuthorField(BaseRevisionListField):
    """The user who authored the revision."""

    field_id = 'author'
    label = _('Author')
    should_appear_on_revision_list = True

    def get_required_user_ids(self, revision):
        return [revision.author_id]

    def render_value(self, revision):
        return self.render_user(revision.author_id)


class ReviewersField(BaseRevisionListField):
    """The users asked to review the revision.

    If there are no reviewers, this shows "None".
    """

    field_id = 'reviewers'
    label = _('Reviewers')
    should_appear_on_revision_list = True

    def get_required_user_ids(self, revision):
        return [
            reviewer.pk
            for reviewer in revision.reviewers.all()
        ]

    def render_value(self, revision):
        reviewer_ids = self.get_required_user_ids(revision)

        if not reviewer_ids:
            return format_html('<em>{0}</em>', _('None'))

        return format_html_join(
            ', ',
            '{0}',
            ((self.render_user(reviewer_id),)
             for reviewer_id in reviewer_ids))


class BaseDateField(BaseRevisionListField):
    """Base class for fields showing a timestamp on the revision."""

    #: The name of the timestamp attribute on the revision.
    #:
    #: Type:
    #:     str
    date_attr = None

    def render_value(self, revision):
        value = getattr(revision, self.date_attr)

        if value is None:
            return ''

        return format_html('<time datetime="{0}">{1}</time>',
                           value.isoformat(),
                           date_format(localtime(value), 'DATETIME_FORMAT'))


class DateModifiedField(BaseDateField):
    """When the revision was last updated.

    Revision lists use this field to decide whether to highlight a revision
    as stale or old.
    """

    field_id = 'date_modified'
    label = _('Updated')
    should_appear_on_revision_list = True
    date_attr = 'last_updated'


class DateCreatedField(BaseDateField):
    """When the revision was created."""

    field_id = 'date_created'
    label = _('Created')
    should_appear_on_revision_list = True
    date_attr = 'time_added'


class LinesField(BaseRevisionListField):
    """The number of lines changed by the revision."""

    field_id = 'lines'
    label = _('Lines')
    should_appear_on_revision_list = True

    def render_value(self, revision):
        return format_html('{0}', revision.line_count)


builtin_fields = [
    RevisionIDField,
    TitleField,
    StatusField,
    AuthorField,
    ReviewersField,
    DateModifiedField,
    DateCreatedField,
    LinesField,
]
