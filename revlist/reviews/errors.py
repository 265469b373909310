"""Error definitions for the reviews app."""

from django.core.exceptions import ImproperlyConfigured


class RevisionListStateError(Exception):
    """An error raised when a revision list is used before it's set up.

    This happens when loading assets or rendering without a viewing user,
    or loading assets without any revisions set.
    """


class NoRevisionListFieldsError(ImproperlyConfigured):
    """An error raised when no fields are configured for revision lists."""

    def __init__(self):
        super().__init__(
            'There are no registered fields that appear on the revision '
            'list.')


__all__ = (
    'NoRevisionListFieldsError',
    'RevisionListStateError',
)
