"""Administration forms for Revision List."""

from revlist.admin.forms.revision_list_settings import \
    RevisionListSettingsForm


__all__ = [
    'RevisionListSettingsForm',
]
