"""Administration UI registration for revisions."""

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from revlist.reviews.models import ReplyDraft, Revision


@admin.register(Revision)
class RevisionAdmin(admin.ModelAdmin):
    list_display = ('display_id', 'title', 'author', 'status',
                    'last_updated')
    list_display_links = ('display_id', 'title')
    list_filter = ('status', 'time_added')
    search_fields = ('title', 'summary')
    raw_id_fields = ('author', 'reviewers')
    fieldsets = (
        (_('General Information'), {
            'fields': ('title', 'summary', 'test_plan', 'author', 'status',
                       'line_count'),
        }),
        (_('Reviewers'), {
            'fields': ('reviewers',),
        }),
    )


@admin.register(ReplyDraft)
class ReplyDraftAdmin(admin.ModelAdmin):
    list_display = ('revision', 'user', 'timestamp')
    raw_id_fields = ('revision', 'user')
