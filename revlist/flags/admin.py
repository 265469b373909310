"""Administration UI registration for flags."""

from django.contrib import admin

from revlist.flags.models import Flag


@admin.register(Flag)
class FlagAdmin(admin.ModelAdmin):
    list_display = ('owner', 'content_type', 'object_id', 'color',
                    'timestamp')
    list_filter = ('color',)
    raw_id_fields = ('owner',)
