"""Administration UI registration for holidays."""

from django.contrib import admin

from revlist.calendar.models import Holiday


@admin.register(Holiday)
class HolidayAdmin(admin.ModelAdmin):
    list_display = ('day', 'name')
    search_fields = ('name',)
