from django.urls import include, path
from django.views.generic import RedirectView

from revlist.admin import views
from revlist.admin.forms import RevisionListSettingsForm


urlpatterns = [
    path('settings/', include([
        path('', RedirectView.as_view(url='revision-list/', permanent=True),
             name='site-settings'),

        path('revision-list/',
             views.site_settings,
             kwargs={
                 'form_class': RevisionListSettingsForm,
             },
             name='settings-revision-list'),
    ])),
]
