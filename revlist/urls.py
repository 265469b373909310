from django.contrib import admin
from django.urls import include, path


handler404 = 'django.views.defaults.page_not_found'
handler500 = 'django.views.defaults.server_error'


urlpatterns = [
    path('admin/', include('revlist.admin.urls')),
    path('admin/', admin.site.urls),
    path('', include('revlist.reviews.urls')),
]
