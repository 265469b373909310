from django.urls import path, re_path

from revlist.reviews import views


urlpatterns = [
    path('',
         views.DashboardView.as_view(),
         name='dashboard'),
    path('users/<str:username>/',
         views.UserRevisionsView.as_view(),
         name='user-revisions'),
    re_path(r'^D(?P<revision_id>\d+)$',
            views.RevisionDetailView.as_view(),
            name='revision-detail'),
]
