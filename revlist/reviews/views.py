"""Views for browsing revisions."""

from __future__ import annotations

import logging

from django.contrib.auth.mixins import LoginRequiredMixin
from django.contrib.auth.models import User
from django.shortcuts import get_object_or_404
from django.utils.translation import gettext_lazy as _
from django.views.generic import DetailView, TemplateView

from revlist.accounts.handles import load_user_handles
from revlist.reviews.models import Revision
from revlist.reviews.revision_list import RevisionList


logger = logging.getLogger(__name__)


def render_revision_list(request, revisions, **kwargs):
    """Render a list of revisions for the user making a request.

    This takes care of loading the default fields, user handles, flags and
    drafts needed for the list.

    Args:
        request (django.http.HttpRequest):
            The HTTP request from the client.

        revisions (django.db.models.query.QuerySet):
            The revisions to show.

        **kwargs (dict):
            Additional keyword arguments for
            :py:class:`~revlist.reviews.revision_list.RevisionList`.

    Returns:
        django.utils.safestring.SafeString:
        The rendered HTML for the list.
    """
    user = request.user
    revision_list = RevisionList(
        user=user,
        revisions=list(revisions.select_related('author')
                       .prefetch_related('reviewers')),
        fields=RevisionList.get_default_fields(user, request=request),
        **kwargs)
    revision_list.handles = load_user_handles(
        revision_list.get_required_user_ids())

    return revision_list.load_assets().render(request=request)


class DashboardView(LoginRequiredMixin, TemplateView):
    """The dashboard, listing revisions that involve the user."""

    template_name = 'reviews/dashboard.html'

    def get_context_data(self, **kwargs):
        """Return context for the template.

        Args:
            **kwargs (dict):
                Keyword arguments passed to the view.

        Returns:
            dict:
            The context for the template.
        """
        context = super().get_context_data(**kwargs)
        request = self.request
        user = request.user

        context['revision_lists'] = [
            render_revision_list(
                request,
                Revision.objects.reviewable_by(user),
                header=_('Revisions Awaiting Your Review'),
                no_data_string=_('No revisions are waiting on you.'),
                highlight_age=True),
            render_revision_list(
                request,
                Revision.objects.authored_by(user).open(),
                header=_('Your Revisions'),
                no_data_string=_('You have no open revisions.'),
                highlight_age=True),
        ]

        return context


class UserRevisionsView(LoginRequiredMixin, TemplateView):
    """A list of all revisions authored by a user."""

    template_name = 'reviews/user_revisions.html'

    def get_context_data(self, username, **kwargs):
        """Return context for the template.

        Args:
            username (str):
                The username of the author.

            **kwargs (dict):
                Additional keyword arguments passed to the view.

        Returns:
            dict:
            The context for the template.

        Raises:
            django.http.Http404:
                The user does not exist.
        """
        context = super().get_context_data(**kwargs)
        author = get_object_or_404(User, username=username)

        context.update({
            'author': author,
            'revision_list': render_revision_list(
                self.request,
                Revision.objects.authored_by(author),
                header=_('Revisions by %s') % author.username,
                no_data_string=_('This user has no revisions.')),
        })

        return context


class RevisionDetailView(LoginRequiredMixin, DetailView):
    """The page for a single revision."""

    model = Revision
    pk_url_kwarg = 'revision_id'
    context_object_name = 'revision'
    template_name = 'reviews/revision_detail.html'

    def get_queryset(self):
        """Return the queryset used to look up the revision.

        Returns:
            django.db.models.query.QuerySet:
            The queryset.
        """
        return (
            super().get_queryset()
            .select_related('author')
            .prefetch_related('reviewers')
        )
