"""Administration views for Revision List."""

from __future__ import annotations

from djblets.siteconfig.views import site_settings as djblets_site_settings


def site_settings(request, form_class,
                  template_name='admin/site_settings.html'):
    """Render a site settings page.

    Access is limited to staff members.

    Args:
        request (django.http.HttpRequest):
            The HTTP request from the client.

        form_class (type):
            The :py:class:`~djblets.siteconfig.forms.SiteSettingsForm`
            subclass for the page.

        template_name (str, optional):
            The template to render.

    Returns:
        django.http.HttpResponse:
        The response containing the page.
    """
    return djblets_site_settings(request, form_class, template_name, {
        'title': form_class.Meta.title,
    })
