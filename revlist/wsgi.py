"""WSGI application for Revision List.

This is the main WSGI entrypoint for loading Revision List. The settings
module can be overridden with the :envvar:`DJANGO_SETTINGS_MODULE`
environment variable.
"""

import os


os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'revlist.settings')

# Construct the WSGI application.
from django.core.wsgi import get_wsgi_application
application = get_wsgi_application()

from revlist import initialize
initialize()
