# Django settings for the revlist project.

import os

from revlist.dependencies import (dependency_error,
                                  fail_if_missing_dependencies)


#: The name of the product.
#:
#: This should not be changed.
PRODUCT_NAME = 'Revision List'

DEBUG = False

# Time zone support. Dates are stored as UTC and translated to the active
# time zone when rendered.
USE_TZ = True
TIME_ZONE = 'UTC'

LANGUAGE_CODE = 'en-us'
USE_I18N = True

# This should match the ID of the Site object in the database. The site
# configuration is stored against it.
SITE_ID = 1

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',

    # These must go before anything that deals with settings.
    'djblets.siteconfig.middleware.SettingsMiddleware',
    'djblets.log.middleware.LoggingMiddleware',
]

ROOT_URLCONF = 'revlist.urls'

REVLIST_ROOT = os.path.abspath(os.path.split(__file__)[0])

# where is the site on your server ? - add the trailing slash.
SITE_ROOT = '/'

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.messages',
    'django.contrib.sessions',
    'django.contrib.sites',
    'django.contrib.staticfiles',
    'djblets',
    'djblets.log',
    'djblets.siteconfig',
    'revlist',
    'revlist.calendar',
    'revlist.flags',
    'revlist.reviews',
]

DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'

SESSION_ENGINE = 'django.contrib.sessions.backends.cached_db'

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'revlist',
    },
}

LOGGING_NAME = 'revlist'
LOGGING_REQUEST_FORMAT = '%(user)s - %(path)s'
LOGGING_BLACKLIST = [
    'django.db.backends',
]

# Default ALLOWED_HOSTS to allow everything. This should be overridden in
# settings_local.py
ALLOWED_HOSTS = ['*']

SECRET_KEY = 'revlist-development-only-secret-key'

SITE_DATA_DIR = os.path.join(os.path.dirname(REVLIST_ROOT), 'data')

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.path.join(SITE_DATA_DIR, 'revlist.db'),
    },
}


# Load local settings. This can override anything in here, such as database
# connectivity and the secret key.
try:
    from settings_local import *
except ImportError as exc:
    if exc.name != 'settings_local':
        dependency_error('Unable to import settings_local.py: %s' % exc)


TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [
            os.path.join(REVLIST_ROOT, 'templates'),
        ],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
                'django.template.context_processors.debug',
                'django.template.context_processors.i18n',
                'django.template.context_processors.request',
                'django.template.context_processors.static',
                'djblets.siteconfig.context_processors.siteconfig',
            ],
            'debug': DEBUG,
        },
    },
]

STATIC_DIRECTORY = 'static/'
STATIC_URL = SITE_ROOT + STATIC_DIRECTORY
STATIC_ROOT = os.path.join(SITE_DATA_DIR, 'htdocs', 'static')

LOGIN_URL = SITE_ROOT + 'admin/login/'
LOGIN_REDIRECT_URL = SITE_ROOT

SESSION_COOKIE_PATH = SITE_ROOT


fail_if_missing_dependencies()
