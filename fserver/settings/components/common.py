"""Core Django settings."""

from typing import Final

from decouple import Csv

from fserver.settings.components import BASE_DIR, config

SECRET_KEY = config('DJANGO_SECRET_KEY', default='fserver-insecure-dev-key')

DEBUG = config('DJANGO_DEBUG', cast=bool, default=False)

ALLOWED_HOSTS = config(
    'DJANGO_ALLOWED_HOSTS',
    cast=Csv(),
    default='localhost,127.0.0.1,testserver',
)

INSTALLED_APPS: Final = (
    'django.contrib.auth',
    'django.contrib.contenttypes',

    # Third party
    'rest_framework',

    # Local apps
    'fserver.apps.files',
    'fserver.apps.accounts',
)

MIDDLEWARE: Final = (
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
)

ROOT_URLCONF = 'fserver.urls'

WSGI_APPLICATION = 'fserver.wsgi.application'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': config(
            'DJANGO_DATABASE_NAME',
            default=str(BASE_DIR.joinpath('db.sqlite3')),
        ),
    },
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = False
USE_TZ = True

# Uploads are decoded fully in memory before the pipeline runs
FILE_UPLOAD_HANDLERS: Final = (
    'django.core.files.uploadhandler.MemoryFileUploadHandler',
    'django.core.files.uploadhandler.TemporaryFileUploadHandler',
)

REST_FRAMEWORK: Final = {
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.MultiPartParser',
        'rest_framework.parsers.FormParser',
    ],
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'EXCEPTION_HANDLER': 'fserver.apps.files.envelope.envelope_exception_handler',
    'UNAUTHENTICATED_USER': None,
}
