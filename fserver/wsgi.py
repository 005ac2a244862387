"""WSGI entry point for fserver."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'fserver.settings')

application = get_wsgi_application()
