"""
WSGI config for the medtrack project.

It exposes the WSGI callable as a module-level variable named
``application``.  The store connection is verified once here so that a
server process never starts without a working database.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'medtrack.settings')

application = get_wsgi_application()

from practice.db import ensure_database_or_exit  # noqa: E402

ensure_database_or_exit()
