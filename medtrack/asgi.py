"""
ASGI config for the medtrack project.

Order matters: configure Django before importing any Django-dependent modules.
"""
import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "medtrack.settings")

from django.core.asgi import get_asgi_application  # noqa: E402

application = get_asgi_application()

from practice.db import ensure_database_or_exit  # noqa: E402

ensure_database_or_exit()
