"""
ASGI config for the institution portal project.

The portal only serves plain HTTP, so Django's own ASGI handler is enough.
"""
import os

from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "institution.settings")

application = get_asgi_application()
