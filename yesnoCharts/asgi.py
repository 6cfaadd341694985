"""ASGI entry point for the yesnoCharts chart service.

Exposes the module-level `application` callable used by ASGI servers.
"""

from __future__ import annotations

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "yesnoCharts.settings")

application = get_asgi_application()
