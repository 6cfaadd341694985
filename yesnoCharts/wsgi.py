"""WSGI entry point for the yesnoCharts chart service.

Exposes the module-level `application` callable used by WSGI servers.
"""

from __future__ import annotations

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "yesnoCharts.settings")

application = get_wsgi_application()
