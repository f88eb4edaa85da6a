"""
ASGI config for the medicare project.

Order matters: configure Django before importing any Django-dependent modules.
"""
import os

# 1) Configure settings before any Django import
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "medicare.settings")

# 2) Build the HTTP app (this also runs django.setup())
from django.core.asgi import get_asgi_application  # noqa: E402

application = get_asgi_application()

# 3) Seed baseline data once per process
from clinic.services.bootstrap import seed_on_startup  # noqa: E402

seed_on_startup()
