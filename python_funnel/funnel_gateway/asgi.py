"""
ASGI config for funnel_gateway project.
"""
import os
from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'funnel_gateway.settings')
application = get_asgi_application()
