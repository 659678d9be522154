"""
WSGI config for product_vibes project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'product_vibes.settings')

application = get_wsgi_application()
