"""
URL configuration package.

The app_name stays 'dynamic_pricing' for namespace.
"""

from .pricing import urlpatterns as pricing_urls

app_name = 'dynamic_pricing'

urlpatterns = pricing_urls
