from django.apps import AppConfig


class DynamicPricingConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'dynamic_pricing'
    verbose_name = 'Dynamic Pricing'
    
    def ready(self):
        """Import signals when app is ready."""
        import dynamic_pricing.signals  # noqa
