"""
Services package.

Re-exports service classes so existing imports work:
    from dynamic_pricing.services import DynamicPricingService
"""

from .pricing_service import DynamicPricingService, format_breakdown

__all__ = [
    'DynamicPricingService',
    'format_breakdown',
]
