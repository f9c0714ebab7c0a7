"""
Views package.

Re-exports all views so existing URL imports work unchanged:
    from dynamic_pricing.views import StayBreakdownView, etc.
"""

# Mixins
from .mixins import PricingManagementMixin

# Pricing views
from .pricing import (
    StayBreakdownView,
    PriceCalendarView,
    PricingConfigurationDetailView,
    BasePriceUpdateView,
    SpecialDayCreateView,
    SpecialDayDeleteView,
    SeasonCreateView,
    SeasonDeleteView,
    WeekendMultiplierUpdateView,
)
