"""
Pricing models package.

Re-exports all models so Django migrations and existing imports
continue to work unchanged:
    from dynamic_pricing.models import RoomType, PricingConfiguration, etc.
"""

# Core: Organization, Property
from .core import (
    Organization,
    Property,
)

# Pricing: Room types, board-type pricing, special days, seasons, history
from .pricing import (
    RoomType,
    PricingConfiguration,
    SpecialDay,
    SeasonalRate,
    PriceHistory,
    BOARD_TYPES,
    ROOM_ONLY,
    BREAKFAST_INCLUDED,
    HALF_BOARD,
    FULL_BOARD,
    get_board_ratios,
    get_default_multipliers,
)

__all__ = [
    # Core
    'Organization', 'Property',
    # Pricing
    'RoomType', 'PricingConfiguration', 'SpecialDay', 'SeasonalRate', 'PriceHistory',
    'BOARD_TYPES', 'ROOM_ONLY', 'BREAKFAST_INCLUDED', 'HALF_BOARD', 'FULL_BOARD',
    'get_board_ratios', 'get_default_multipliers',
]
