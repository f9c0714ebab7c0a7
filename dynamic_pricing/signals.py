"""
Signal handlers for auto-populating board-type pricing of new room types.
"""

from decimal import Decimal, ROUND_HALF_UP

from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import RoomType, PricingConfiguration, BOARD_TYPES, get_board_ratios, get_default_multipliers


def create_board_pricing(room_type):
    """
    Create a PricingConfiguration for every board type the room type is missing.

    Base prices derive from the room-only price with the board ratios;
    the weekend multiplier comes from the room category defaults.

    Returns:
        int: number of configurations created
    """
    ratios = get_board_ratios()
    weekend = get_default_multipliers(room_type.category)['weekend']

    created_count = 0
    for board_type, _label in BOARD_TYPES:
        base_price = (Decimal(str(room_type.base_price)) * ratios[board_type]).quantize(
            Decimal('0.01'), rounding=ROUND_HALF_UP
        )
        _, created = PricingConfiguration.objects.get_or_create(
            room_type=room_type,
            board_type=board_type,
            defaults={'base_price': base_price, 'weekend_multiplier': weekend}
        )
        if created:
            created_count += 1
    return created_count


@receiver(post_save, sender=RoomType)
def create_room_type_pricing_entries(sender, instance, created, raw=False, **kwargs):
    """
    When a room type is created, auto-create pricing for all board types.
    """
    if created and not raw:
        create_board_pricing(instance)
