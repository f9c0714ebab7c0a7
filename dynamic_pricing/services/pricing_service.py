"""
Dynamic Pricing Services
========================

Bridges stored pricing configurations and the pure pricing engine.

Flow:
1. Load PricingConfiguration row for (room type, board type)
2. Convert to engine.PricingConfiguration (rule order preserved)
3. Price a single date, a stay, or a whole month
4. Mutations (rules, base price, weekend multiplier) run in a transaction
"""

import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from dateutil.relativedelta import relativedelta
from django.db import transaction

from dynamic_pricing import engine
from dynamic_pricing.exceptions import PricingConfigurationMissing

logger = logging.getLogger(__name__)


class DynamicPricingService:
    """
        Pricing service for one property.

        Usage:
            from dynamic_pricing.services import DynamicPricingService

            service = DynamicPricingService(hotel)

            breakdown = service.get_stay_breakdown(
                room_type=room,
                check_in=date(2026, 3, 13),
                check_out=date(2026, 3, 16),
                board_type='half-board',
            )

            for night in breakdown.nights:
                print(night.date, night.price, night.multipliers)
            print(f"Total: ${breakdown.total}")
        """

    def __init__(self, hotel):
        """
        Initialize service with hotel/property.

        Args:
            hotel: Property instance
        """
        self.hotel = hotel

    def _get_pricing_row(self, room_type, board_type):
        from dynamic_pricing.models import PricingConfiguration

        pricing = (
            PricingConfiguration.objects
            .filter(room_type=room_type, room_type__hotel=self.hotel, board_type=board_type)
            .prefetch_related('special_days', 'seasonal_rates')
            .first()
        )
        if pricing is None:
            raise PricingConfigurationMissing(
                f"No {board_type} pricing for room type {room_type}"
            )
        return pricing

    def get_configuration(self, room_type, board_type='room-only'):
        """
        Get the engine configuration for a room type and board type.

        Raises:
            PricingConfigurationMissing: no pricing stored for this board type
        """
        return self._get_pricing_row(room_type, board_type).to_engine_config()

    def calculate_price(self, room_type, day, board_type='room-only'):
        """Price a single night."""
        config = self.get_configuration(room_type, board_type)
        return engine.calculate_dynamic_price(day, config)

    def get_stay_breakdown(self, room_type, check_in, check_out, board_type='room-only'):
        """
        Per-night breakdown and total for a stay.

        Args:
            room_type: RoomType instance
            check_in: date, first night
            check_out: date, departure (not charged)
            board_type: board type code

        Returns:
            engine.StayBreakdown
        """
        config = self.get_configuration(room_type, board_type)
        return engine.calculate_stay_breakdown(check_in, check_out, config)

    def get_price_calendar(self, room_type, year, month, board_type='room-only'):
        """
        Get the nightly price of every day in a month.

        Returns:
            list of dicts with date, price, type ('special', 'weekend',
            'seasonal' or 'base') and the applied multipliers
        """
        config = self.get_configuration(room_type, board_type)
        first_date = date(year, month, 1)
        next_month = first_date + relativedelta(months=1)

        days = []
        for day in engine.iter_stay_dates(first_date, next_month):
            result = engine.calculate_dynamic_price(day, config)
            days.append({
                'date': day,
                'price': result.final_price,
                'type': engine.price_type(result),
                'multipliers': [engine.describe_multiplier(m) for m in result.applied_multipliers],
            })
        return days

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    @transaction.atomic
    def delete_special_day(self, day):
        """
        Remove the special day stored for ``day`` from every board type
        of every room type of this property.

        Returns:
            int: number of special day rules removed
        """
        from dynamic_pricing.models import SpecialDay

        deleted, _ = SpecialDay.objects.filter(
            configuration__room_type__hotel=self.hotel,
            date=day,
        ).delete()

        logger.info("Removed %s special day rule(s) for %s at %s", deleted, day, self.hotel)
        return deleted

    @transaction.atomic
    def update_base_price(self, room_type, base_price):
        """
        Set the room-only base price and derive the other board types.

        Board types without stored pricing are left alone; room-only
        pricing is created when missing.

        Returns:
            dict of board_type -> new base price
        """
        from dynamic_pricing.models import PricingConfiguration, ROOM_ONLY, get_board_ratios, get_default_multipliers

        base_price = Decimal(str(base_price))
        ratios = get_board_ratios()

        room_type.base_price = base_price
        room_type.save(update_fields=['base_price'])

        PricingConfiguration.objects.get_or_create(
            room_type=room_type,
            board_type=ROOM_ONLY,
            defaults={
                'base_price': base_price,
                'weekend_multiplier': get_default_multipliers(room_type.category)['weekend'],
            }
        )

        updated = {}
        for pricing in room_type.pricing_configurations.all():
            ratio = ratios.get(pricing.board_type, Decimal('1.0'))
            pricing.base_price = (base_price * ratio).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
            pricing.save(update_fields=['base_price', 'updated_at'])
            updated[pricing.board_type] = pricing.base_price

        logger.info("Updated base price of %s to %s (%s board types)", room_type, base_price, len(updated))
        return updated

    @transaction.atomic
    def add_special_day(self, room_type, day, name, multiplier=None, recurring=False, board_types=None):
        """
        Add a special day to the given board types (default: all stored ones).

        Multiplier defaults to the room category's special-day default.

        Raises:
            ValidationError: a field is out of range (e.g. multiplier too large)

        Returns:
            list of created SpecialDay objects
        """
        from dynamic_pricing.models import SpecialDay, get_default_multipliers

        if multiplier is None:
            multiplier = get_default_multipliers(room_type.category)['special']

        pricings = room_type.pricing_configurations.all()
        if board_types:
            pricings = pricings.filter(board_type__in=board_types)

        created = []
        for pricing in pricings:
            special_day = SpecialDay(
                configuration=pricing,
                date=day,
                name=name,
                multiplier=multiplier,
                recurring=recurring,
                sort_order=pricing.special_days.count(),
            )
            special_day.full_clean()
            special_day.save()
            created.append(special_day)

        logger.info("Added special day %s (%s) to %s board type(s) of %s", day, name, len(created), room_type)
        return created

    @transaction.atomic
    def add_season(self, room_type, name, start_date=None, end_date=None, multiplier=None, board_types=None):
        """
        Add a season to the given board types (default: all stored ones).

        Dates default to today through three months later; the multiplier
        defaults to the room category's seasonal default.
        """
        from dynamic_pricing.models import SeasonalRate, get_default_multipliers

        start_date = start_date or date.today()
        end_date = end_date or start_date + relativedelta(months=3)
        if multiplier is None:
            multiplier = get_default_multipliers(room_type.category)['seasonal']

        pricings = room_type.pricing_configurations.all()
        if board_types:
            pricings = pricings.filter(board_type__in=board_types)

        created = []
        for pricing in pricings:
            season = SeasonalRate(
                configuration=pricing,
                name=name,
                start_date=start_date,
                end_date=end_date,
                multiplier=multiplier,
                sort_order=pricing.seasonal_rates.count(),
            )
            season.full_clean()
            season.save()
            created.append(season)

        logger.info(
            "Added season %s (%s to %s) to %s board type(s) of %s",
            name, start_date, end_date, len(created), room_type
        )
        return created

    @transaction.atomic
    def delete_season(self, room_type, start_date, end_date, name=None):
        """
        Remove a season from every board type of a room type.

        Seasons are matched on their date range, and on name when given.

        Returns:
            int: number of seasonal rates removed
        """
        from dynamic_pricing.models import SeasonalRate

        seasons = SeasonalRate.objects.filter(
            configuration__room_type=room_type,
            configuration__room_type__hotel=self.hotel,
            start_date=start_date,
            end_date=end_date,
        )
        if name is not None:
            seasons = seasons.filter(name=name)

        deleted, _ = seasons.delete()
        logger.info("Removed %s seasonal rate(s) %s to %s from %s", deleted, start_date, end_date, room_type)
        return deleted

    @transaction.atomic
    def update_weekend_multiplier(self, room_type, weekend_multiplier, board_type='room-only'):
        """
        Set the weekend multiplier of one board type and record the change.

        The history entry covers today through one month later, priced at
        base price × new multiplier.

        Raises:
            PricingConfigurationMissing: no pricing stored for this board type
            ValidationError: multiplier out of range

        Returns:
            PriceHistory entry for the change
        """
        from dynamic_pricing.models import PriceHistory

        pricing = self._get_pricing_row(room_type, board_type)
        old_price = pricing.weekend_price()

        pricing.weekend_multiplier = Decimal(str(weekend_multiplier))
        pricing.full_clean()
        pricing.save(update_fields=['weekend_multiplier', 'updated_at'])
        new_price = pricing.weekend_price()

        currency = self.hotel.get_currency_symbol()
        today = date.today()
        entry = PriceHistory.objects.create(
            room_type=room_type,
            board_type=board_type,
            change_type='weekend',
            start_date=today,
            end_date=today + relativedelta(months=1),
            price=new_price,
            description=f"Weekend price updated from {currency}{old_price:.2f} to {currency}{new_price:.2f}",
        )

        logger.info(
            "Updated weekend multiplier of %s (%s) to %s",
            room_type, board_type, pricing.weekend_multiplier
        )
        return entry

    def get_price_history(self, room_type):
        """Price history of a room type, newest first."""
        from dynamic_pricing.models import PriceHistory

        return list(PriceHistory.objects.filter(room_type=room_type, room_type__hotel=self.hotel))


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def format_breakdown(breakdown, currency='$'):
    """
    Format a stay breakdown as readable text.

    Args:
        breakdown: engine.StayBreakdown
        currency: Currency symbol

    Returns:
        str: Formatted breakdown
    """
    lines = ["Price Breakdown:"]

    for night in breakdown.nights:
        marker = " *" if night.is_special_day else ""
        lines.append(f"  {night.date.strftime('%a %Y-%m-%d')}  {currency}{night.price:>8}{marker}")
        if night.multipliers:
            lines.append(f"      Applied: {', '.join(night.multipliers)}")

    lines.extend([
        "─" * 40,
        f"Nights: {breakdown.night_count}",
        f"TOTAL:  {currency}{breakdown.total}",
    ])

    return "\n".join(lines)
