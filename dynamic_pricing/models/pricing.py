"""
Pricing models: RoomType, PricingConfiguration, SpecialDay, SeasonalRate, PriceHistory.
"""

from decimal import Decimal, ROUND_HALF_UP

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from dynamic_pricing import engine

from .core import Property


# =============================================================================
# BOARD TYPES & DEFAULTS
# =============================================================================

ROOM_ONLY = 'room-only'
BREAKFAST_INCLUDED = 'breakfast-included'
HALF_BOARD = 'half-board'
FULL_BOARD = 'full-board'

BOARD_TYPES = [
    (ROOM_ONLY, 'Room Only'),
    (BREAKFAST_INCLUDED, 'Breakfast Included'),
    (HALF_BOARD, 'Half Board'),
    (FULL_BOARD, 'Full Board'),
]

# Base price of each board type relative to room-only
DEFAULT_BOARD_RATIOS = {
    ROOM_ONLY: Decimal('1.0'),
    BREAKFAST_INCLUDED: Decimal('1.2'),
    HALF_BOARD: Decimal('1.4'),
    FULL_BOARD: Decimal('1.6'),
}

ROOM_CATEGORIES = [
    ('standard', 'Standard'),
    ('deluxe', 'Deluxe'),
    ('suite', 'Suite'),
    ('executive', 'Executive'),
]

# Editor defaults per room category
DEFAULT_MULTIPLIERS = {
    'standard': {'weekend': Decimal('1.2'), 'special': Decimal('1.3'), 'seasonal': Decimal('1.2')},
    'deluxe': {'weekend': Decimal('1.3'), 'special': Decimal('1.5'), 'seasonal': Decimal('1.4')},
    'suite': {'weekend': Decimal('1.4'), 'special': Decimal('1.8'), 'seasonal': Decimal('1.6')},
    'executive': {'weekend': Decimal('1.5'), 'special': Decimal('2.0'), 'seasonal': Decimal('1.8')},
}

POSITIVE = MinValueValidator(Decimal('0.01'))


def get_board_ratios():
    """
    Board-type ratios, overridable with the DYNAMIC_PRICING_BOARD_RATIOS setting.
    """
    ratios = dict(DEFAULT_BOARD_RATIOS)
    overrides = getattr(settings, 'DYNAMIC_PRICING_BOARD_RATIOS', None) or {}
    for board_type, ratio in overrides.items():
        ratios[board_type] = Decimal(str(ratio))
    return ratios


def get_default_multipliers(category):
    return DEFAULT_MULTIPLIERS.get(category, DEFAULT_MULTIPLIERS['standard'])


# =============================================================================
# ROOM TYPES
# =============================================================================

class RoomType(models.Model):
    """
    Room category of a property.
    Each room type has one PricingConfiguration per board type.
    """
    hotel = models.ForeignKey(
        Property,
        on_delete=models.CASCADE,
        related_name='room_types',
        help_text="Property this room type belongs to"
    )
    name = models.CharField(max_length=100, help_text="e.g., Standard Room, Deluxe Room, Suite")

    category = models.CharField(
        max_length=20,
        choices=ROOM_CATEGORIES,
        default='standard',
        help_text="Drives default weekend/special/seasonal multipliers"
    )

    base_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
        help_text="Room-only nightly rate used to seed board-type pricing"
    )

    number_of_rooms = models.PositiveIntegerField(
        default=10,
        help_text="Number of rooms of this type"
    )

    sort_order = models.PositiveIntegerField(default=0, help_text="Display order")

    class Meta:
        ordering = ['hotel', 'sort_order', 'name']
        verbose_name = "Room Type"
        verbose_name_plural = "Room Types"

    def __str__(self):
        count_str = f" ({self.number_of_rooms} rooms)" if self.number_of_rooms else ""
        return f"{self.name}{count_str}"

    def get_pricing(self, board_type=ROOM_ONLY):
        """Return the stored PricingConfiguration for a board type, or None."""
        return self.pricing_configurations.filter(board_type=board_type).first()


# =============================================================================
# PRICING CONFIGURATION
# =============================================================================

class PricingConfiguration(models.Model):
    """
    Dynamic pricing rules for one room type and board type.

    Calculation (see dynamic_pricing.engine):
        nightly = base_price × season multiplier × (special day | weekend multiplier)

    Example (base 100, weekend ×1.3, Summer ×1.5):
        Tuesday in summer:   100 × 1.5       = 150
        Saturday in summer:  100 × 1.5 × 1.3 = 195
    """
    room_type = models.ForeignKey(
        RoomType,
        on_delete=models.CASCADE,
        related_name='pricing_configurations',
        help_text="Room type this pricing belongs to"
    )
    board_type = models.CharField(
        max_length=20,
        choices=BOARD_TYPES,
        default=ROOM_ONLY,
        help_text="Meal plan variant"
    )
    base_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
        help_text="Nightly rate with no adjustments"
    )
    weekend_multiplier = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=Decimal('1.20'),
        validators=[POSITIVE],
        help_text="Applied to Saturday/Sunday nights that are not special days (e.g., 1.30)"
    )

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['room_type', 'board_type']
        verbose_name = "Pricing Configuration"
        verbose_name_plural = "Pricing Configurations"
        unique_together = ['room_type', 'board_type']

    def __str__(self):
        return f"{self.room_type.name} - {self.get_board_type_display()} (${self.base_price})"

    def weekend_price(self):
        """Weekend rate before seasons/special days, for display."""
        return (self.base_price * self.weekend_multiplier).quantize(
            Decimal('0.01'), rounding=ROUND_HALF_UP
        )

    def to_engine_config(self):
        """
        Build the immutable engine configuration.

        Special days and seasons keep their stored order; the first
        matching rule wins in the engine.
        """
        return engine.PricingConfiguration(
            base_price=self.base_price,
            weekend_multiplier=self.weekend_multiplier,
            special_days=[day.to_rule() for day in self.special_days.all()],
            seasonal_pricing=[season.to_rule() for season in self.seasonal_rates.all()],
        )


class SpecialDay(models.Model):
    """
    Date-specific multiplier that replaces the weekend multiplier.

    Example:
        New Year's Eve: 2025-12-31, ×2.00, recurring
    """
    configuration = models.ForeignKey(
        PricingConfiguration,
        on_delete=models.CASCADE,
        related_name='special_days'
    )
    date = models.DateField(help_text="Calendar date (year ignored when recurring)")
    name = models.CharField(max_length=100, blank=True, help_text="e.g., New Year's Eve")
    multiplier = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=Decimal('1.30'),
        validators=[POSITIVE],
        help_text="Multiplier applied to base price (e.g., 2.00 for double price)"
    )
    recurring = models.BooleanField(
        default=False,
        help_text="Apply every year on the same month and day"
    )
    sort_order = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ['configuration', 'sort_order', 'id']
        verbose_name = "Special Day"
        verbose_name_plural = "Special Days"

    def __str__(self):
        recurring = " (yearly)" if self.recurring else ""
        return f"{self.name or self.date.isoformat()} ×{self.multiplier}{recurring}"

    def to_rule(self):
        return engine.SpecialDayRule(
            date=self.date,
            name=self.name,
            multiplier=self.multiplier,
            recurring=self.recurring,
        )


class SeasonalRate(models.Model):
    """
    Seasonal multiplier over an inclusive date range.

    Example:
        Summer Season: Jun 1 - Aug 31, ×1.20
    """
    configuration = models.ForeignKey(
        PricingConfiguration,
        on_delete=models.CASCADE,
        related_name='seasonal_rates'
    )
    name = models.CharField(max_length=100, blank=True, help_text="e.g., Summer Season, Winter Season")
    start_date = models.DateField(help_text="Start date (inclusive)")
    end_date = models.DateField(help_text="End date (inclusive)")
    multiplier = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=Decimal('1.20'),
        validators=[POSITIVE],
        help_text="Multiplier combined with special day/weekend multipliers"
    )
    sort_order = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ['configuration', 'sort_order', 'id']
        verbose_name = "Seasonal Rate"
        verbose_name_plural = "Seasonal Rates"

    def __str__(self):
        return f"{self.name} ({self.start_date.strftime('%b %d')} - {self.end_date.strftime('%b %d')})"

    def clean(self):
        """Validate that end_date is not before start_date."""
        if self.end_date and self.start_date and self.end_date < self.start_date:
            raise ValidationError({
                'end_date': 'End date cannot be before start date.'
            })

    def to_rule(self):
        return engine.SeasonalRule(
            start_date=self.start_date,
            end_date=self.end_date,
            name=self.name,
            multiplier=self.multiplier,
        )


# =============================================================================
# PRICE HISTORY
# =============================================================================

PRICE_CHANGE_TYPES = [
    ('weekend', 'Weekend'),
    ('seasonal', 'Seasonal'),
]


class PriceHistory(models.Model):
    """
    Log of pricing changes made from the editor, newest first.

    Example:
        Weekend price updated from $130.00 to $150.00 (Mar 01 - Apr 01)
    """
    room_type = models.ForeignKey(
        RoomType,
        on_delete=models.CASCADE,
        related_name='price_history'
    )
    board_type = models.CharField(max_length=20, choices=BOARD_TYPES, default=ROOM_ONLY)
    change_type = models.CharField(max_length=20, choices=PRICE_CHANGE_TYPES, default='weekend')
    start_date = models.DateField(help_text="First date the new price applies to")
    end_date = models.DateField(help_text="Last date shown for the new price")
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        help_text="Nightly price after the change"
    )
    description = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']
        verbose_name = "Price History Entry"
        verbose_name_plural = "Price History"

    def __str__(self):
        return f"{self.room_type.name}: {self.description or self.price}"

    def to_dict(self):
        return {
            'startDate': self.start_date.isoformat(),
            'endDate': self.end_date.isoformat(),
            'price': self.price,
            'type': self.change_type,
            'description': self.description,
        }
