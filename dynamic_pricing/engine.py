"""
Dynamic Pricing Engine
======================

Pure nightly-rate calculation for a room/board-type configuration.

Calculation Flow:
1. Base Price × Seasonal Multiplier (if a season covers the date)
2. × Special Day Multiplier, or × Weekend Multiplier when no special day matches
3. Round once to the nearest whole unit
4. Stay total = sum of the rounded nightly prices

Overlapping rules resolve first-match-wins in the order they were given.
All dates are calendar dates in the property's local calendar; no timezone
conversion happens here.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Iterator, Optional, Tuple, Union


SEASONAL = 'seasonal'
SPECIAL = 'special'
WEEKEND = 'weekend'

WEEKEND_RATE_NAME = 'Weekend Rate'

Number = Union[Decimal, int, float, str]
DateLike = Union[date, str]


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _to_date(value: DateLike) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def _first(data, *keys, default=None):
    for key in keys:
        if key in data:
            return data[key]
    return default


# =============================================================================
# VALUE TYPES
# =============================================================================

@dataclass(frozen=True)
class SpecialDayRule:
    """
    Custom multiplier for one calendar date.

    A recurring rule matches the same month/day every year.
    """
    date: date
    name: str
    multiplier: Decimal
    recurring: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'date', _to_date(self.date))
        object.__setattr__(self, 'multiplier', _to_decimal(self.multiplier))
        object.__setattr__(self, 'recurring', bool(self.recurring))

    def matches(self, day: date) -> bool:
        if self.recurring:
            return (self.date.month, self.date.day) == (day.month, day.day)
        return self.date == day

    @classmethod
    def from_dict(cls, data) -> 'SpecialDayRule':
        return cls(
            date=data['date'],
            name=data.get('name', ''),
            multiplier=data['multiplier'],
            recurring=data.get('recurring') or False,
        )

    def to_dict(self):
        return {
            'date': self.date.isoformat(),
            'name': self.name,
            'multiplier': self.multiplier,
            'recurring': self.recurring,
        }


@dataclass(frozen=True)
class SeasonalRule:
    """Multiplier for every date in the closed interval [start_date, end_date]."""
    start_date: date
    end_date: date
    name: str
    multiplier: Decimal

    def __post_init__(self):
        object.__setattr__(self, 'start_date', _to_date(self.start_date))
        object.__setattr__(self, 'end_date', _to_date(self.end_date))
        object.__setattr__(self, 'multiplier', _to_decimal(self.multiplier))

    @property
    def description(self) -> str:
        return self.name

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    @classmethod
    def from_dict(cls, data) -> 'SeasonalRule':
        return cls(
            start_date=_first(data, 'startDate', 'start_date'),
            end_date=_first(data, 'endDate', 'end_date'),
            name=_first(data, 'name', 'description', default=''),
            multiplier=data['multiplier'],
        )

    def to_dict(self):
        return {
            'startDate': self.start_date.isoformat(),
            'endDate': self.end_date.isoformat(),
            'name': self.name,
            'multiplier': self.multiplier,
        }


@dataclass(frozen=True)
class PricingConfiguration:
    """
    Pricing rules for one room/board-type combination.

    Rule order is kept as given; it decides which rule wins when
    several cover the same date.
    """
    base_price: Decimal
    weekend_multiplier: Decimal
    special_days: Tuple[SpecialDayRule, ...] = ()
    seasonal_pricing: Tuple[SeasonalRule, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'base_price', _to_decimal(self.base_price))
        object.__setattr__(self, 'weekend_multiplier', _to_decimal(self.weekend_multiplier))
        object.__setattr__(self, 'special_days', tuple(self.special_days))
        object.__setattr__(self, 'seasonal_pricing', tuple(self.seasonal_pricing))

    @classmethod
    def from_dict(cls, data) -> 'PricingConfiguration':
        """
        Build a configuration from stored/posted data.

        Accepts both the camelCase document fields (basePrice,
        weekendMultiplier, specialDays, seasonalPricing) and snake_case.
        """
        special_days = _first(data, 'specialDays', 'special_days', default=()) or ()
        seasons = _first(data, 'seasonalPricing', 'seasonal_pricing', default=()) or ()
        return cls(
            base_price=_first(data, 'basePrice', 'base_price'),
            weekend_multiplier=_first(data, 'weekendMultiplier', 'weekend_multiplier'),
            special_days=[SpecialDayRule.from_dict(day) for day in special_days],
            seasonal_pricing=[SeasonalRule.from_dict(season) for season in seasons],
        )

    def to_dict(self):
        return {
            'basePrice': self.base_price,
            'weekendMultiplier': self.weekend_multiplier,
            'specialDays': [day.to_dict() for day in self.special_days],
            'seasonalPricing': [season.to_dict() for season in self.seasonal_pricing],
        }


@dataclass(frozen=True)
class AppliedMultiplier:
    type: str
    name: str
    multiplier: Decimal

    def to_dict(self):
        return {'type': self.type, 'name': self.name, 'multiplier': self.multiplier}


@dataclass(frozen=True)
class PriceCalculationResult:
    final_price: Decimal
    base_price: Decimal
    applied_multipliers: Tuple[AppliedMultiplier, ...] = ()

    def to_dict(self):
        return {
            'finalPrice': self.final_price,
            'basePrice': self.base_price,
            'appliedMultipliers': [m.to_dict() for m in self.applied_multipliers],
        }


@dataclass(frozen=True)
class NightlyPrice:
    date: date
    price: Decimal
    multipliers: Tuple[str, ...]
    is_special_day: bool
    result: PriceCalculationResult

    def to_dict(self):
        return {
            'date': self.date.isoformat(),
            'price': self.price,
            'multipliers': list(self.multipliers),
            'isSpecialDay': self.is_special_day,
        }


@dataclass(frozen=True)
class StayBreakdown:
    nights: Tuple[NightlyPrice, ...] = ()
    total: Decimal = Decimal('0')

    @property
    def night_count(self) -> int:
        return len(self.nights)

    def to_dict(self):
        return {
            'dailyPrices': [night.to_dict() for night in self.nights],
            'total': self.total,
        }


# =============================================================================
# RULE LOOKUP
# =============================================================================

def is_weekend(day: date) -> bool:
    """Saturday or Sunday."""
    return day.weekday() >= 5


def find_special_day(day: date, special_days: Iterable[SpecialDayRule]) -> Optional[SpecialDayRule]:
    """Return the first special day rule matching ``day``, or None."""
    for special in special_days:
        if special.matches(day):
            return special
    return None


def find_active_season(day: date, seasonal_pricing: Iterable[SeasonalRule]) -> Optional[SeasonalRule]:
    """Return the first season whose closed interval contains ``day``, or None."""
    for season in seasonal_pricing:
        if season.contains(day):
            return season
    return None


# =============================================================================
# CALCULATION
# =============================================================================

def round_price(amount: Decimal) -> Decimal:
    """Round to the nearest whole currency unit, halves away from zero."""
    return amount.quantize(Decimal('1'), rounding=ROUND_HALF_UP)


def calculate_dynamic_price(day: date, config: PricingConfiguration) -> PriceCalculationResult:
    """
    Calculate the nightly price for a single date.

    Seasonal multiplier is applied first, then at most one of special day
    or weekend. Rounding happens once, after all multipliers.

    Args:
        day: date of the night being priced
        config: PricingConfiguration for the room/board type

    Returns:
        PriceCalculationResult with the rules that fired, in order
    """
    final_price = config.base_price
    applied = []

    season = find_active_season(day, config.seasonal_pricing)
    if season:
        final_price *= season.multiplier
        applied.append(AppliedMultiplier(SEASONAL, season.name, season.multiplier))

    special = find_special_day(day, config.special_days)
    if special:
        final_price *= special.multiplier
        applied.append(AppliedMultiplier(SPECIAL, special.name, special.multiplier))
    elif is_weekend(day):
        final_price *= config.weekend_multiplier
        applied.append(AppliedMultiplier(WEEKEND, WEEKEND_RATE_NAME, config.weekend_multiplier))

    return PriceCalculationResult(
        final_price=round_price(final_price),
        base_price=config.base_price,
        applied_multipliers=tuple(applied),
    )


def describe_multiplier(applied: AppliedMultiplier) -> str:
    """e.g. ``Christmas (100% increase)`` or ``Low Season (-20% decrease)``."""
    percent = ((applied.multiplier - 1) * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    direction = 'increase' if applied.multiplier > 1 else 'decrease'
    return f"{applied.name} ({percent}% {direction})"


def iter_stay_dates(check_in: date, check_out: date) -> Iterator[date]:
    """Yield each night from check-in up to, not including, check-out."""
    current = check_in
    while current < check_out:
        yield current
        current += timedelta(days=1)


def calculate_stay_breakdown(check_in: date, check_out: date,
                             config: PricingConfiguration) -> StayBreakdown:
    """
    Price every night of a stay.

    The total is the sum of the already-rounded nightly prices. A check-out
    on or before check-in gives an empty breakdown with a zero total.
    """
    total = Decimal('0')
    nights = []

    for day in iter_stay_dates(check_in, check_out):
        result = calculate_dynamic_price(day, config)
        total += result.final_price

        nights.append(NightlyPrice(
            date=day,
            price=result.final_price,
            multipliers=tuple(describe_multiplier(m) for m in result.applied_multipliers),
            is_special_day=find_special_day(day, config.special_days) is not None,
            result=result,
        ))

    return StayBreakdown(nights=tuple(nights), total=total)


def price_type(result: PriceCalculationResult) -> str:
    """Label for calendar display: special, weekend, seasonal or base."""
    types = [m.type for m in result.applied_multipliers]
    for candidate in (SPECIAL, WEEKEND, SEASONAL):
        if candidate in types:
            return candidate
    return 'base'
