"""Tests for the pure dynamic pricing engine."""
import dataclasses
from datetime import date
from decimal import Decimal

import pytest

from dynamic_pricing import engine
from dynamic_pricing.engine import (
    AppliedMultiplier,
    PricingConfiguration,
    SeasonalRule,
    SpecialDayRule,
    calculate_dynamic_price,
    calculate_stay_breakdown,
    describe_multiplier,
    find_active_season,
    find_special_day,
    is_weekend,
)

WEDNESDAY = date(2024, 6, 12)
FRIDAY = date(2024, 6, 14)
SATURDAY = date(2024, 6, 15)
SUNDAY = date(2024, 6, 16)


def make_config(base_price=100, weekend_multiplier='1.3', special_days=(), seasonal_pricing=()):
    return PricingConfiguration(
        base_price=base_price,
        weekend_multiplier=weekend_multiplier,
        special_days=special_days,
        seasonal_pricing=seasonal_pricing,
    )


class TestValueTypes:
    """Value objects normalise their inputs and stay immutable."""

    def test_numbers_become_decimal(self):
        config = make_config(base_price=99.5, weekend_multiplier=1.3)
        assert config.base_price == Decimal('99.5')
        assert config.weekend_multiplier == Decimal('1.3')

    def test_iso_strings_become_dates(self):
        rule = SpecialDayRule(date='2024-12-25', name='Christmas', multiplier='2.0')
        assert rule.date == date(2024, 12, 25)
        assert rule.recurring is False

    def test_configuration_is_frozen(self):
        config = make_config()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.base_price = Decimal('200')

    def test_rule_sequences_become_tuples(self):
        config = make_config(special_days=[SpecialDayRule('2024-12-25', 'Christmas', 2)])
        assert isinstance(config.special_days, tuple)

    def test_from_dict_accepts_document_fields(self):
        config = PricingConfiguration.from_dict({
            'basePrice': 120,
            'weekendMultiplier': 1.25,
            'specialDays': [{'date': '2024-12-31', 'name': "New Year's Eve", 'multiplier': 2}],
            'seasonalPricing': [{
                'startDate': '2024-06-01',
                'endDate': '2024-08-31',
                'description': 'Summer',
                'multiplier': 1.2,
            }],
        })
        assert config.base_price == Decimal('120')
        assert config.special_days[0].recurring is False
        assert config.seasonal_pricing[0].name == 'Summer'
        assert config.seasonal_pricing[0].end_date == date(2024, 8, 31)

    def test_from_dict_accepts_snake_case(self):
        config = PricingConfiguration.from_dict({
            'base_price': '80',
            'weekend_multiplier': '1.1',
            'special_days': [],
            'seasonal_pricing': [],
        })
        assert config.base_price == Decimal('80')
        assert config.special_days == ()

    def test_to_dict_uses_document_fields(self):
        config = make_config(
            seasonal_pricing=[SeasonalRule('2024-06-01', '2024-08-31', 'Summer', '1.2')],
        )
        data = config.to_dict()
        assert data['basePrice'] == Decimal('100')
        assert data['seasonalPricing'][0]['startDate'] == '2024-06-01'


class TestIsWeekend:

    def test_saturday_and_sunday(self):
        assert is_weekend(SATURDAY)
        assert is_weekend(SUNDAY)

    def test_weekdays(self):
        assert not is_weekend(WEDNESDAY)
        assert not is_weekend(FRIDAY)


class TestFindSpecialDay:
    """Special day lookup: exact dates, yearly recurrence, first match wins."""

    def test_exact_date_match(self):
        rule = SpecialDayRule('2024-12-25', 'Christmas', 2)
        assert find_special_day(date(2024, 12, 25), [rule]) is rule

    def test_non_recurring_needs_same_year(self):
        rule = SpecialDayRule('2024-12-25', 'Christmas', 2)
        assert find_special_day(date(2025, 12, 25), [rule]) is None

    def test_recurring_matches_across_years(self):
        rule = SpecialDayRule('2023-12-25', 'Christmas', 2, recurring=True)
        assert find_special_day(date(2030, 12, 25), [rule]) is rule

    def test_recurring_needs_same_month_and_day(self):
        rule = SpecialDayRule('2023-12-25', 'Christmas', 2, recurring=True)
        assert find_special_day(date(2030, 12, 24), [rule]) is None
        assert find_special_day(date(2030, 1, 25), [rule]) is None

    def test_recurring_leap_day_only_matches_leap_years(self):
        rule = SpecialDayRule('2024-02-29', 'Leap Day', 3, recurring=True)
        assert find_special_day(date(2028, 2, 29), [rule]) is rule
        assert find_special_day(date(2027, 3, 1), [rule]) is None
        assert find_special_day(date(2027, 2, 28), [rule]) is None

    def test_first_match_wins(self):
        first = SpecialDayRule('2024-12-25', 'Christmas', 2)
        second = SpecialDayRule('2024-12-25', 'Christmas Premium', 3)
        assert find_special_day(date(2024, 12, 25), [first, second]) is first
        assert find_special_day(date(2024, 12, 25), [second, first]) is second

    def test_no_rules(self):
        assert find_special_day(WEDNESDAY, []) is None


class TestFindActiveSeason:
    """Seasons cover a closed date interval."""

    def test_boundaries_are_inclusive(self):
        season = SeasonalRule('2024-06-01', '2024-08-31', 'Summer', '1.2')
        assert find_active_season(date(2024, 6, 1), [season]) is season
        assert find_active_season(date(2024, 8, 31), [season]) is season

    def test_outside_interval(self):
        season = SeasonalRule('2024-06-01', '2024-08-31', 'Summer', '1.2')
        assert find_active_season(date(2024, 5, 31), [season]) is None
        assert find_active_season(date(2024, 9, 1), [season]) is None

    def test_overlapping_seasons_first_match_wins(self):
        summer = SeasonalRule('2024-06-01', '2024-08-31', 'Summer', '1.2')
        festival = SeasonalRule('2024-06-10', '2024-06-20', 'Festival', '1.8')
        assert find_active_season(SATURDAY, [summer, festival]) is summer
        assert find_active_season(SATURDAY, [festival, summer]) is festival

    def test_season_spanning_new_year(self):
        winter = SeasonalRule('2024-12-20', '2025-01-05', 'Holidays', '1.5')
        assert find_active_season(date(2025, 1, 2), [winter]) is winter


class TestCalculateDynamicPrice:
    """Single-night pricing and multiplier precedence."""

    def test_weekday_without_rules_is_base_price(self):
        result = calculate_dynamic_price(WEDNESDAY, make_config(base_price=100))
        assert result.final_price == 100
        assert result.base_price == 100
        assert result.applied_multipliers == ()

    def test_base_price_is_rounded(self):
        result = calculate_dynamic_price(WEDNESDAY, make_config(base_price='99.6'))
        assert result.final_price == 100
        assert result.base_price == Decimal('99.6')

    def test_weekend_only(self):
        result = calculate_dynamic_price(SATURDAY, make_config(base_price=100, weekend_multiplier='1.3'))
        assert result.final_price == 130
        assert result.applied_multipliers == (
            AppliedMultiplier('weekend', 'Weekend Rate', Decimal('1.3')),
        )

    def test_special_day_replaces_weekend(self):
        config = make_config(
            base_price=100,
            weekend_multiplier='1.3',
            special_days=[SpecialDayRule(SATURDAY, 'Gala Night', '2.0')],
        )
        result = calculate_dynamic_price(SATURDAY, config)
        assert result.final_price == 200
        assert len(result.applied_multipliers) == 1
        assert result.applied_multipliers[0].type == 'special'
        assert result.applied_multipliers[0].name == 'Gala Night'

    def test_special_day_on_weekday(self):
        config = make_config(special_days=[SpecialDayRule(WEDNESDAY, 'Conference', '1.5')])
        assert calculate_dynamic_price(WEDNESDAY, config).final_price == 150

    def test_seasonal_and_special_compose_seasonal_first(self):
        config = make_config(
            base_price=100,
            special_days=[SpecialDayRule(WEDNESDAY, 'Midsummer', '2.0')],
            seasonal_pricing=[SeasonalRule('2024-06-01', '2024-08-31', 'Summer', '1.5')],
        )
        result = calculate_dynamic_price(WEDNESDAY, config)
        assert result.final_price == 300
        assert [(m.type, m.multiplier) for m in result.applied_multipliers] == [
            ('seasonal', Decimal('1.5')),
            ('special', Decimal('2.0')),
        ]

    def test_seasonal_and_weekend_compose(self):
        config = make_config(
            base_price=100,
            weekend_multiplier='1.3',
            seasonal_pricing=[SeasonalRule('2024-06-01', '2024-08-31', 'Summer', '1.5')],
        )
        result = calculate_dynamic_price(SATURDAY, config)
        assert result.final_price == 195
        assert [m.type for m in result.applied_multipliers] == ['seasonal', 'weekend']

    def test_rounding_happens_once_at_the_end(self):
        # 100 × 1.004 × 1.004 = 100.8016 -> 101; per-step rounding would give 100
        config = make_config(
            base_price=100,
            special_days=[SpecialDayRule(WEDNESDAY, 'Tiny', '1.004')],
            seasonal_pricing=[SeasonalRule('2024-06-01', '2024-08-31', 'Tiny Season', '1.004')],
        )
        assert calculate_dynamic_price(WEDNESDAY, config).final_price == 101

    def test_half_rounds_up(self):
        config = make_config(base_price=100, weekend_multiplier='1.305')
        assert calculate_dynamic_price(SATURDAY, config).final_price == 131

    def test_discount_multiplier(self):
        config = make_config(
            base_price=200,
            seasonal_pricing=[SeasonalRule('2024-06-01', '2024-06-30', 'Low Season', '0.8')],
        )
        assert calculate_dynamic_price(WEDNESDAY, config).final_price == 160

    def test_idempotent(self):
        config = make_config(
            special_days=[SpecialDayRule(SATURDAY, 'Gala Night', '2.0')],
            seasonal_pricing=[SeasonalRule('2024-06-01', '2024-08-31', 'Summer', '1.5')],
        )
        first = calculate_dynamic_price(SATURDAY, config)
        second = calculate_dynamic_price(SATURDAY, config)
        assert first == second

    def test_overlapping_special_days_use_first(self):
        config = make_config(
            base_price=100,
            special_days=[
                SpecialDayRule(WEDNESDAY, 'First', '1.5'),
                SpecialDayRule(WEDNESDAY, 'Second', '3.0'),
            ],
        )
        result = calculate_dynamic_price(WEDNESDAY, config)
        assert result.final_price == 150
        assert result.applied_multipliers[0].name == 'First'

    def test_negative_base_price_is_not_rejected(self):
        result = calculate_dynamic_price(WEDNESDAY, make_config(base_price=-50))
        assert result.final_price == -50

    def test_to_dict(self):
        data = calculate_dynamic_price(SATURDAY, make_config()).to_dict()
        assert data['finalPrice'] == 130
        assert data['appliedMultipliers'] == [
            {'type': 'weekend', 'name': 'Weekend Rate', 'multiplier': Decimal('1.3')},
        ]


class TestDescribeMultiplier:

    def test_increase(self):
        applied = AppliedMultiplier('special', 'Christmas', Decimal('2.0'))
        assert describe_multiplier(applied) == 'Christmas (100% increase)'

    def test_weekend_increase(self):
        applied = AppliedMultiplier('weekend', 'Weekend Rate', Decimal('1.3'))
        assert describe_multiplier(applied) == 'Weekend Rate (30% increase)'

    def test_decrease(self):
        applied = AppliedMultiplier('seasonal', 'Low Season', Decimal('0.8'))
        assert describe_multiplier(applied) == 'Low Season (-20% decrease)'

    def test_percent_rounded_to_whole_number(self):
        applied = AppliedMultiplier('seasonal', 'Shoulder', Decimal('1.125'))
        assert describe_multiplier(applied) == 'Shoulder (13% increase)'


class TestCalculateStayBreakdown:
    """Multi-night stays: one entry per night, round-then-sum totals."""

    def test_nights_exclude_checkout(self):
        breakdown = calculate_stay_breakdown(WEDNESDAY, SATURDAY, make_config())
        assert [night.date for night in breakdown.nights] == [
            date(2024, 6, 12), date(2024, 6, 13), date(2024, 6, 14),
        ]
        assert breakdown.night_count == 3
        assert breakdown.total == 300

    def test_total_sums_rounded_nightly_prices(self):
        config = make_config(base_price=100, weekend_multiplier='1.305')
        breakdown = calculate_stay_breakdown(FRIDAY, SUNDAY, config)
        assert [night.price for night in breakdown.nights] == [100, 131]
        assert breakdown.total == 231

    def test_round_then_sum_differs_from_sum_then_round(self):
        config = make_config(base_price=100, weekend_multiplier='1.305')
        breakdown = calculate_stay_breakdown(SATURDAY, date(2024, 6, 17), config)
        # 130.5 + 130.5 = 261 unrounded; each night rounds to 131
        assert breakdown.total == 262

    def test_empty_range(self):
        breakdown = calculate_stay_breakdown(WEDNESDAY, WEDNESDAY, make_config())
        assert breakdown.nights == ()
        assert breakdown.total == 0

    def test_reversed_range_is_empty(self):
        breakdown = calculate_stay_breakdown(SATURDAY, WEDNESDAY, make_config())
        assert breakdown.nights == ()
        assert breakdown.total == 0

    def test_special_day_flag_independent_of_season(self):
        config = make_config(
            special_days=[SpecialDayRule(FRIDAY, 'Festival', '1.5')],
            seasonal_pricing=[SeasonalRule('2024-06-01', '2024-08-31', 'Summer', '1.2')],
        )
        breakdown = calculate_stay_breakdown(WEDNESDAY, SATURDAY, config)
        assert [night.is_special_day for night in breakdown.nights] == [False, False, True]

    def test_multiplier_descriptions(self):
        config = make_config(
            special_days=[SpecialDayRule(FRIDAY, 'Festival', '1.5')],
            seasonal_pricing=[SeasonalRule('2024-06-01', '2024-08-31', 'Summer', '1.2')],
        )
        night = calculate_stay_breakdown(FRIDAY, SATURDAY, config).nights[0]
        assert night.multipliers == ('Summer (20% increase)', 'Festival (50% increase)')
        assert night.price == 180

    def test_stay_across_month_boundary(self):
        breakdown = calculate_stay_breakdown(date(2024, 1, 30), date(2024, 2, 2), make_config())
        assert [night.date.day for night in breakdown.nights] == [30, 31, 1]

    def test_to_dict(self):
        data = calculate_stay_breakdown(FRIDAY, SUNDAY, make_config()).to_dict()
        assert data['total'] == 230
        assert data['dailyPrices'][1] == {
            'date': '2024-06-15',
            'price': Decimal('130'),
            'multipliers': ['Weekend Rate (30% increase)'],
            'isSpecialDay': False,
        }


class TestPriceType:

    def test_labels(self):
        config = make_config(
            special_days=[SpecialDayRule(FRIDAY, 'Festival', '1.5')],
            seasonal_pricing=[SeasonalRule('2024-06-12', '2024-06-12', 'Peak', '1.2')],
        )
        assert engine.price_type(calculate_dynamic_price(FRIDAY, config)) == 'special'
        assert engine.price_type(calculate_dynamic_price(SATURDAY, config)) == 'weekend'
        assert engine.price_type(calculate_dynamic_price(WEDNESDAY, config)) == 'seasonal'
        assert engine.price_type(calculate_dynamic_price(date(2024, 6, 13), config)) == 'base'
