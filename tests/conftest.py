"""Pytest fixtures for dynamic pricing tests."""

from datetime import date
from decimal import Decimal

import pytest

from dynamic_pricing.models import (
    Organization, Property, RoomType, PricingConfiguration, SpecialDay, SeasonalRate,
    ROOM_ONLY, HALF_BOARD,
)


@pytest.fixture
def organization(db):
    return Organization.objects.create(name="Atoll Resorts Group", code="atoll-resorts")


@pytest.fixture
def hotel(organization):
    return Property.objects.create(
        organization=organization,
        name="Biosphere Inn",
        code="biosphere-inn",
        location="Maldives",
    )


@pytest.fixture
def room_type(hotel):
    """Deluxe room; the post_save signal creates pricing for every board type."""
    return RoomType.objects.create(
        hotel=hotel,
        name="Deluxe Room",
        category="deluxe",
        base_price=Decimal('100.00'),
    )


@pytest.fixture
def room_only(room_type):
    pricing = room_type.pricing_configurations.get(board_type=ROOM_ONLY)
    pricing.weekend_multiplier = Decimal('1.30')
    pricing.save()
    return pricing


@pytest.fixture
def half_board(room_type):
    return room_type.pricing_configurations.get(board_type=HALF_BOARD)


@pytest.fixture
def christmas(room_only, half_board):
    """Non-recurring Christmas 2024 on room-only and half-board."""
    return [
        SpecialDay.objects.create(
            configuration=pricing,
            date=date(2024, 12, 25),
            name="Christmas",
            multiplier=Decimal('2.00'),
        )
        for pricing in (room_only, half_board)
    ]


@pytest.fixture
def winter_season(room_only):
    return SeasonalRate.objects.create(
        configuration=room_only,
        name="Winter Holidays",
        start_date=date(2024, 12, 20),
        end_date=date(2025, 1, 5),
        multiplier=Decimal('1.50'),
    )
