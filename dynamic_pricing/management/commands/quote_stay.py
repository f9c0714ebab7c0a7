"""
Management command to print the price breakdown of a stay.

    python manage.py quote_stay biosphere-inn 12 2026-12-23 2026-12-27 --board-type half-board
"""

from datetime import date

from django.core.management.base import BaseCommand, CommandError

from dynamic_pricing.exceptions import PricingConfigurationMissing
from dynamic_pricing.models import Property, RoomType, BOARD_TYPES, ROOM_ONLY
from dynamic_pricing.services import DynamicPricingService, format_breakdown


def _parse_date(value):
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise CommandError(f"Invalid date '{value}', expected YYYY-MM-DD")


class Command(BaseCommand):
    help = 'Print the per-night price breakdown for a stay'

    def add_arguments(self, parser):
        parser.add_argument('prop_code', help='Property code')
        parser.add_argument('room_id', type=int, help='Room type ID')
        parser.add_argument('check_in', help='Check-in date (YYYY-MM-DD)')
        parser.add_argument('check_out', help='Check-out date (YYYY-MM-DD)')
        parser.add_argument(
            '--board-type',
            default=ROOM_ONLY,
            choices=[code for code, _label in BOARD_TYPES],
        )

    def handle(self, *args, **options):
        hotel = Property.objects.filter(code=options['prop_code'], is_active=True).first()
        if hotel is None:
            raise CommandError(f"Property '{options['prop_code']}' not found")

        room_type = RoomType.objects.filter(hotel=hotel, id=options['room_id']).first()
        if room_type is None:
            raise CommandError(f"Room type {options['room_id']} not found at {hotel.name}")

        check_in = _parse_date(options['check_in'])
        check_out = _parse_date(options['check_out'])

        try:
            breakdown = DynamicPricingService(hotel).get_stay_breakdown(
                room_type, check_in, check_out, options['board_type']
            )
        except PricingConfigurationMissing as e:
            raise CommandError(str(e))

        self.stdout.write(f"{hotel.name} - {room_type.name} ({options['board_type']})")
        self.stdout.write(format_breakdown(breakdown, currency=hotel.get_currency_symbol()))
