"""
Management command to populate board-type pricing for existing room types.
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from dynamic_pricing.models import RoomType
from dynamic_pricing.signals import create_board_pricing


class Command(BaseCommand):
    help = 'Create missing board-type pricing configurations for all room types'

    def add_arguments(self, parser):
        parser.add_argument('--property', dest='prop_code', help='Only this property code')

    def handle(self, *args, **options):
        room_types = RoomType.objects.select_related('hotel')
        if options.get('prop_code'):
            room_types = room_types.filter(hotel__code=options['prop_code'])

        self.stdout.write(f"Found {room_types.count()} room types")

        created_count = 0
        with transaction.atomic():
            for room_type in room_types:
                created = create_board_pricing(room_type)
                if created:
                    created_count += created
                    self.stdout.write(f"  Created {created}: {room_type.hotel.name} - {room_type.name}")

        self.stdout.write(self.style.SUCCESS(
            f"\n✓ Complete!"
            f"\n  Created: {created_count} new configurations"
        ))
