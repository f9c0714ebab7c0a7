"""
View mixins: PricingManagementMixin.
"""

import json
import logging
from datetime import date
from decimal import Decimal, InvalidOperation

from django.http import JsonResponse
from django.shortcuts import get_object_or_404

from dynamic_pricing.models import Property, RoomType, BOARD_TYPES, ROOM_ONLY

logger = logging.getLogger(__name__)


class PricingManagementMixin:
    """Base mixin for pricing API views."""

    def get_hotel(self, request):
        """Get current hotel from URL kwargs."""
        return get_object_or_404(
            Property.objects.select_related('organization'),
            organization__code=self.kwargs.get('org_code'),
            code=self.kwargs.get('prop_code'),
            is_active=True
        )

    def get_room_type(self, hotel):
        """Get room type from URL kwargs, scoped to the hotel."""
        return get_object_or_404(RoomType, id=self.kwargs.get('room_id'), hotel=hotel)

    def json_response(self, data, status=200):
        """Return JSON response."""
        return JsonResponse(data, status=status)

    def error_response(self, message, status=400):
        """Return error JSON response."""
        return JsonResponse({'success': False, 'error': message}, status=status)

    def success_response(self, data=None, message=None):
        """Return success JSON response."""
        response = {'success': True}
        if message:
            response['message'] = message
        if data:
            response['data'] = data
        return JsonResponse(response)

    def get_payload(self, request):
        """
        Request data from a JSON body or form POST.

        Raises:
            ValueError: body is not valid JSON or not a JSON object
        """
        if request.content_type == 'application/json':
            try:
                data = json.loads(request.body or b'{}')
            except json.JSONDecodeError as e:
                raise ValueError('Invalid JSON') from e
            if not isinstance(data, dict):
                raise ValueError('JSON object expected')
            return data
        return request.POST

    def parse_decimal(self, value, default=Decimal('0.00')):
        """Safely parse decimal from string."""
        if value is None or value == '':
            return default
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError):
            return default
        # NaN and Infinity
        if not result.is_finite():
            return default
        return result

    def parse_date(self, value):
        """Parse date from string (YYYY-MM-DD)."""
        if not value:
            return None
        try:
            return date.fromisoformat(value)
        except (TypeError, ValueError):
            return None

    def parse_board_type(self, value):
        """Return the board type code, or None when unknown."""
        value = value or ROOM_ONLY
        if value not in dict(BOARD_TYPES):
            return None
        return value
