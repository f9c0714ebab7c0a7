"""
Pricing views: stay breakdown, price calendar, pricing editor APIs.
"""

import logging
from datetime import date

from django.core.exceptions import ValidationError
from django.views.generic import View

from dynamic_pricing.exceptions import PricingConfigurationMissing
from dynamic_pricing.services import DynamicPricingService

from .mixins import PricingManagementMixin

logger = logging.getLogger(__name__)


class StayBreakdownView(PricingManagementMixin, View):
    """
    API: Per-night price breakdown for a stay.

    URL: /org/{org_code}/{prop_code}/api/rooms/{room_id}/breakdown/
         ?check_in=2026-03-13&check_out=2026-03-16&board_type=half-board
    """

    def get(self, request, *args, **kwargs):
        hotel = self.get_hotel(request)
        room_type = self.get_room_type(hotel)

        check_in = self.parse_date(request.GET.get('check_in'))
        check_out = self.parse_date(request.GET.get('check_out'))
        if check_in is None or check_out is None:
            return self.error_response('check_in and check_out dates required (YYYY-MM-DD)')

        board_type = self.parse_board_type(request.GET.get('board_type'))
        if board_type is None:
            return self.error_response('Unknown board type')

        service = DynamicPricingService(hotel)
        try:
            breakdown = service.get_stay_breakdown(room_type, check_in, check_out, board_type)
        except PricingConfigurationMissing as e:
            return self.error_response(str(e), 404)

        data = breakdown.to_dict()
        data.update({
            'success': True,
            'room_type_id': room_type.id,
            'board_type': board_type,
            'check_in': check_in,
            'check_out': check_out,
            'nights': breakdown.night_count,
            'currency_symbol': hotel.get_currency_symbol(),
        })
        return self.json_response(data)


class PriceCalendarView(PricingManagementMixin, View):
    """
    API: Nightly price for each date of a month.

    URL: /org/{org_code}/{prop_code}/api/rooms/{room_id}/calendar/?year=2026&month=12
    """

    def get(self, request, *args, **kwargs):
        hotel = self.get_hotel(request)
        room_type = self.get_room_type(hotel)

        try:
            year = int(request.GET.get('year', date.today().year))
            month = int(request.GET.get('month', date.today().month))
            if not 1 <= month <= 12:
                raise ValueError(month)
            if not date.min.year <= year < date.max.year:
                raise ValueError(year)
        except (ValueError, TypeError):
            return self.error_response('Invalid parameters')

        board_type = self.parse_board_type(request.GET.get('board_type'))
        if board_type is None:
            return self.error_response('Unknown board type')

        service = DynamicPricingService(hotel)
        try:
            days = service.get_price_calendar(room_type, year, month, board_type)
        except PricingConfigurationMissing as e:
            return self.error_response(str(e), 404)

        return self.json_response({
            'success': True,
            'year': year,
            'month': month,
            'board_type': board_type,
            'days': days,
        })


class PricingConfigurationDetailView(PricingManagementMixin, View):
    """API: Pricing configuration of a room type for the editor."""

    def get(self, request, *args, **kwargs):
        hotel = self.get_hotel(request)
        room_type = self.get_room_type(hotel)

        board_type = self.parse_board_type(request.GET.get('board_type'))
        if board_type is None:
            return self.error_response('Unknown board type')

        service = DynamicPricingService(hotel)
        try:
            config = service.get_configuration(room_type, board_type)
        except PricingConfigurationMissing as e:
            return self.error_response(str(e), 404)

        return self.json_response({
            'success': True,
            'board_type': board_type,
            'pricing': config.to_dict(),
            'price_history': [entry.to_dict() for entry in service.get_price_history(room_type)],
        })


class BasePriceUpdateView(PricingManagementMixin, View):
    """API: Update room-only base price and derived board-type prices."""

    def post(self, request, *args, **kwargs):
        hotel = self.get_hotel(request)
        room_type = self.get_room_type(hotel)

        try:
            data = self.get_payload(request)
        except ValueError as e:
            return self.error_response(str(e))

        base_price = self.parse_decimal(data.get('base_price'), None)
        if base_price is None or base_price < 0:
            return self.error_response('Base price must be a non-negative number')

        try:
            updated = DynamicPricingService(hotel).update_base_price(room_type, base_price)
        except Exception as e:
            logger.exception("Update base price error")
            return self.error_response(str(e), 500)

        return self.success_response(
            data={'base_prices': updated},
            message='Base price updated successfully'
        )


class SpecialDayCreateView(PricingManagementMixin, View):
    """API: Add a special day to a room type's board types."""

    def post(self, request, *args, **kwargs):
        hotel = self.get_hotel(request)
        room_type = self.get_room_type(hotel)

        try:
            data = self.get_payload(request)
        except ValueError as e:
            return self.error_response(str(e))

        day = self.parse_date(data.get('date'))
        if day is None:
            return self.error_response('Valid date required (YYYY-MM-DD)')

        raw_multiplier = data.get('multiplier')
        multiplier = self.parse_decimal(raw_multiplier, None)
        if raw_multiplier not in (None, '') and (multiplier is None or multiplier <= 0):
            return self.error_response('Multiplier must be a positive number')

        recurring = str(data.get('recurring', '')).lower() in ('1', 'true', 'on', 'yes')

        try:
            created = DynamicPricingService(hotel).add_special_day(
                room_type,
                day,
                name=str(data.get('name', '')).strip(),
                multiplier=multiplier,
                recurring=recurring,
            )
        except ValidationError as e:
            return self.error_response('; '.join(e.messages))
        except Exception as e:
            logger.exception("Create special day error")
            return self.error_response(str(e), 500)

        return self.success_response(
            data={'created': len(created), 'date': day.isoformat()},
            message='Special day added'
        )


class SpecialDayDeleteView(PricingManagementMixin, View):
    """
    API: Remove the special day price for a date from every board type.

    Used by the booking price breakdown "Remove Special Price" action.
    """

    def post(self, request, *args, **kwargs):
        hotel = self.get_hotel(request)

        try:
            data = self.get_payload(request)
        except ValueError as e:
            return self.error_response(str(e))

        day = self.parse_date(data.get('date'))
        if day is None:
            return self.error_response('Valid date required (YYYY-MM-DD)')

        try:
            deleted = DynamicPricingService(hotel).delete_special_day(day)
        except Exception as e:
            logger.exception("Delete special day error")
            return self.error_response(str(e), 500)

        return self.json_response({
            'success': True,
            'date': day.isoformat(),
            'deleted': deleted,
        })


class SeasonCreateView(PricingManagementMixin, View):
    """API: Add a seasonal rate to a room type's board types."""

    def post(self, request, *args, **kwargs):
        hotel = self.get_hotel(request)
        room_type = self.get_room_type(hotel)

        try:
            data = self.get_payload(request)
        except ValueError as e:
            return self.error_response(str(e))

        start_date = self.parse_date(data.get('start_date'))
        end_date = self.parse_date(data.get('end_date'))
        if data.get('start_date') and start_date is None:
            return self.error_response('Invalid start date')
        if data.get('end_date') and end_date is None:
            return self.error_response('Invalid end date')

        raw_multiplier = data.get('multiplier')
        multiplier = self.parse_decimal(raw_multiplier, None)
        if raw_multiplier not in (None, '') and (multiplier is None or multiplier <= 0):
            return self.error_response('Multiplier must be a positive number')

        try:
            created = DynamicPricingService(hotel).add_season(
                room_type,
                name=str(data.get('name', '')).strip(),
                start_date=start_date,
                end_date=end_date,
                multiplier=multiplier,
            )
        except ValidationError as e:
            return self.error_response('; '.join(e.messages))

        return self.success_response(
            data={'created': len(created)},
            message='Season added'
        )


class SeasonDeleteView(PricingManagementMixin, View):
    """API: Remove a season (by date range, optionally name) from all board types."""

    def post(self, request, *args, **kwargs):
        hotel = self.get_hotel(request)
        room_type = self.get_room_type(hotel)

        try:
            data = self.get_payload(request)
        except ValueError as e:
            return self.error_response(str(e))

        start_date = self.parse_date(data.get('start_date'))
        end_date = self.parse_date(data.get('end_date'))
        if start_date is None or end_date is None:
            return self.error_response('start_date and end_date required (YYYY-MM-DD)')

        name = data.get('name')
        if name is not None:
            name = str(name).strip()

        try:
            deleted = DynamicPricingService(hotel).delete_season(room_type, start_date, end_date, name=name)
        except Exception as e:
            logger.exception("Delete season error")
            return self.error_response(str(e), 500)

        return self.json_response({
            'success': True,
            'deleted': deleted,
        })


class WeekendMultiplierUpdateView(PricingManagementMixin, View):
    """API: Update the weekend multiplier of a board type and log it to price history."""

    def post(self, request, *args, **kwargs):
        hotel = self.get_hotel(request)
        room_type = self.get_room_type(hotel)

        try:
            data = self.get_payload(request)
        except ValueError as e:
            return self.error_response(str(e))

        multiplier = self.parse_decimal(data.get('weekend_multiplier'), None)
        if multiplier is None:
            return self.error_response('Weekend multiplier must be a number')
        if multiplier < 1:
            return self.error_response('Weekend multiplier cannot be less than 1')

        board_type = self.parse_board_type(data.get('board_type'))
        if board_type is None:
            return self.error_response('Unknown board type')

        try:
            entry = DynamicPricingService(hotel).update_weekend_multiplier(room_type, multiplier, board_type)
        except PricingConfigurationMissing as e:
            return self.error_response(str(e), 404)
        except ValidationError as e:
            return self.error_response('; '.join(e.messages))

        return self.success_response(
            data={'weekend_multiplier': multiplier, 'history': entry.to_dict()},
            message='Weekend multiplier updated'
        )
