"""Pricing URL patterns: stay breakdown, calendar, pricing editor AJAX."""

from django.urls import path
from dynamic_pricing.views import (
    StayBreakdownView,
    PriceCalendarView,
    PricingConfigurationDetailView,
    BasePriceUpdateView,
    SpecialDayCreateView,
    SpecialDayDeleteView,
    SeasonCreateView,
    SeasonDeleteView,
    WeekendMultiplierUpdateView,
)

urlpatterns = [
    # Booking price breakdown
    path('org/<slug:org_code>/<slug:prop_code>/api/rooms/<int:room_id>/breakdown/',
         StayBreakdownView.as_view(), name='stay_breakdown'),
    path('org/<slug:org_code>/<slug:prop_code>/api/rooms/<int:room_id>/calendar/',
         PriceCalendarView.as_view(), name='price_calendar'),

    # Pricing editor
    path('org/<slug:org_code>/<slug:prop_code>/api/rooms/<int:room_id>/pricing/',
         PricingConfigurationDetailView.as_view(), name='pricing_detail'),
    path('org/<slug:org_code>/<slug:prop_code>/api/rooms/<int:room_id>/base-price/',
         BasePriceUpdateView.as_view(), name='update_base_price'),
    path('org/<slug:org_code>/<slug:prop_code>/api/rooms/<int:room_id>/weekend-multiplier/',
         WeekendMultiplierUpdateView.as_view(), name='update_weekend_multiplier'),
    path('org/<slug:org_code>/<slug:prop_code>/api/rooms/<int:room_id>/special-days/',
         SpecialDayCreateView.as_view(), name='special_day_create'),
    path('org/<slug:org_code>/<slug:prop_code>/api/rooms/<int:room_id>/seasons/',
         SeasonCreateView.as_view(), name='season_create'),
    path('org/<slug:org_code>/<slug:prop_code>/api/rooms/<int:room_id>/seasons/delete/',
         SeasonDeleteView.as_view(), name='season_delete'),
    path('org/<slug:org_code>/<slug:prop_code>/api/special-days/delete/',
         SpecialDayDeleteView.as_view(), name='special_day_delete'),
]
