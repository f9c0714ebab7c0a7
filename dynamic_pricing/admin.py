"""
Dynamic pricing admin configuration.

Supports:
- Organization management (hotel chains)
- Property management with nested room types
- Board-type pricing with special days and seasons inline
"""

from django.contrib import admin
from django.urls import reverse
from django.utils.html import format_html

from .models import (
    Organization, Property,
    RoomType, PricingConfiguration, SpecialDay, SeasonalRate, PriceHistory,
)


# =============================================================================
# ORGANIZATION & PROPERTY ADMIN
# =============================================================================

class PropertyInline(admin.TabularInline):
    """Inline for properties within an organization."""
    model = Property
    extra = 0
    fields = ['name', 'code', 'location', 'is_active']
    show_change_link = True


@admin.register(Organization)
class OrganizationAdmin(admin.ModelAdmin):
    """Admin for hotel chain/organization management."""
    list_display = ['name', 'code', 'property_count_display', 'is_active', 'created_at']
    list_filter = ['is_active']
    search_fields = ['name', 'code']
    prepopulated_fields = {'code': ('name',)}
    ordering = ['name']

    fieldsets = (
        (None, {
            'fields': ('name', 'code', 'is_active')
        }),
        ('Currency Settings', {
            'fields': ('currency_symbol',),
        }),
    )

    inlines = [PropertyInline]

    def property_count_display(self, obj):
        """Display count of active properties."""
        count = obj.property_count
        if count > 0:
            url = reverse('admin:dynamic_pricing_property_changelist') + f'?organization__id__exact={obj.id}'
            return format_html('<a href="{}">{} properties</a>', url, count)
        return '0'
    property_count_display.short_description = 'Properties'


class RoomTypeInline(admin.TabularInline):
    """Inline for room types within a property."""
    model = RoomType
    extra = 0
    fields = ['name', 'category', 'base_price', 'number_of_rooms', 'sort_order']
    ordering = ['sort_order', 'name']
    show_change_link = True


@admin.register(Property)
class PropertyAdmin(admin.ModelAdmin):
    """Admin for individual property management."""
    list_display = ['name', 'organization', 'code', 'location', 'room_types_display', 'total_rooms_display', 'is_active']
    list_filter = ['organization', 'is_active']
    search_fields = ['name', 'code', 'location']
    prepopulated_fields = {'code': ('name',)}
    ordering = ['organization', 'name']

    fieldsets = (
        (None, {
            'fields': ('organization', 'name', 'code', 'is_active')
        }),
        ('Location', {
            'fields': ('location',),
        }),
        ('Display Settings', {
            'fields': ('currency_symbol',),
        }),
    )

    inlines = [RoomTypeInline]

    def room_types_display(self, obj):
        """Display count of room types."""
        count = obj.room_types.count()
        if count > 0:
            url = reverse('admin:dynamic_pricing_roomtype_changelist') + f'?hotel__id__exact={obj.id}'
            return format_html('<a href="{}">{} types</a>', url, count)
        return '0'
    room_types_display.short_description = 'Room Types'

    def total_rooms_display(self, obj):
        return obj.total_rooms
    total_rooms_display.short_description = 'Rooms'


# =============================================================================
# ROOM TYPE & PRICING ADMIN
# =============================================================================

class PricingConfigurationInline(admin.TabularInline):
    model = PricingConfiguration
    extra = 0
    fields = ['board_type', 'base_price', 'weekend_multiplier']
    show_change_link = True


class PriceHistoryInline(admin.TabularInline):
    model = PriceHistory
    extra = 0
    fields = ['created_at', 'board_type', 'change_type', 'start_date', 'end_date', 'price', 'description']
    readonly_fields = fields
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(RoomType)
class RoomTypeAdmin(admin.ModelAdmin):
    list_display = ['name', 'hotel', 'category', 'base_price', 'number_of_rooms', 'sort_order']
    list_editable = ['number_of_rooms', 'sort_order']
    list_filter = ['hotel', 'hotel__organization', 'category']
    search_fields = ['name', 'hotel__name']
    ordering = ['hotel', 'sort_order', 'name']

    fieldsets = (
        (None, {
            'fields': ('hotel', 'name', 'number_of_rooms', 'sort_order')
        }),
        ('Pricing Configuration', {
            'fields': ('category', 'base_price'),
            'description': '''
                New room types get pricing for every board type, derived from the
                room-only base price. Category sets the default weekend multiplier.
            '''
        }),
    )

    inlines = [PricingConfigurationInline, PriceHistoryInline]


class SpecialDayInline(admin.TabularInline):
    model = SpecialDay
    extra = 0
    fields = ['date', 'name', 'multiplier', 'recurring', 'sort_order']


class SeasonalRateInline(admin.TabularInline):
    model = SeasonalRate
    extra = 0
    fields = ['name', 'start_date', 'end_date', 'multiplier', 'sort_order']


@admin.register(PricingConfiguration)
class PricingConfigurationAdmin(admin.ModelAdmin):
    list_display = [
        'room_type', 'board_type', 'base_price', 'weekend_multiplier',
        'weekend_price_display', 'special_day_count', 'season_count',
    ]
    list_editable = ['base_price', 'weekend_multiplier']
    list_filter = ['board_type', 'room_type__hotel']
    search_fields = ['room_type__name', 'room_type__hotel__name']
    ordering = ['room_type', 'board_type']

    inlines = [SeasonalRateInline, SpecialDayInline]

    def weekend_price_display(self, obj):
        return f"${obj.weekend_price():.2f}"
    weekend_price_display.short_description = 'Weekend Price'

    def special_day_count(self, obj):
        return obj.special_days.count()
    special_day_count.short_description = 'Special Days'

    def season_count(self, obj):
        return obj.seasonal_rates.count()
    season_count.short_description = 'Seasons'
