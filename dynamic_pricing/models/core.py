"""
Core models: Organization and Property.
"""

from django.db import models
from django.db.models import Sum

# =============================================================================
# ORGANIZATION & PROPERTY
# =============================================================================

class Organization(models.Model):
    """
    Top-level organization that owns multiple properties.

    Example: "Atoll Resorts Group" owns "Biosphere Inn" and "Thundi Resort"
    """
    name = models.CharField(
        max_length=200,
        help_text="Organization name (e.g., 'Atoll Resorts Group')"
    )
    code = models.SlugField(
        max_length=50,
        unique=True,
        help_text="URL-friendly code (e.g., 'atoll-resorts')"
    )

    currency_symbol = models.CharField(
        max_length=5,
        default='$',
        help_text="Currency symbol for display"
    )

    is_active = models.BooleanField(
        default=True,
        help_text="Whether this organization is active"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        verbose_name = "Organization"
        verbose_name_plural = "Organizations"

    def __str__(self):
        return self.name

    @property
    def property_count(self):
        """Return count of active properties."""
        return self.properties.filter(is_active=True).count()


class Property(models.Model):
    """
    Property/hotel that owns room types and their pricing configurations.
    """
    organization = models.ForeignKey(
        Organization,
        on_delete=models.PROTECT,
        related_name='properties',
        help_text="Parent organization"
    )

    name = models.CharField(
        max_length=200,
        default="My Hotel",
        help_text="Property name"
    )
    code = models.SlugField(
        max_length=50,
        help_text="URL-friendly code (e.g., 'biosphere-inn')"
    )

    currency_symbol = models.CharField(
        max_length=5,
        blank=True,
        default='',
        help_text="Currency symbol to display (blank = organization default)"
    )

    location = models.CharField(
        max_length=255,
        blank=True,
        help_text="e.g., Maldives, Kaafu Atoll"
    )

    is_active = models.BooleanField(
        default=True,
        help_text="Whether this property is active"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['organization', 'name']
        unique_together = ['organization', 'code']
        verbose_name = "Property"
        verbose_name_plural = "Properties"

    def __str__(self):
        return f"{self.name} ({self.organization.name})"

    @property
    def total_rooms(self):
        """Sum of rooms across all room types."""
        return self.room_types.aggregate(
            total=Sum('number_of_rooms')
        )['total'] or 0

    def get_currency_symbol(self):
        """Get currency symbol (property or organization default)."""
        return self.currency_symbol or self.organization.currency_symbol
