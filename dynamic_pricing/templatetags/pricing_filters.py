"""
Custom template filters for dynamic pricing.
"""

from django import template

from dynamic_pricing import engine

register = template.Library()


@register.filter
def get_item(dictionary, key):
    """
    Get an item from a dictionary using a variable key.

    Usage in template:
        {{ mydict|get_item:key_variable }}

    Example:
        {% with day=calendar_days|get_item:date %}
            {{ day.price }}
        {% endwith %}
    """
    if dictionary is None:
        return None
    return dictionary.get(key)


@register.filter
def multiplier_label(applied):
    """
    Describe an applied multiplier.

    Usage in template:
        {% for m in result.applied_multipliers %}{{ m|multiplier_label }}{% endfor %}
    """
    if applied is None:
        return ''
    return engine.describe_multiplier(applied)
