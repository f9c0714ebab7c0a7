from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Organization',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text="Organization name (e.g., 'Atoll Resorts Group')", max_length=200)),
                ('code', models.SlugField(help_text="URL-friendly code (e.g., 'atoll-resorts')", unique=True)),
                ('currency_symbol', models.CharField(default='$', help_text='Currency symbol for display', max_length=5)),
                ('is_active', models.BooleanField(default=True, help_text='Whether this organization is active')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Organization',
                'verbose_name_plural': 'Organizations',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Property',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(default='My Hotel', help_text='Property name', max_length=200)),
                ('code', models.SlugField(help_text="URL-friendly code (e.g., 'biosphere-inn')")),
                ('currency_symbol', models.CharField(blank=True, default='', help_text='Currency symbol to display (blank = organization default)', max_length=5)),
                ('location', models.CharField(blank=True, help_text='e.g., Maldives, Kaafu Atoll', max_length=255)),
                ('is_active', models.BooleanField(default=True, help_text='Whether this property is active')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('organization', models.ForeignKey(help_text='Parent organization', on_delete=django.db.models.deletion.PROTECT, related_name='properties', to='dynamic_pricing.organization')),
            ],
            options={
                'verbose_name': 'Property',
                'verbose_name_plural': 'Properties',
                'ordering': ['organization', 'name'],
                'unique_together': {('organization', 'code')},
            },
        ),
        migrations.CreateModel(
            name='RoomType',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='e.g., Standard Room, Deluxe Room, Suite', max_length=100)),
                ('category', models.CharField(choices=[('standard', 'Standard'), ('deluxe', 'Deluxe'), ('suite', 'Suite'), ('executive', 'Executive')], default='standard', help_text='Drives default weekend/special/seasonal multipliers', max_length=20)),
                ('base_price', models.DecimalField(decimal_places=2, default=Decimal('0.00'), help_text='Room-only nightly rate used to seed board-type pricing', max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('number_of_rooms', models.PositiveIntegerField(default=10, help_text='Number of rooms of this type')),
                ('sort_order', models.PositiveIntegerField(default=0, help_text='Display order')),
                ('hotel', models.ForeignKey(help_text='Property this room type belongs to', on_delete=django.db.models.deletion.CASCADE, related_name='room_types', to='dynamic_pricing.property')),
            ],
            options={
                'verbose_name': 'Room Type',
                'verbose_name_plural': 'Room Types',
                'ordering': ['hotel', 'sort_order', 'name'],
            },
        ),
        migrations.CreateModel(
            name='PricingConfiguration',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('board_type', models.CharField(choices=[('room-only', 'Room Only'), ('breakfast-included', 'Breakfast Included'), ('half-board', 'Half Board'), ('full-board', 'Full Board')], default='room-only', help_text='Meal plan variant', max_length=20)),
                ('base_price', models.DecimalField(decimal_places=2, default=Decimal('0.00'), help_text='Nightly rate with no adjustments', max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('weekend_multiplier', models.DecimalField(decimal_places=2, default=Decimal('1.20'), help_text='Applied to Saturday/Sunday nights that are not special days (e.g., 1.30)', max_digits=5, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('room_type', models.ForeignKey(help_text='Room type this pricing belongs to', on_delete=django.db.models.deletion.CASCADE, related_name='pricing_configurations', to='dynamic_pricing.roomtype')),
            ],
            options={
                'verbose_name': 'Pricing Configuration',
                'verbose_name_plural': 'Pricing Configurations',
                'ordering': ['room_type', 'board_type'],
                'unique_together': {('room_type', 'board_type')},
            },
        ),
        migrations.CreateModel(
            name='SpecialDay',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date', models.DateField(help_text='Calendar date (year ignored when recurring)')),
                ('name', models.CharField(blank=True, help_text="e.g., New Year's Eve", max_length=100)),
                ('multiplier', models.DecimalField(decimal_places=2, default=Decimal('1.30'), help_text='Multiplier applied to base price (e.g., 2.00 for double price)', max_digits=5, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('recurring', models.BooleanField(default=False, help_text='Apply every year on the same month and day')),
                ('sort_order', models.PositiveIntegerField(default=0)),
                ('configuration', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='special_days', to='dynamic_pricing.pricingconfiguration')),
            ],
            options={
                'verbose_name': 'Special Day',
                'verbose_name_plural': 'Special Days',
                'ordering': ['configuration', 'sort_order', 'id'],
            },
        ),
        migrations.CreateModel(
            name='SeasonalRate',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(blank=True, help_text='e.g., Summer Season, Winter Season', max_length=100)),
                ('start_date', models.DateField(help_text='Start date (inclusive)')),
                ('end_date', models.DateField(help_text='End date (inclusive)')),
                ('multiplier', models.DecimalField(decimal_places=2, default=Decimal('1.20'), help_text='Multiplier combined with special day/weekend multipliers', max_digits=5, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('sort_order', models.PositiveIntegerField(default=0)),
                ('configuration', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='seasonal_rates', to='dynamic_pricing.pricingconfiguration')),
            ],
            options={
                'verbose_name': 'Seasonal Rate',
                'verbose_name_plural': 'Seasonal Rates',
                'ordering': ['configuration', 'sort_order', 'id'],
            },
        ),
    ]
