import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('dynamic_pricing', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='PriceHistory',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('board_type', models.CharField(choices=[('room-only', 'Room Only'), ('breakfast-included', 'Breakfast Included'), ('half-board', 'Half Board'), ('full-board', 'Full Board')], default='room-only', max_length=20)),
                ('change_type', models.CharField(choices=[('weekend', 'Weekend'), ('seasonal', 'Seasonal')], default='weekend', max_length=20)),
                ('start_date', models.DateField(help_text='First date the new price applies to')),
                ('end_date', models.DateField(help_text='Last date shown for the new price')),
                ('price', models.DecimalField(decimal_places=2, help_text='Nightly price after the change', max_digits=10)),
                ('description', models.CharField(blank=True, max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('room_type', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='price_history', to='dynamic_pricing.roomtype')),
            ],
            options={
                'verbose_name': 'Price History Entry',
                'verbose_name_plural': 'Price History',
                'ordering': ['-created_at', '-id'],
            },
        ),
    ]
