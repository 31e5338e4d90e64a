# Generated migration for CallbackRequest, Contact and Order models

import django.core.validators
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='CallbackRequest',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('phone_number', models.CharField(db_index=True, max_length=17, validators=[django.core.validators.RegexValidator('^\\+?[1-9][0-9]{0,15}$', 'Please enter a valid phone number')])),
                ('selected_service', models.CharField(choices=[('Car Tracking', 'Car Tracking'), ('Bike Tracking', 'Bike Tracking'), ('Fleet Management', 'Fleet Management')], db_index=True, max_length=20)),
                ('message', models.TextField(blank=True, default='', validators=[django.core.validators.MaxLengthValidator(1000)])),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('called', 'Called'), ('completed', 'Completed'), ('cancelled', 'Cancelled')], default='pending', max_length=10)),
                ('priority', models.CharField(choices=[('low', 'Low'), ('medium', 'Medium'), ('high', 'High')], default='medium', max_length=10)),
                ('preferred_call_time', models.CharField(blank=True, max_length=100, null=True)),
                ('call_attempts', models.PositiveIntegerField(default=0, validators=[django.core.validators.MinValueValidator(0)])),
                ('last_call_attempt', models.DateTimeField(blank=True, null=True)),
                ('assigned_to', models.CharField(blank=True, max_length=100, null=True)),
                ('notes', models.TextField(blank=True, null=True, validators=[django.core.validators.MaxLengthValidator(2000)])),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='Contact',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('full_name', models.CharField(max_length=100)),
                ('phone_number', models.CharField(max_length=17, validators=[django.core.validators.RegexValidator('^\\+?[1-9][0-9]{0,15}$', 'Please enter a valid phone number')])),
                ('selected_plan', models.CharField(choices=[('Car Tracking', 'Car Tracking'), ('Bike Tracking', 'Bike Tracking'), ('Fleet Management', 'Fleet Management')], db_index=True, max_length=20)),
                ('message', models.TextField(blank=True, default='', validators=[django.core.validators.MaxLengthValidator(1000)])),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='Order',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('phone_number', models.CharField(max_length=14, validators=[django.core.validators.RegexValidator('^(\\+92|0)?[0-9]{10,11}$', 'Please enter a valid Pakistani phone number')])),
                ('message', models.TextField(validators=[django.core.validators.MaxLengthValidator(500)])),
                ('selected_package', models.CharField(choices=[('basic', 'Basic'), ('standard', 'Standard'), ('premium', 'Premium')], max_length=10)),
                ('package_details', models.JSONField()),
                ('order_date', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('confirmed', 'Confirmed'), ('cancelled', 'Cancelled')], default='pending', max_length=10)),
                ('contract_number', models.CharField(max_length=32, unique=True)),
            ],
            options={
                'ordering': ['-order_date'],
            },
        ),
        migrations.AddIndex(
            model_name='callbackrequest',
            index=models.Index(fields=['status', '-created_at'], name='callback_status_created_idx'),
        ),
        migrations.AddIndex(
            model_name='callbackrequest',
            index=models.Index(fields=['priority', 'status'], name='callback_priority_status_idx'),
        ),
        migrations.AddIndex(
            model_name='callbackrequest',
            index=models.Index(fields=['assigned_to', 'status'], name='callback_assignee_status_idx'),
        ),
    ]
