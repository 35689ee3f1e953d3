# Generated manually for the sms app

from django.conf import settings
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='SmsLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('source_type', models.CharField(choices=[('admin', 'Admin'), ('pc', 'PC'), ('h5', 'H5'), ('app', 'App'), ('mini_program', 'Mini program')], default='admin', max_length=20)),
                ('sms_type', models.CharField(choices=[('login', 'Login'), ('register', 'Register'), ('reset_password', 'Reset password'), ('bind_phone', 'Bind phone'), ('notice', 'Notice')], db_index=True, max_length=30)),
                ('phone', models.CharField(db_index=True, max_length=32)),
                ('content', models.TextField(blank=True, default='')),
                ('status', models.SmallIntegerField(choices=[(0, 'Failure'), (1, 'Success')], db_index=True, default=1)),
                ('error_message', models.TextField(blank=True, default='')),
                ('ip_address', models.GenericIPAddressField(blank=True, null=True)),
                ('ip_location', models.CharField(blank=True, default='', max_length=255)),
                ('expire_minutes', models.PositiveIntegerField(default=0)),
                ('extend_data', models.JSONField(blank=True, default=dict)),
                ('account', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='sms_logs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'sms_logs',
                'ordering': ['-id'],
            },
        ),
    ]
