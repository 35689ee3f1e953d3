# Generated manually for the modules app

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
            name='Module',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(max_length=100, unique=True)),
                ('alias', models.CharField(blank=True, default='', max_length=100)),
                ('title', models.CharField(blank=True, default='', max_length=100)),
                ('description', models.TextField(blank=True, default='')),
                ('icon', models.CharField(blank=True, default='', max_length=255)),
                ('version', models.CharField(blank=True, default='', max_length=50)),
                ('priority', models.IntegerField(default=0)),
                ('source', models.CharField(blank=True, default='', max_length=50)),
                ('status', models.SmallIntegerField(db_index=True, default=1)),
                ('is_core', models.BooleanField(default=False)),
                ('is_installed', models.BooleanField(db_index=True, default=False)),
                ('installed_at', models.DateTimeField(blank=True, null=True)),
                ('author', models.CharField(blank=True, default='', max_length=100)),
                ('author_email', models.CharField(blank=True, default='', max_length=255)),
                ('homepage', models.CharField(blank=True, default='', max_length=255)),
                ('keywords', models.JSONField(blank=True, default=list)),
                ('providers', models.JSONField(blank=True, default=list)),
                ('dependencies', models.JSONField(blank=True, default=list)),
                ('pull_type', models.CharField(blank=True, choices=[('git', 'Git submodule'), ('url', 'Zip download')], default='', max_length=10)),
                ('pull_url', models.CharField(blank=True, default='', max_length=500)),
                ('uploader', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='uploaded_modules', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'gpa_module',
                'ordering': ['-priority', 'id'],
            },
        ),
        migrations.CreateModel(
            name='AccountModule',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('sort', models.IntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('account', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='account_modules', to=settings.AUTH_USER_MODEL)),
                ('module', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='account_modules', to='modules.module')),
            ],
            options={
                'db_table': 'gpa_account_module',
                'ordering': ['sort', 'id'],
                'unique_together': {('account', 'module')},
            },
        ),
    ]
