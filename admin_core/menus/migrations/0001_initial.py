# Generated manually for the menus app

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('accounts', '0001_initial'),
        ('modules', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Menu',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('deleted_at', models.DateTimeField(blank=True, db_index=True, null=True)),
                ('account_type', models.CharField(choices=[('admin', 'Admin'), ('user', 'User')], default='admin', max_length=10)),
                ('menu_name', models.CharField(max_length=100)),
                ('menu_key', models.CharField(max_length=100)),
                ('menu_path', models.CharField(blank=True, default='', max_length=255)),
                ('menu_icon', models.CharField(blank=True, default='', max_length=100)),
                ('menu_type', models.CharField(choices=[('dir', 'Directory'), ('menu', 'Menu'), ('button', 'Button')], default='menu', max_length=10)),
                ('parent_id', models.BigIntegerField(db_index=True, default=0)),
                ('component', models.CharField(blank=True, max_length=255, null=True)),
                ('redirect', models.CharField(blank=True, max_length=255, null=True)),
                ('is_required', models.BooleanField(default=False)),
                ('sort', models.IntegerField(default=0)),
                ('status', models.SmallIntegerField(db_index=True, default=1)),
                ('is_system', models.BooleanField(default=False)),
                ('module', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='menus', to='modules.module')),
            ],
            options={
                'db_table': 'gpa_menu',
                'ordering': ['sort', 'id'],
            },
        ),
        migrations.AddConstraint(
            model_name='menu',
            constraint=models.UniqueConstraint(fields=('account_type', 'menu_key'), name='uniq_menu_account_type_key'),
        ),
        migrations.CreateModel(
            name='RoleMenu',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('menu', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='role_menus', to='menus.menu')),
                ('role', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='role_menus', to='accounts.role')),
            ],
            options={
                'db_table': 'gpa_role_menu',
                'unique_together': {('role', 'menu')},
            },
        ),
        migrations.CreateModel(
            name='ModuleMenu',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('menu', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='module_links', to='menus.menu')),
                ('module', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='module_menus', to='modules.module')),
            ],
            options={
                'db_table': 'gpa_module_menu',
                'unique_together': {('module', 'menu')},
            },
        ),
    ]
