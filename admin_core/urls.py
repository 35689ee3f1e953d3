from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/accounts/', include('admin_core.accounts.urls')),
    path('api/menus/', include('admin_core.menus.urls')),
    path('api/modules/', include('admin_core.modules.urls')),
    path('api/notifications/', include('admin_core.notifications.urls')),
    path('api/sms/', include('admin_core.sms.urls')),
]
