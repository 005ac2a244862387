"""Root URL configuration."""

from django.urls import include, path

from fserver.apps.files.views import ping

urlpatterns = [
    path('ping', ping, name='ping'),
    path('files/', include('fserver.apps.files.urls')),
    path('accounts/', include('fserver.apps.accounts.urls')),
]
