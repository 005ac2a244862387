"""URL routes for uploads that create accounts."""

from django.urls import path

from fserver.apps.accounts.views import BatchAccountView, SingleAccountView

app_name = 'accounts'

urlpatterns = [
    path('single', SingleAccountView.as_view(), name='single'),
    path('batch', BatchAccountView.as_view(), name='batch'),
]
