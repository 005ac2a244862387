"""URL routes for file uploads."""

from django.urls import path

from fserver.apps.files.views import BatchFileUploadView, SingleFileUploadView

app_name = 'files'

urlpatterns = [
    path('single', SingleFileUploadView.as_view(), name='single'),
    path('batch', BatchFileUploadView.as_view(), name='batch'),
]
