"""
EventDesk Root URL Configuration
"""

from django.urls import include, path

urlpatterns = [
    path("api/", include("eventdesk.urls")),
]
