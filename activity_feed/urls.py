# activity_feed/urls.py
from django.urls import path

from .views import FeedView

urlpatterns = [
    path("feeds/<slug:feed_slug>/<str:user_id>/", FeedView.as_view(), name="activity-feed"),
]
