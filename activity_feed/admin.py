# activity_feed/admin.py
from django.contrib import admin

from .models import FeedItem


@admin.register(FeedItem)
class FeedItemAdmin(admin.ModelAdmin):
    list_display = ("id", "feed_slug", "feed_user_id", "verb", "foreign_id", "time")
    list_filter = ("feed_slug", "verb")
    search_fields = ("foreign_id", "feed_user_id")
