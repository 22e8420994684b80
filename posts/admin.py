# posts/admin.py
from django.contrib import admin

from .models import Link, Tweet


@admin.register(Tweet)
class TweetAdmin(admin.ModelAdmin):
    list_display = ("id", "actor", "text", "link", "created_at")
    search_fields = ("text",)
    raw_id_fields = ("actor", "link")


admin.site.register(Link)
