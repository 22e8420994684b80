"""
Initial migration for the activity_feed app.

Creates ``FeedItem``, the per-feed store of serialized activities.
"""
import django.core.serializers.json
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="FeedItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("feed_slug", models.CharField(max_length=64)),
                ("feed_user_id", models.CharField(max_length=64)),
                ("verb", models.CharField(max_length=255)),
                ("foreign_id", models.CharField(db_index=True, max_length=255)),
                ("activity", models.JSONField(default=dict, encoder=django.core.serializers.json.DjangoJSONEncoder)),
                ("time", models.DateTimeField(default=django.utils.timezone.now)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={"ordering": ["-time", "-id"]},
        ),
        migrations.AddIndex(
            model_name="feeditem",
            index=models.Index(fields=["feed_slug", "feed_user_id", "time"], name="feeditem_feed_time_idx"),
        ),
        migrations.AddConstraint(
            model_name="feeditem",
            constraint=models.UniqueConstraint(fields=("feed_slug", "feed_user_id", "foreign_id"), name="feeditem_unique_per_feed"),
        ),
    ]
