# activity_feed/views.py
from rest_framework.generics import GenericAPIView
from rest_framework.permissions import IsAuthenticated

from .enrich import Enrich
from .feeds import feed_manager
from .models import FeedItem
from .pagination import FeedPagination
from .serializers import AggregatedActivitySerializer, EnrichedActivitySerializer

TRUTHY = ("1", "true", "yes")


class FeedView(GenericAPIView):
    """
    Enriched activities of one feed, newest first.  ``?aggregated=1``
    groups the page into verb/day buckets before enriching.
    """
    permission_classes = [IsAuthenticated]
    pagination_class = FeedPagination
    serializer_class = EnrichedActivitySerializer

    def get_queryset(self):
        return FeedItem.objects.for_feed(self.kwargs["feed_slug"], self.kwargs["user_id"])

    def get_enricher(self):
        return Enrich()

    def get(self, request, *args, **kwargs):
        page = self.paginate_queryset(self.get_queryset())
        enricher = self.get_enricher()
        if (request.query_params.get("aggregated") or "").lower() in TRUTHY:
            buckets = enricher.enrich_aggregated_activities(feed_manager.aggregate(page))
            data = AggregatedActivitySerializer(buckets, many=True).data
        else:
            activities = enricher.enrich_activities([dict(item.activity) for item in page])
            data = EnrichedActivitySerializer(activities, many=True).data
        return self.get_paginated_response(data)
