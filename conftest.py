"""
Common test fixtures.

Provides users, a link and an authenticated DRF client used by the
activity feed and posts tests.
"""
import pytest
from django.contrib.auth.models import User
from rest_framework.test import APIClient


@pytest.fixture
def user(db):
    """Create a test user."""
    return User.objects.create_user(username="u1", password="pass12345", email="u1@example.com")


@pytest.fixture
def actor(db):
    return User.objects.create_user(username="actor1", password="pass12345")


@pytest.fixture
def link(db):
    from posts.models import Link

    return Link.objects.create(href="https://getstream.io")


@pytest.fixture
def api_client(user):
    """DRF client authenticated as ``user``."""
    client = APIClient()
    client.force_authenticate(user=user)
    return client
