"""
Pytest Configuration and Shared Fixtures.

This module provides common fixtures for all tests:

- store: Fresh in-memory host node store
- blog_post_type: Raw Delivery API content type with every catalog element kind
- blog_post_item / author_item: Raw Delivery API content items
- items_response: Raw ``/items`` response with a linked item
"""

import pytest

from kontent_source.config.settings import get_settings
from kontent_source.host import InMemoryNodeStore


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Isolate tests from the developer's environment and cached settings."""
    monkeypatch.delenv("KONTENT_PROJECT_ID", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store() -> InMemoryNodeStore:
    """Return an empty in-memory node store."""
    return InMemoryNodeStore()


@pytest.fixture
def blog_post_type() -> dict:
    """Return a content type covering the whole element catalog."""
    return {
        "system": {
            "id": "b2c14f2c-6467-460b-a70b-bca17972a33a",
            "name": "Blog post",
            "codename": "blog_post",
            "last_modified": "2024-01-10T09:13:02.6436573Z",
        },
        "elements": {
            "title": {"type": "text", "name": "Title"},
            "reading_time": {"type": "number", "name": "Reading time"},
            "published": {"type": "date_time", "name": "Published"},
            "hero_image": {"type": "asset", "name": "Hero image"},
            "body": {"type": "rich_text", "name": "Body"},
            "author": {"type": "modular_content", "name": "Author"},
            "topics": {"type": "taxonomy", "name": "Topics", "taxonomy_group": "topics"},
            "category": {"type": "multiple_choice", "name": "Category"},
            "url_slug": {"type": "url_slug", "name": "URL slug"},
        },
    }


@pytest.fixture
def author_type() -> dict:
    return {
        "system": {"id": "a1", "name": "Author", "codename": "author"},
        "elements": {"full_name": {"type": "text", "name": "Full name"}},
    }


@pytest.fixture
def author_item() -> dict:
    """Return an author item, linked from the blog post."""
    return {
        "system": {
            "id": "3f0b0b53-1c2e-4d6a-9a0e-7a1e2b3c4d5e",
            "name": "Jane Doe",
            "codename": "jane_doe",
            "language": "en-US",
            "type": "author",
            "last_modified": "2024-01-12T10:00:00Z",
        },
        "elements": {
            "full_name": {"type": "text", "name": "Full name", "value": "Jane Doe"},
        },
    }


@pytest.fixture
def blog_post_item() -> dict:
    """Return a blog post item with one value of every catalog element kind."""
    return {
        "system": {
            "id": "f4b3fc05-e988-4dae-9ac1-a94aba566474",
            "name": "Hello world",
            "codename": "hello_world",
            "language": "en-US",
            "type": "blog_post",
            "last_modified": "2024-01-15T12:00:00Z",
            "collection": "default",
            "workflow_step": "published",
            "sitemap_locations": [],
        },
        "elements": {
            "title": {"type": "text", "name": "Title", "value": "Hello world"},
            "reading_time": {"type": "number", "name": "Reading time", "value": 4},
            "published": {
                "type": "date_time",
                "name": "Published",
                "value": "2024-01-15T00:00:00Z",
                "display_timezone": None,
            },
            "hero_image": {
                "type": "asset",
                "name": "Hero image",
                "value": [
                    {
                        "name": "hero.jpg",
                        "description": "A hero",
                        "type": "image/jpeg",
                        "size": 1024,
                        "url": "https://assets.kontent.ai/hero.jpg",
                        "width": 800,
                        "height": 600,
                        "renditions": {},
                    }
                ],
            },
            "body": {
                "type": "rich_text",
                "name": "Body",
                "value": "<p>Written by <a data-item-id=\"3f0b\">Jane</a></p>",
                "images": {
                    "img-1": {
                        "image_id": "img-1",
                        "description": None,
                        "url": "https://assets.kontent.ai/inline.png",
                        "width": 100,
                        "height": 50,
                    }
                },
                "links": {
                    "3f0b": {"type": "author", "codename": "jane_doe", "url_slug": "jane"}
                },
                "modular_content": ["jane_doe"],
            },
            "author": {"type": "modular_content", "name": "Author", "value": ["jane_doe"]},
            "topics": {
                "type": "taxonomy",
                "name": "Topics",
                "taxonomy_group": "topics",
                "value": [{"name": "Python", "codename": "python"}],
            },
            "category": {
                "type": "multiple_choice",
                "name": "Category",
                "value": [{"name": "News", "codename": "news"}],
            },
            "url_slug": {"type": "url_slug", "name": "URL slug", "value": "hello-world"},
        },
    }


@pytest.fixture
def items_response(blog_post_item, author_item) -> dict:
    """Return a raw ``/items`` response where the author is only a linked item."""
    return {
        "items": [blog_post_item],
        "modular_content": {"jane_doe": author_item},
        "pagination": {"skip": 0, "limit": 0, "count": 1, "next_page": ""},
    }
