import pytest

import app as app_module
from platforms.base import Image, MetadataSnapshot


@pytest.fixture
def app():
    """Flask test app."""
    flask_app = app_module.app
    flask_app.config["TESTING"] = True

    yield flask_app

    flask_app.config.pop("TESTING", None)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def snapshot():
    """Build a MetadataSnapshot with sensible defaults."""
    def _make(metadata=None, title=None, images=None, url="example.com"):
        return MetadataSnapshot(
            url=url,
            metadata=metadata or {},
            title=title,
            images=[Image(src) for src in images or []],
        )
    return _make


@pytest.fixture
def full_metadata():
    return {
        "og:title": "OG Title",
        "og:description": "OG Description",
        "og:image": "https://example.com/og.png",
        "og:type": "website",
        "og:site_name": "Example Site",
        "twitter:title": "Twitter Title",
        "twitter:description": "Twitter Description",
        "twitter:image": "https://example.com/twitter.png",
        "twitter:card": "summary_large_image",
        "title": "Meta Title",
        "description": "Meta Description",
    }
