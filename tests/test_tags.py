from services.tags import is_url, select_tag


def test_first_candidate_wins():
    metadata = {"og:title": "OG", "twitter:title": "Twitter"}
    assert select_tag(["og:title", "twitter:title"], metadata) == "OG"


def test_priority_order_not_metadata_order():
    metadata = {"og:title": "OG", "twitter:title": "Twitter"}
    assert select_tag(["twitter:title", "og:title"], metadata) == "Twitter"


def test_missing_keys_return_none():
    assert select_tag(["og:title", "title"], {"description": "x"}) is None


def test_empty_candidate_list():
    assert select_tag([], {"og:title": "OG"}) is None


def test_empty_value_skipped():
    metadata = {"og:title": "", "twitter:title": "Twitter"}
    assert select_tag(["og:title", "twitter:title"], metadata) == "Twitter"


def test_only_empty_values():
    assert select_tag(["og:title", "title"], {"og:title": "", "title": ""}) is None


def test_whitespace_value_is_not_empty():
    assert select_tag(["og:title"], {"og:title": " "}) == " "


def test_require_url_skips_invalid_and_continues():
    metadata = {
        "og:image": "/images/pic.jpg",
        "twitter:image": "not a url",
        "twitter:image:src": "https://example.com/pic.jpg",
    }
    result = select_tag(["og:image", "twitter:image", "twitter:image:src"], metadata, require_url=True)
    assert result == "https://example.com/pic.jpg"


def test_require_url_all_invalid():
    metadata = {"og:image": "pic.jpg", "twitter:image": ""}
    assert select_tag(["og:image", "twitter:image"], metadata, require_url=True) is None


def test_require_url_returns_content_as_stored():
    metadata = {"og:image": "  https://example.com/pic.jpg\n"}
    assert select_tag(["og:image"], metadata, require_url=True) == "  https://example.com/pic.jpg\n"


def test_is_url_accepts_absolute_urls():
    assert is_url("https://example.com/img.png")
    assert is_url("http://localhost:8000/a.jpg")
    assert is_url("data:image/png;base64,iVBORw0KGgo=")
    assert is_url("  https://example.com/img.png  ")


def test_is_url_rejects_relative_references():
    assert not is_url("/images/pic.jpg")
    assert not is_url("images/pic.jpg")
    assert not is_url("//cdn.example.com/pic.jpg")


def test_is_url_rejects_malformed():
    assert not is_url("")
    assert not is_url("   ")
    assert not is_url("https://")
    assert not is_url("https://example.com:99999/pic.jpg")
    assert not is_url("http://[::1/pic.jpg")


def test_is_url_rejects_forbidden_host_characters():
    assert not is_url("http://exa mple.com/a.png")
    assert not is_url("https://exa<mple.com/a.png")
    assert not is_url("https://exa^mple.com/a.png")
    assert not is_url("https://exa|mple.com/a.png")
    assert not is_url("https://exa%20mple.com/a.png")


def test_is_url_host_checks_leave_paths_alone():
    assert is_url("https://example.com/my image.png")
    assert is_url("https://user@example.com/a.png")
    assert is_url("http://[::1]:8080/a.png")


def test_require_url_skips_bad_host():
    metadata = {"og:image": "http://exa mple.com/a.png", "twitter:image": "https://example.com/a.png"}
    assert select_tag(["og:image", "twitter:image"], metadata, require_url=True) == "https://example.com/a.png"
