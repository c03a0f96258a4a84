from platforms.base import Social
from platforms.facebook import FacebookPlatform
from platforms.mastodon import MastodonPlatform
from platforms.twitter import TwitterPlatform

PLATFORMS = {
    Social.FACEBOOK: FacebookPlatform,
    Social.MASTODON: MastodonPlatform,
    Social.TWITTER: TwitterPlatform,
}


def get_social(name):
    """Resolve a Social from an enum member or its (case-insensitive) name."""
    if isinstance(name, Social):
        return name
    try:
        return Social(str(name).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown platform: {name}") from None


def get_platform(name):
    return PLATFORMS[get_social(name)]()
