from platforms.base import CardSize, Social

DEFAULT_SIZES = {
    Social.FACEBOOK: CardSize.LARGE,
    Social.MASTODON: CardSize.SMALL,
    Social.TWITTER: CardSize.LARGE,
}


def default_size(social):
    return DEFAULT_SIZES[social]


def twitter_size_from_hint(hint):
    """Card size for a twitter:card value (None when the tag is missing)."""
    if hint is None:
        return CardSize.MEDIUM
    if hint == "summary":
        return CardSize.MEDIUM
    # "summary_large_image" and unrecognized card types keep the large card
    return default_size(Social.TWITTER)


def dimensions_for(size):
    """Return (image_width, image_height, icon_size) for a card size."""
    width, height = size.image_size
    return width, height, size.icon_size
