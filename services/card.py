import logging

from platforms import get_platform
from platforms.base import Card, CardError, CardResult, Image
from services.tags import select_tag

logger = logging.getLogger(__name__)


def build_card(snapshot, social):
    """Create a Card from extracted page metadata for the given social.

    Returns a CardResult holding either the card or the CardError explaining
    why the metadata isn't enough for one.
    """
    platform = get_platform(social)
    metadata = snapshot.metadata
    site = platform.site(snapshot)

    # Title as found in metadata, kept apart from the displayed title
    metadata_title = select_tag(platform.title_keys, metadata)
    title = metadata_title or snapshot.title or site
    if metadata_title is None:
        logger.debug("No title tag for %s, falling back to %r", snapshot.url, title)

    description = select_tag(platform.description_keys, metadata)
    image_url = select_tag(platform.image_keys, metadata, require_url=True)
    image = Image(image_url) if image_url else None
    card_type = select_tag(platform.type_keys, metadata)

    error = platform.check(metadata_title, description)
    if error is None:
        outcome = platform.finalize(snapshot, image, card_type)
        if isinstance(outcome, CardError):
            error = outcome
    if error is not None:
        logger.info("No %s card for %s: %s", platform.social.value, snapshot.url, error)
        return CardResult(social=platform.social, success=False, error=error)

    image, size = outcome
    card = Card(
        title=title,
        site=site,
        description=description,
        image=image,
        size=size,
        social=platform.social,
    )
    return CardResult(social=platform.social, success=True, card=card)


def build_cards(snapshot, socials):
    """Build one card per social from the same snapshot."""
    results = {}
    for social in socials:
        result = build_card(snapshot, social)
        results[result.social.value] = result
    return results
