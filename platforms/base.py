from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Social(Enum):
    FACEBOOK = "facebook"
    MASTODON = "mastodon"
    TWITTER = "twitter"


class CardSize(Enum):
    SMALL = "small"  # Mastodon
    MEDIUM = "medium"  # Twitter summary
    LARGE = "large"  # Twitter summary with large image, Facebook

    @property
    def image_size(self):
        """Nominal (width, height) of the card image in pixels."""
        return _IMAGE_SIZES[self]

    @property
    def icon_size(self):
        return _ICON_SIZES[self]


_IMAGE_SIZES = {
    CardSize.SMALL: (64, 64),
    CardSize.MEDIUM: (125, 125),
    CardSize.LARGE: (500, 250),
}

_ICON_SIZES = {
    CardSize.SMALL: 32,
    CardSize.MEDIUM: 48,
    CardSize.LARGE: 64,
}


class CardError(Enum):
    NOT_ENOUGH_DATA = "NotEnoughData"
    TWITTER_NO_CARD_FOUND = "TwitterNoCardFound"

    def __str__(self):
        return self.value

    @property
    def message(self):
        """User-facing explanation of why no card could be built."""
        if self is CardError.NOT_ENOUGH_DATA:
            return "Page lacks social metadata (no title or description found)"
        return "Page has no recognized Twitter card type"


@dataclass(frozen=True)
class Image:
    url: str


@dataclass
class MetadataSnapshot:
    url: str
    metadata: dict = field(default_factory=dict)
    title: Optional[str] = None
    images: list = field(default_factory=list)

    def __post_init__(self):
        # The site string is the last title fallback, so it can't be empty
        if not isinstance(self.url, str) or not self.url.strip():
            raise ValueError("No URL provided")

    @classmethod
    def from_dict(cls, data):
        """Build a snapshot from a JSON payload.

        Metadata keys are lower-cased; images may be given as plain strings
        or as {"url": ...} objects.
        """
        if not isinstance(data, dict):
            raise ValueError("Snapshot must be an object")

        url = data.get("url")
        if not isinstance(url, str) or not url.strip():
            raise ValueError("No URL provided")

        metadata = data.get("metadata", {})
        if metadata is None:
            metadata = {}
        if not isinstance(metadata, dict):
            raise ValueError("Metadata must be an object")
        cleaned = {}
        for key, value in metadata.items():
            if not isinstance(value, str):
                raise ValueError(f"Metadata value for {key!r} must be a string")
            cleaned[str(key).lower()] = value

        title = data.get("title")
        if title is not None and not isinstance(title, str):
            raise ValueError("Title must be a string")

        entries = data.get("images", [])
        if entries is None:
            entries = []
        if not isinstance(entries, list):
            raise ValueError("Images must be a list")
        images = []
        for entry in entries:
            if isinstance(entry, dict):
                entry = entry.get("url")
            if not isinstance(entry, str) or not entry:
                raise ValueError("Images must be URL strings")
            images.append(Image(entry))

        return cls(url=url.strip(), metadata=cleaned, title=title or None, images=images)


@dataclass(frozen=True)
class Card:
    title: str
    site: str
    size: CardSize
    social: Social
    description: Optional[str] = None
    image: Optional[Image] = None

    def to_dict(self):
        width, height = self.size.image_size
        return {
            "title": self.title,
            "site": self.site,
            "description": self.description,
            "image": self.image.url if self.image else None,
            "size": self.size.value,
            "social": self.social.value,
            "image_size": {"width": width, "height": height},
            "icon_size": self.size.icon_size,
        }


@dataclass
class CardResult:
    social: Social
    success: bool
    card: Optional[Card] = None
    error: Optional[CardError] = None

    def to_dict(self):
        if self.success:
            return {"success": True, "card": self.card.to_dict()}
        return {
            "success": False,
            "error": str(self.error),
            "message": self.error.message,
        }


class SocialPlatform(ABC):
    """Meta-tag lookup rules for one social network's link preview."""

    social: Social = None
    title_keys = ("og:title", "twitter:title", "title")
    description_keys = ("og:description", "twitter:description", "description")
    image_keys = ("og:image", "twitter:image", "twitter:image:src")
    type_keys = ("og:type",)

    def site(self, snapshot):
        """Site string shown on the card."""
        return snapshot.url

    def check(self, metadata_title, description):
        """Return a CardError when the metadata can't support a card at all."""
        return None

    @abstractmethod
    def finalize(self, snapshot, image, card_type):
        """Apply platform-specific rules.

        Returns an (image, size) tuple on success, or a CardError.
        """
        pass
