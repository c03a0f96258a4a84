import os
from dotenv import load_dotenv

from platforms.base import Social

load_dotenv()

SOCIAL_NAMES = [social.value for social in Social]


def parse_socials(raw, default=None):
    """Parse the enabled socials list and check the default is one of them.

    Without a default the first enabled social is used. Raises ValueError
    naming the first unknown social.
    """
    enabled = []
    for name in raw.split(","):
        name = name.strip().lower()
        if not name:
            continue
        if name not in SOCIAL_NAMES:
            raise ValueError(f"CARD_ENABLED_SOCIALS: unknown platform {name!r}")
        if name not in enabled:
            enabled.append(name)
    if not enabled:
        raise ValueError("CARD_ENABLED_SOCIALS: no platform enabled")

    default = (default or "").strip().lower() or enabled[0]
    if default not in enabled:
        raise ValueError(f"CARD_DEFAULT_SOCIAL: {default!r} is not an enabled platform")
    return enabled, default


ENABLED_SOCIALS, DEFAULT_SOCIAL = parse_socials(
    os.getenv("CARD_ENABLED_SOCIALS", ",".join(SOCIAL_NAMES)),
    os.getenv("CARD_DEFAULT_SOCIAL"),
)

MAX_REQUEST_BYTES = int(os.getenv("CARD_MAX_REQUEST_BYTES", str(1024 * 1024)))  # 1MB

HOST = os.getenv("CARD_HOST", "127.0.0.1")
PORT = int(os.getenv("CARD_PORT", "5555"))


def social_enabled(name):
    return str(name).strip().lower() in ENABLED_SOCIALS
