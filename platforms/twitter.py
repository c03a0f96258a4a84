from platforms.base import CardError, Social, SocialPlatform
import services.card_size as card_size


class TwitterPlatform(SocialPlatform):
    social = Social.TWITTER
    title_keys = ("twitter:title", "og:title", "title")
    description_keys = ("twitter:description", "og:description")
    image_keys = ("twitter:image", "twitter:image:src", "og:image")
    type_keys = ("twitter:card", "og:type")

    def check(self, metadata_title, description):
        # Only the title found in metadata counts here, not the fallback title
        if metadata_title is None and description is None:
            return CardError.NOT_ENOUGH_DATA
        return None

    def finalize(self, snapshot, image, card_type):
        if card_type is None:
            return CardError.TWITTER_NO_CARD_FOUND
        # Size follows the raw twitter:card value, even when og:type supplied the type
        return image, card_size.twitter_size_from_hint(snapshot.metadata.get("twitter:card"))
