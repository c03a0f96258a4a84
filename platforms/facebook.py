from platforms.base import CardSize, Social, SocialPlatform
import services.card_size as card_size


class FacebookPlatform(SocialPlatform):
    social = Social.FACEBOOK

    def site(self, snapshot):
        return snapshot.url.upper()

    def finalize(self, snapshot, image, card_type):
        size = card_size.default_size(self.social)
        # No image in metadata: fall back to the first image found in the page
        if image is None and snapshot.images:
            image = snapshot.images[0]
            size = CardSize.MEDIUM
        return image, size
