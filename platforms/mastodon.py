from platforms.base import Social, SocialPlatform
import services.card_size as card_size


class MastodonPlatform(SocialPlatform):
    social = Social.MASTODON
    image_keys = ("og:image",)

    def site(self, snapshot):
        site_name = snapshot.metadata.get("og:site_name", "")
        return site_name or snapshot.url

    def finalize(self, snapshot, image, card_type):
        # Mastodon always uses a small card
        return image, card_size.default_size(self.social)
