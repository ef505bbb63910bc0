from ._base import ConstantSet


class OAuthProvider(ConstantSet):
    """OAuth2 providers for ``Account.create_oauth2_session`` and ``create_oauth2_token``."""

    label = "OAuth provider"

    AMAZON = "amazon"
    APPLE = "apple"
    AUTH0 = "auth0"
    AUTHENTIK = "authentik"
    AUTODESK = "autodesk"
    BITBUCKET = "bitbucket"
    BITLY = "bitly"
    BOX = "box"
    DAILYMOTION = "dailymotion"
    DISCORD = "discord"
    DISQUS = "disqus"
    DROPBOX = "dropbox"
    ETSY = "etsy"
    FACEBOOK = "facebook"
    GITHUB = "github"
    GITLAB = "gitlab"
    GOOGLE = "google"
    LINKEDIN = "linkedin"
    MICROSOFT = "microsoft"
    NOTION = "notion"
    OIDC = "oidc"
    OKTA = "okta"
    PAYPAL = "paypal"
    PAYPAL_SANDBOX = "paypalSandbox"
    PODIO = "podio"
    SALESFORCE = "salesforce"
    SLACK = "slack"
    SPOTIFY = "spotify"
    STRIPE = "stripe"
    TRADESHIFT = "tradeshift"
    TRADESHIFT_BOX = "tradeshiftBox"
    TWITCH = "twitch"
    WORDPRESS = "wordpress"
    YAHOO = "yahoo"
    YAMMER = "yammer"
    YANDEX = "yandex"
    ZOHO = "zoho"
    ZOOM = "zoom"
    MOCK = "mock"
