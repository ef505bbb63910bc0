from ._base import ConstantSet


class AuthenticatorType(ConstantSet):
    """MFA authenticator types."""

    label = "authenticator type"

    TOTP = "totp"
