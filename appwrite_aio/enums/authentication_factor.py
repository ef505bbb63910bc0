from ._base import ConstantSet


class AuthenticationFactor(ConstantSet):
    """Factors an MFA challenge can be sent through."""

    label = "authentication factor"

    EMAIL = "email"
    PHONE = "phone"
    TOTP = "totp"
    RECOVERY_CODE = "recoverycode"
