"""Closed sets of API tokens with membership validators."""
from ._base import ConstantSet
from .authentication_factor import AuthenticationFactor
from .authenticator_type import AuthenticatorType
from .browser import Browser
from .credit_card import CreditCard
from .execution_method import ExecutionMethod
from .flag import Flag
from .image_format import ImageFormat
from .image_gravity import ImageGravity
from .oauth_provider import OAuthProvider

__all__ = [
    "ConstantSet",
    "AuthenticationFactor",
    "AuthenticatorType",
    "Browser",
    "CreditCard",
    "ExecutionMethod",
    "Flag",
    "ImageFormat",
    "ImageGravity",
    "OAuthProvider",
]
