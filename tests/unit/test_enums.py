import pytest

from appwrite_aio.enums import (
    AuthenticationFactor,
    AuthenticatorType,
    Browser,
    ConstantSet,
    CreditCard,
    ExecutionMethod,
    Flag,
    ImageFormat,
    ImageGravity,
    OAuthProvider,
)
from appwrite_aio.exceptions import InvalidValueError, ValidationError
from appwrite_aio.types import Err, Ok


def test_values_are_collected_from_constants():
    assert Browser.values() == frozenset(
        ["aa", "an", "ch", "ci", "cm", "cr", "ff", "sf", "mf", "ps", "oi", "om", "op", "on"]
    )
    assert ImageFormat.values() == frozenset(["jpg", "jpeg", "gif", "png", "webp"])
    assert AuthenticatorType.values() == frozenset(["totp"])
    assert "recoverycode" in AuthenticationFactor.values()
    assert len(ImageGravity.values()) == 9
    assert len(ExecutionMethod.values()) == 6


def test_label_is_not_a_token():
    assert "browser type" not in Browser.values()


@pytest.mark.parametrize(
    "cls,valid,invalid",
    [
        (Browser, Browser.GOOGLE_CHROME, "xx"),
        (CreditCard, "union-china-pay", "union china pay"),
        (Flag, "fr", "xx"),
        (ImageGravity, "top-left", "topleft"),
        (ExecutionMethod, "PATCH", "patch"),
        (OAuthProvider, "paypalSandbox", "myspace"),
    ],
)
def test_validators(cls, valid, invalid):
    assert cls.is_valid(valid)
    assert not cls.is_valid(invalid)
    assert cls.validate(valid) == Ok(valid)
    result = cls.validate(invalid)
    assert isinstance(result, Err)
    assert not result.ok
    assert cls.validate_strict(valid) == valid
    with pytest.raises(InvalidValueError):
        cls.validate_strict(invalid)


def test_error_messages():
    assert Flag.validate("xx") == Err("Invalid country flag code")
    assert OAuthProvider.validate("nope") == Err("Invalid OAuth provider")
    with pytest.raises(ValidationError, match="Invalid HTTP method: 'TRACE'"):
        ExecutionMethod.validate_strict("TRACE")


def test_non_string_is_invalid():
    assert not Flag.is_valid(None)
    assert not Flag.is_valid(42)


def test_flag_set_contents():
    assert len(Flag.values()) > 190
    assert {"us", "de", "jp", "br", "za"} <= Flag.values()
    assert Flag.FRANCE == "fr"


def test_custom_constant_set():
    class Color(ConstantSet):
        label = "color"
        RED = "red"
        BLUE = "blue"

    assert Color.values() == frozenset(["red", "blue"])
    assert Color.validate("green") == Err("Invalid color")
