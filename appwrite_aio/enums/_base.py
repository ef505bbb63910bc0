"""Base class for closed sets of API string constants."""
from typing import Any, ClassVar, FrozenSet

from ..exceptions import InvalidValueError
from ..types import Err, Ok, Result


class ConstantSet:
    """A closed set of string tokens declared as upper-case class attributes.

    Subclasses set ``label`` (used in error messages) and declare each token
    as ``NAME = "token"``; the set of tokens is collected when the subclass
    is created.

    Example:
        >>> class Color(ConstantSet):
        ...     label = "color"
        ...     RED = "red"
        >>> Color.validate("blue")
        Err(error='Invalid color')
    """

    label: ClassVar[str] = "value"
    _values: ClassVar[FrozenSet[str]] = frozenset()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._values = frozenset(
            value for name, value in vars(cls).items()
            if name.isupper() and isinstance(value, str)
        )

    @classmethod
    def values(cls) -> FrozenSet[str]:
        return cls._values

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        return isinstance(value, str) and value in cls._values

    @classmethod
    def validate(cls, value: Any) -> Result[str]:
        """Return ``Ok(value)`` for a known token, ``Err("Invalid <label>")`` otherwise."""
        if cls.is_valid(value):
            return Ok(value)
        return Err(f"Invalid {cls.label}")

    @classmethod
    def validate_strict(cls, value: Any) -> str:
        """Return value if it is a known token.

        Raises:
            InvalidValueError: If value is not one of the tokens
        """
        if not cls.is_valid(value):
            raise InvalidValueError(f"Invalid {cls.label}: {value!r}")
        return value
