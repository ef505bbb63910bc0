"""Resource id helpers."""
import secrets
import time


def _hex_timestamp() -> str:
    now = time.time()
    seconds = int(now)
    msec = int((now - seconds) * 1000)
    return f"{seconds:x}{msec:05x}"


class ID:
    """Helpers for resource ids."""

    @staticmethod
    def unique(padding: int = 7) -> str:
        """Generate an id from the current time in hex followed by padding random hex digits.

        Raises:
            ValueError: If padding is not a positive integer
        """
        if not isinstance(padding, int) or padding <= 0:
            raise ValueError(f"padding must be a positive integer, got {padding!r}")
        return _hex_timestamp() + "".join(secrets.choice("0123456789abcdef") for _ in range(padding))

    @staticmethod
    def custom(id: str) -> str:
        """Use a caller-chosen id as is."""
        return id
