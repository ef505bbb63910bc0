"""Permission and role strings for documents, files and buckets.

    >>> Permission.read(Role.user("5c1f88b4", "verified"))
    'read("user:5c1f88b4/verified")'
"""


class Role:
    """Builders for the role part of a permission."""

    @staticmethod
    def any() -> str:
        """Anyone, authenticated or not."""
        return "any"

    @staticmethod
    def user(id: str, status: str = "") -> str:
        """A single user; status may be ``verified`` or ``unverified``."""
        return f"user:{id}/{status}" if status else f"user:{id}"

    @staticmethod
    def users(status: str = "") -> str:
        """Any authenticated or anonymous user."""
        return f"users/{status}" if status else "users"

    @staticmethod
    def guests() -> str:
        """Any visitor without a session."""
        return "guests"

    @staticmethod
    def team(id: str, role: str = "") -> str:
        """Members of a team, optionally only those holding role."""
        return f"team:{id}/{role}" if role else f"team:{id}"

    @staticmethod
    def member(id: str) -> str:
        """A single team membership."""
        return f"member:{id}"

    @staticmethod
    def label(name: str) -> str:
        """Users carrying a label."""
        return f"label:{name}"


class Permission:
    """Builders for permission strings such as ``read("any")``."""

    @staticmethod
    def read(role: str) -> str:
        return f'read("{role}")'

    @staticmethod
    def write(role: str) -> str:
        """Shorthand for create, update and delete."""
        return f'write("{role}")'

    @staticmethod
    def create(role: str) -> str:
        return f'create("{role}")'

    @staticmethod
    def update(role: str) -> str:
        return f'update("{role}")'

    @staticmethod
    def delete(role: str) -> str:
        return f'delete("{role}")'
