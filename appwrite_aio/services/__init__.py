"""Service groups of the Appwrite API."""
from .account import Account
from .avatars import Avatars
from .databases import Databases
from .functions import Functions
from .locale import Locale
from .storage import Storage
from .teams import Teams

__all__ = ["Account", "Avatars", "Databases", "Functions", "Locale", "Storage", "Teams"]
