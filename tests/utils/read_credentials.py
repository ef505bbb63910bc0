"""
Utility: read Appwrite credentials from credentials.txt (KEY=VALUE lines)

Place credentials.txt in tests/utils/ or set environment variables.
"""

from pathlib import Path
from typing import Optional, Union, Dict
import os

KEYS = (
    "APPWRITE_ROOT_URI",
    "APPWRITE_PROJECT_ID",
    "APPWRITE_SECRET",
    "APPWRITE_DATABASE_ID",
    "APPWRITE_COLLECTION_ID",
    "APPWRITE_BUCKET_ID",
)


def read_credentials(path: Optional[Union[str, Path]] = None) -> Dict[str, str]:
    """Return dict of credentials from the given file. Falls back to env vars if not present."""
    creds = {}
    if path is None:
        # Default to tests/utils/credentials.txt
        path = Path(__file__).parent / "credentials.txt"
    p = Path(path)
    if p.exists():
        for ln in p.read_text().splitlines():
            ln = ln.strip()
            if not ln or ln.startswith("#"):
                continue
            if "=" in ln:
                k, v = ln.split("=", 1)
                creds[k.strip()] = v.strip()
    # Only accept non-empty environment values
    for k in KEYS:
        if k not in creds:
            val = os.getenv(k)
            if val:
                creds[k] = val
    return creds


def client_config_kwargs(creds: Dict[str, str]) -> Dict[str, str]:
    """Map credential keys onto ClientConfig keyword arguments."""
    return {
        "endpoint": creds["APPWRITE_ROOT_URI"],
        "project": creds["APPWRITE_PROJECT_ID"],
        "key": creds["APPWRITE_SECRET"],
    }
