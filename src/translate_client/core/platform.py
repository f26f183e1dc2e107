"""Platform enum - the client surfaces a translation set can belong to."""

from enum import Enum
from typing import Union


class Platform(str, Enum):
    BACKEND = "backend"
    API = "api"
    WEB = "web"
    MOBILE = "mobile"


def platform_name(platform: Union["Platform", str]) -> str:
    """Return the plain string for a Platform member or a raw platform name."""
    if isinstance(platform, Platform):
        return platform.value
    return platform
