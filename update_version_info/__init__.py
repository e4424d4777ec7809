"""Stamp a four-part version number into C#, Android and iOS build files."""

from .android_manifest import is_valid_android_manifest, update_android_manifest
from .apple_plist import is_valid_touch_plist, update_touch_plist
from .assembly_info import is_valid_assembly_info, update_assembly_info
from .version import VersionInfo

__version__ = "1.0.0"

__all__ = [
    "VersionInfo",
    "is_valid_android_manifest",
    "is_valid_assembly_info",
    "is_valid_touch_plist",
    "update_android_manifest",
    "update_assembly_info",
    "update_touch_plist",
]
