from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .models import DEFAULT_CATEGORY

_EXTENSION_GROUPS: dict[str, tuple[str, ...]] = {
    "Images": (".jpg", ".jpeg", ".png", ".gif", ".webp"),
    "Documents": (".pdf", ".doc", ".docx", ".txt"),
    "Audio": (".mp3", ".wav", ".flac"),
    "Video": (".mp4", ".mkv", ".avi"),
    "Archives": (".zip", ".rar", ".7z"),
    "Installers": (".exe", ".msi"),
    "Code": (".go", ".py", ".js", ".html", ".css"),
}

EXTENSION_CATEGORIES: Mapping[str, str] = MappingProxyType(
    {
        extension: category
        for category, extensions in _EXTENSION_GROUPS.items()
        for extension in extensions
    }
)


def classify_extension(
    extension: str, table: Mapping[str, str] = EXTENSION_CATEGORIES
) -> tuple[str, bool]:
    """
    Look up the category for a lowercase extension (dot included).

    Examples:
        >>> classify_extension(".jpg")
        ('Images', True)
        >>> classify_extension(".xyz")
        ('Misc', False)
    """
    category = table.get(extension)
    if category is None:
        return DEFAULT_CATEGORY, False
    return category, True


def extension_of(name: str) -> str:
    """Return the lowercase extension of a file name, including the dot."""

    _, dot, ext = name.rpartition(".")
    if dot == "" or ext == "":
        return ""
    return f".{ext.lower()}"
