from __future__ import annotations

from collections.abc import Callable

from .errors import InvalidDestinationError

DUPLICATE_SUFFIX = "_duplicate"


def validate_destination(destination: str) -> str:
    """
    Return the category label if it names exactly one subfolder.

    Examples:
        >>> validate_destination(" Images ")
        'Images'
        >>> validate_destination("../etc")
        Traceback (most recent call last):
        ...
        indexai.domain.errors.InvalidDestinationError: Invalid destination folder: '../etc'
    """
    cleaned = destination.strip()
    if (
        cleaned in ("", ".", "..")
        or "/" in cleaned
        or "\\" in cleaned
        or "\x00" in cleaned
    ):
        raise InvalidDestinationError(f"Invalid destination folder: {destination!r}")
    return cleaned


def duplicate_name(name: str, is_taken: Callable[[str], bool]) -> str:
    """
    Insert the duplicate suffix before the extension until the name is free.

    Example:
        duplicate_name("photo.jpg", lambda candidate: False)
        # 'photo_duplicate.jpg'
        duplicate_name("photo.jpg", lambda candidate: candidate == "photo_duplicate.jpg")
        # 'photo_duplicate_02.jpg'
    """
    base, ext = _split_extension(name)
    candidate = f"{base}{DUPLICATE_SUFFIX}{ext}"
    counter = 2
    while is_taken(candidate):
        candidate = f"{base}{DUPLICATE_SUFFIX}_{counter:02d}{ext}"
        counter += 1
    return candidate


def _split_extension(name: str) -> tuple[str, str]:
    # Only the last suffix is kept aside, so "a.tar.gz" becomes "a.tar_duplicate.gz".
    stem, dot, suffix = name.rpartition(".")
    if not dot:
        return name, ""
    return stem, dot + suffix
