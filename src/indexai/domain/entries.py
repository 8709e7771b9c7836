from __future__ import annotations

from collections.abc import Collection, Iterable
from pathlib import Path

HIDDEN_PREFIX = "."


def is_eligible(name: str, excluded_names: Collection[str]) -> bool:
    """Hidden entries and the program's own files are never classified or moved."""

    if not name or name.startswith(HIDDEN_PREFIX):
        return False
    return name not in excluded_names


def own_executable_names(argv0: str, extra: Iterable[str] = ()) -> frozenset[str]:
    names = {name.strip() for name in extra if name.strip()}
    if argv0:
        program = Path(argv0)
        names.add(program.name)
        names.add(program.stem)
    names.discard("")
    return frozenset(names)


def display_name(name: str) -> str:
    """
    Make a name safe to encode as UTF-8. Names that are not valid UTF-8 on disk
    carry surrogate escapes; those bytes become replacement characters.

    Example:
        display_name(os.fsdecode(b"caf\\xe9.bin"))
        # 'caf�.bin'
    """
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
    return name
