from __future__ import annotations

from collections.abc import Iterable

from .models import DEFAULT_CATEGORY, Classification, FolderSignature

GAMES_CATEGORY = "Games"
SOFTWARE_CATEGORY = "Software"

GAME_ARTIFACT_SUFFIXES = ("steam_api.dll", "unityplayer.dll")
GAME_ARTIFACT_SUBSTRINGS = ("shader", "save")
GAME_ASSET_DIRS = frozenset({"levels", "maps", "mods", "textures"})
DOC_PREFIXES = ("readme", "license", "changes")
SOURCE_TREE_DIRS = frozenset({"src", "bin", "lib", "include"})
INSTALLER_SUBSTRINGS = ("setup", "installer")

GAME_ARTIFACT_WEIGHT = 5
GAME_ASSET_WEIGHT = 3
DOC_WEIGHT = 1
SOURCE_TREE_WEIGHT = 3
INSTALLER_WEIGHT = 2

SOFTWARE_THRESHOLD = 4


def score_folder(child_names: Iterable[str]) -> FolderSignature:
    """
    Score the immediate children of a folder against the game and software
    signatures. Each rule group adds its weight at most once per child.

    Example:
        score_folder(["UnityPlayer.dll", "save1.dat"])
        # FolderSignature(game_score=10, software_score=0)
    """
    game_score = 0
    software_score = 0
    for name in child_names:
        lower = name.lower()
        if lower.endswith(GAME_ARTIFACT_SUFFIXES) or _contains_any(
            lower, GAME_ARTIFACT_SUBSTRINGS
        ):
            game_score += GAME_ARTIFACT_WEIGHT
        if lower in GAME_ASSET_DIRS:
            game_score += GAME_ASSET_WEIGHT
        if lower.startswith(DOC_PREFIXES):
            software_score += DOC_WEIGHT
        if lower in SOURCE_TREE_DIRS:
            software_score += SOURCE_TREE_WEIGHT
        if _contains_any(lower, INSTALLER_SUBSTRINGS):
            software_score += INSTALLER_WEIGHT
    return FolderSignature(game_score=game_score, software_score=software_score)


def decide_folder_category(signature: FolderSignature) -> Classification:
    """Games wins ties; Software needs to clear the threshold on its own."""

    if signature.game_score > 0 and signature.game_score >= signature.software_score:
        return Classification(label=GAMES_CATEGORY, resolved=True)
    if signature.software_score > SOFTWARE_THRESHOLD:
        return Classification(label=SOFTWARE_CATEGORY, resolved=True)
    return Classification(label=DEFAULT_CATEGORY, resolved=False)


def _contains_any(value: str, needles: tuple[str, ...]) -> bool:
    return any(needle in value for needle in needles)
