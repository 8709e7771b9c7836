from unittest.mock import Mock

import pytest

from indexai.adapters.local_filesystem import LocalFileSystemAdapter
from indexai.domain.errors import InvalidDestinationError
from indexai.services.relocation_service import RelocationService


def _service() -> RelocationService:
    return RelocationService(LocalFileSystemAdapter())


def test_move_creates_category_folder_and_moves(tmp_path) -> None:
    (tmp_path / "photo.jpg").write_text("jpg")
    target = _service().move(tmp_path, "photo.jpg", "Images")
    assert target == tmp_path / "Images" / "photo.jpg"
    assert target.read_text() == "jpg"
    assert not (tmp_path / "photo.jpg").exists()


def test_move_never_overwrites_existing_item(tmp_path) -> None:
    (tmp_path / "Images").mkdir()
    (tmp_path / "Images" / "photo.jpg").write_text("old")
    (tmp_path / "photo.jpg").write_text("new")

    target = _service().move(tmp_path, "photo.jpg", "Images")

    assert target == tmp_path / "Images" / "photo_duplicate.jpg"
    assert (tmp_path / "Images" / "photo.jpg").read_text() == "old"
    assert target.read_text() == "new"


def test_second_collision_gets_numbered_suffix(tmp_path) -> None:
    images = tmp_path / "Images"
    images.mkdir()
    (images / "photo.jpg").write_text("first")
    (images / "photo_duplicate.jpg").write_text("second")
    (tmp_path / "photo.jpg").write_text("third")

    target = _service().move(tmp_path, "photo.jpg", "Images")

    assert target.name == "photo_duplicate_02.jpg"
    assert sorted(path.name for path in images.iterdir()) == [
        "photo.jpg",
        "photo_duplicate.jpg",
        "photo_duplicate_02.jpg",
    ]


def test_moving_folder_onto_its_own_category_is_noop(tmp_path) -> None:
    games = tmp_path / "Games"
    games.mkdir()
    (games / "save1.dat").write_text("x")

    target = _service().move(tmp_path, "Games", "Games")

    assert target == games
    assert sorted(path.name for path in tmp_path.iterdir()) == ["Games"]
    assert (games / "save1.dat").exists()


def test_moves_directories(tmp_path) -> None:
    game = tmp_path / "MyGame"
    game.mkdir()
    (game / "UnityPlayer.dll").write_text("x")

    _service().move(tmp_path, "MyGame", "Games")

    assert (tmp_path / "Games" / "MyGame" / "UnityPlayer.dll").exists()


def test_missing_source_raises_without_creating_folder(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        _service().move(tmp_path, "ghost.txt", "Documents")
    assert not (tmp_path / "Documents").exists()


def test_invalid_destination_raises(tmp_path) -> None:
    (tmp_path / "a.txt").write_text("x")
    with pytest.raises(InvalidDestinationError):
        _service().move(tmp_path, "a.txt", "../outside")
    assert (tmp_path / "a.txt").exists()


def test_rename_errors_propagate(tmp_path) -> None:
    filesystem = Mock()
    filesystem.exists.side_effect = lambda path: path == tmp_path / "a.txt"
    filesystem.rename.side_effect = PermissionError("denied")
    service = RelocationService(filesystem)

    with pytest.raises(PermissionError):
        service.move(tmp_path, "a.txt", "Documents")
    filesystem.make_dir.assert_called_once_with(tmp_path / "Documents")
    filesystem.rename.assert_called_once_with(
        tmp_path / "a.txt", tmp_path / "Documents" / "a.txt"
    )
