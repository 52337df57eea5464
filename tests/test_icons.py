"""Unit tests for icons.py."""

import os
from pathlib import Path

import pytest

from icons import (
    has_accent,
    is_valid_icon,
    remove_accent,
    remove_extension,
    sanitize_filename,
    search_icons,
)


SANITIZE_CASES = [
    ("ch*eck_box.jpg", "CheckBox"),
    ("search-icon@2x.svg", "SearchIcon2x"),
    ("home page.png", "HomePage"),
    ("settings@dark-mode.svg", "SettingsDarkMode"),
    ("123-start.svg", "_123Start"),
    ("!weird__name!.svg", "WeirdName"),
    ("CAPSLOCK.PNG", "CAPSLOCK"),
    ("multi   space  name.jpg", "MultiSpaceName"),
    ("icon.v1.2.png", "IconV12"),
    ("a.png", "A"),
    ("2025.png", "_2025"),
    ("café-icon.svg", "CafeIcon"),
    ("LICENSE", None),
    (".gitignore", None),
]


class TestSanitizeFilename:
    """Tests for sanitize_filename."""

    @pytest.mark.parametrize("filename, expected", SANITIZE_CASES)
    def test_basic_mapping(self, filename: str, expected: str) -> None:
        assert sanitize_filename(filename) == expected

    def test_uses_only_final_path_segment(self) -> None:
        path = os.path.join("assets", "icons", "arrow-left.svg")
        assert sanitize_filename(path) == "ArrowLeft"

    @pytest.mark.skipif(os.sep == "\\", reason="backslash is a separator here")
    def test_backslash_is_part_of_posix_file_name(self) -> None:
        assert sanitize_filename("x\\y.png") == "Xy"
        assert sanitize_filename("assets\\icons\\arrow-left.svg") == "AssetsiconsarrowLeft"
        assert is_valid_icon("a\\.png")
        assert sanitize_filename("a\\.png") == "A"

    def test_accent_does_not_consume_capitalization(self) -> None:
        """An accented letter is inserted as its base letter, case untouched."""
        assert sanitize_filename("été.png") == "eTe"
        assert sanitize_filename("x-éclair.png") == "XeClair"
        assert sanitize_filename("Écran.svg") == "ECran"

    def test_only_dropped_characters_gives_empty_name(self) -> None:
        assert sanitize_filename("!!!.png") == ""
        assert sanitize_filename("*_-.svg") == ""

    def test_never_starts_with_digit(self) -> None:
        for name in ("1.png", "9-lives.svg", "007agent.webp", "__42__.jpeg"):
            result = sanitize_filename(name)
            assert result is not None
            assert not result[0].isdigit()
            assert result.startswith("_")

    def test_non_ascii_letters_without_accent_are_dropped(self) -> None:
        assert sanitize_filename("ßeta-ωmega.png") == "EtaMega"

    def test_is_deterministic(self) -> None:
        assert sanitize_filename("café-icon.svg") == sanitize_filename("café-icon.svg")


class TestIsValidIcon:
    """Tests for is_valid_icon."""

    @pytest.mark.parametrize(
        "filename",
        ["a.png", "b.JPG", "c.jpeg", "d.Svg", "e.webp", "dir/f.png", "x.tar.svg"],
    )
    def test_accepts_icon_extensions(self, filename: str) -> None:
        assert is_valid_icon(filename)

    @pytest.mark.parametrize(
        "filename",
        ["LICENSE", "notes.txt", "image.gif", "a.", ".png", " .png", "   .svg", "dir.png/"],
    )
    def test_rejects_others(self, filename: str) -> None:
        assert not is_valid_icon(filename)

    def test_does_not_touch_filesystem(self, tmp_path: Path) -> None:
        assert is_valid_icon(str(tmp_path / "does-not-exist.png"))


class TestRemoveExtension:
    """Tests for remove_extension."""

    def test_removes_single_extension(self) -> None:
        assert remove_extension("file.txt") == "file"
        assert remove_extension("archive.tar.gz") == "archive.tar"
        assert remove_extension("no_extension") == "no_extension"

    def test_returns_final_segment_only(self) -> None:
        assert remove_extension("some.dir/icon.png") == "icon"


class TestAccents:
    """Tests for the accent helpers."""

    def test_has_accent(self) -> None:
        assert has_accent("é")
        assert has_accent("Ñ")
        assert not has_accent("e")
        assert not has_accent("ß")

    def test_remove_accent_keeps_case(self) -> None:
        assert remove_accent("é") == "e"
        assert remove_accent("É") == "E"
        assert remove_accent("ñ") == "n"


class TestSearchIcons:
    """Tests for search_icons."""

    def test_lists_top_level_files_sorted(self, tmp_path: Path) -> None:
        (tmp_path / "b.svg").write_text("<svg/>")
        (tmp_path / "a.png").write_bytes(b"")
        (tmp_path / "README").write_text("")
        sub = tmp_path / "nested"
        sub.mkdir()
        (sub / "c.png").write_bytes(b"")

        paths = search_icons(str(tmp_path), quiet=True)

        assert paths == [
            str(tmp_path / "README"),
            str(tmp_path / "a.png"),
            str(tmp_path / "b.svg"),
        ]

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert search_icons(str(tmp_path), quiet=True) == []

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            search_icons(str(tmp_path / "missing"), quiet=True)

    def test_file_instead_of_directory_raises(self, tmp_path: Path) -> None:
        target = tmp_path / "icon.png"
        target.write_bytes(b"")
        with pytest.raises(NotADirectoryError):
            search_icons(str(target), quiet=True)
