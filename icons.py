"""Turn icon file names into enum variant names."""

import logging
import os
import unicodedata
from typing import List, Optional, Tuple

from tqdm import tqdm

ICON_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "svg", "webp"})
BOUNDARY_CHARS = frozenset("_-@ .")
ASCII_DIGITS = frozenset("0123456789")

# Combining Diacritical Marks block
_COMBINING_MIN = 0x0300
_COMBINING_MAX = 0x036F


def _split_extension(path: str) -> Tuple[str, Optional[str]]:
    """Split the final path segment into (stem, extension).

    Only the host separator ends a segment; a backslash on POSIX is part of
    the file name. The extension is None when the segment has no dot at all.
    Only the last dot counts, so "archive.tar.gz" splits into
    ("archive.tar", "gz").
    """
    name = os.path.basename(path)
    stem, dot, ext = name.rpartition(".")
    if not dot:
        return name, None
    return stem, ext


def remove_extension(path: str) -> str:
    """Return the file name of `path` without its final extension."""
    stem, _ = _split_extension(path)
    return stem


def is_valid_icon(path: str) -> bool:
    stem, ext = _split_extension(path)
    if ext is None:
        return False
    if ext.lower() not in ICON_EXTENSIONS:
        return False
    return bool(stem.strip())


def _is_combining(c: str) -> bool:
    return _COMBINING_MIN <= ord(c) <= _COMBINING_MAX


def has_accent(c: str) -> bool:
    return any(_is_combining(d) for d in unicodedata.normalize("NFKD", c))


def remove_accent(c: str) -> str:
    """Return the base letter of an accented character, keeping its case."""
    for d in unicodedata.normalize("NFKD", c):
        if not _is_combining(d):
            return d
    return c


def sanitize_filename(path: str) -> Optional[str]:
    """Convert an icon path into a PascalCase enum variant name.

    Returns None when the path is not an icon. ASCII letters and digits are
    kept, and the first one after a boundary character (``_-@ .``) is
    upper-cased. Accented letters are reduced to their base letter without
    touching the pending capitalization, so "été.png" gives "eTe". Everything
    else is dropped. A leading digit gets an underscore prefix.
    """
    if not is_valid_icon(path):
        return None

    sanitized = []
    capitalize_next = True

    for c in remove_extension(path):
        if c.isascii() and c.isalnum():
            if capitalize_next:
                sanitized.append(c.upper())
                capitalize_next = False
            else:
                sanitized.append(c)
        elif c in BOUNDARY_CHARS:
            capitalize_next = True
        elif has_accent(c):
            sanitized.append(remove_accent(c))

    name = "".join(sanitized)
    if name[:1] in ASCII_DIGITS:
        name = f"_{name}"
    return name


def search_icons(dir_path: str, quiet: bool = False) -> List[str]:
    """List the regular files directly inside `dir_path`.

    Subdirectories are not descended into. Paths are returned sorted by file
    name and joined onto `dir_path` as given. Raises OSError when the
    directory cannot be read.
    """
    with os.scandir(dir_path) as it:
        entries = sorted(it, key=lambda e: e.name)

    paths = []
    for entry in tqdm(entries, desc="Scanning icons", unit=" files", disable=quiet):
        if entry.is_file():
            paths.append(os.path.join(dir_path, entry.name))
        else:
            logging.debug("Skipped %s as it is not a regular file.", entry.path)

    return paths
