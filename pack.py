"""Pack icon paths into a Rust enum with a `path()` accessor."""

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Set

from icons import ASCII_DIGITS, sanitize_filename, search_icons
from utils import IconEntry, normalize_path

DEFAULT_ENUM_NAME = "Icon"
COLLISION_POLICIES = ("keep", "suffix", "error")

ENUM_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

ENUM_START = "pub enum {name} {{"
ENUM_END = "}"
ACCESSOR_START = "impl {name} {{ pub fn path(&self) -> &'static str {{ match self {{"
ACCESSOR_END = "}}}"


class IdentifierCollision(ValueError):
    def __init__(self, identifier: str, first: str, second: str):
        self.identifier = identifier
        self.first = first
        self.second = second
        super().__init__(
            f"Icons {first!r} and {second!r} both map to variant {identifier!r}"
        )


def _with_suffix(identifier: str, taken: Set[str]) -> str:
    n = 2
    while True:
        candidate = f"{identifier}{n}"
        if candidate[:1] in ASCII_DIGITS:
            candidate = f"_{candidate}"
        if candidate not in taken:
            return candidate
        n += 1


def build_enum_spec(
    paths: Iterable[str], on_collision: str = "keep"
) -> List[IconEntry]:
    """Sanitize each path and collect the accepted ones, in input order.

    on_collision decides what happens when two paths map to the same variant:
    "keep" emits both and logs a warning, "suffix" renames the later ones
    (Foo, Foo2, Foo3...), "error" raises IdentifierCollision.
    """
    if on_collision not in COLLISION_POLICIES:
        raise ValueError(f"Unknown collision policy: {on_collision}")

    named = []
    skipped = 0
    for path in paths:
        name = sanitize_filename(path)
        if name is None:
            logging.debug("Skipped %s as it is not an icon file.", path)
            skipped += 1
            continue
        named.append((name, path))

    if skipped:
        logging.info("Skipped %d files without an icon extension or name.", skipped)

    taken = {name for name, _ in named}
    seen: Dict[str, str] = {}
    entries = []
    for name, path in named:
        if name in seen:
            if on_collision == "error":
                raise IdentifierCollision(name, seen[name], path)
            if on_collision == "suffix":
                renamed = _with_suffix(name, taken)
                logging.info("Renamed variant %s to %s for %s.", name, renamed, path)
                taken.add(renamed)
                name = renamed
            else:
                logging.warning(
                    "Variant %s duplicately defined by %s and %s.",
                    name,
                    seen[name],
                    path,
                )
        seen.setdefault(name, path)
        entries.append(IconEntry(identifier=name, path=normalize_path(path)))

    return entries


def _render_compact(entries: List[IconEntry], enum_name: str) -> str:
    parts = [ENUM_START.format(name=enum_name)]
    parts.extend(f"{e.identifier}," for e in entries)
    parts.append(ENUM_END)
    parts.append(ACCESSOR_START.format(name=enum_name))
    parts.extend(f'{enum_name}::{e.identifier} => "{e.path}", ' for e in entries)
    parts.append(ACCESSOR_END)
    return "".join(parts)


def _render_pretty(entries: List[IconEntry], enum_name: str) -> str:
    lines = [f"pub enum {enum_name} {{"]
    lines.extend(f"    {e.identifier}," for e in entries)
    lines.append("}")
    lines.append(f"impl {enum_name} {{")
    lines.append("    pub fn path(&self) -> &'static str {")
    lines.append("        match self {")
    lines.extend(
        f'            {enum_name}::{e.identifier} => "{e.path}",' for e in entries
    )
    lines.append("        }")
    lines.append("    }")
    lines.append("}")
    lines.append("")
    return "\n".join(lines)


def render_enum(
    entries: List[IconEntry], enum_name: str = DEFAULT_ENUM_NAME, pretty: bool = False
) -> str:
    if not ENUM_NAME_RE.fullmatch(enum_name):
        raise ValueError(f"Invalid enum name: {enum_name!r}")
    if pretty:
        return _render_pretty(entries, enum_name)
    return _render_compact(entries, enum_name)


def create_enum_text(
    paths: Iterable[str],
    enum_name: str = DEFAULT_ENUM_NAME,
    *,
    on_collision: str = "keep",
    pretty: bool = False,
) -> str:
    """Generate the enum source for the given icon paths.

    Paths that are not icons are left out entirely. The compact form is a
    single line; `pretty` spreads the same tokens over indented lines.
    """
    return render_enum(build_enum_spec(paths, on_collision), enum_name, pretty)


def create_enum_file(
    input_dir: str,
    output_file: str,
    enum_name: str = DEFAULT_ENUM_NAME,
    *,
    on_collision: str = "keep",
    pretty: bool = False,
    quiet: bool = False,
) -> int:
    """Scan `input_dir` and write the generated enum to `output_file`.

    Returns the number of variants written.
    """
    paths = search_icons(input_dir, quiet=quiet)
    entries = build_enum_spec(paths, on_collision)
    text = render_enum(entries, enum_name, pretty)

    with Path(output_file).open("w", encoding="utf-8", newline="\n") as f:
        f.write(text)
    logging.info("Wrote %d icons to %s", len(entries), output_file)
    return len(entries)
