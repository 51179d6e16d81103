"""Path helpers: separator normalisation, joining, name extraction and file discovery."""

from __future__ import annotations

import os

SEP = os.sep
_SEPARATORS = frozenset("/\\")


def normalize_path(path: str) -> str:
    """Replace every forward or backward slash with the platform separator."""
    return "".join(SEP if c in _SEPARATORS else c for c in path)


def has_extension(filename: str, ext: str) -> bool:
    """True if ``filename`` ends with ``.`` followed by ``ext``, ignoring ASCII case."""
    if len(filename) < len(ext) + 1:
        return False
    if filename[len(filename) - len(ext) - 1] != ".":
        return False
    tail = filename[len(filename) - len(ext):]
    return tail.lower() == ext.lower()


def file_name(path: str) -> str:
    """Return the part of ``path`` after its last separator."""
    last = max(path.rfind("/"), path.rfind("\\"))
    return path[last + 1:]


def file_name_no_ext(path: str) -> str:
    """Return the file name of ``path`` up to its first dot."""
    name = file_name(path)
    dot = name.find(".")
    return name if dot < 0 else name[:dot]


def join_path(a: str, b: str) -> str:
    """Join two path parts with exactly one separator between them.

    A separator is inserted only when both parts are non-empty and neither
    supplies one; if both do, one of them is dropped.
    """
    a_ends = bool(a) and a[-1] in _SEPARATORS
    b_starts = bool(b) and b[0] in _SEPARATORS
    if a_ends and b_starts:
        return a + b[1:]
    if not a_ends and not b_starts and a and b:
        return a + SEP + b
    return a + b


def dirname(path: str) -> str:
    """Return ``path`` up to (not including) its last separator, or '' if it has none."""
    last = max(path.rfind("/"), path.rfind("\\"))
    return path[:last] if last > 0 else ""


def current_directory_name(path: str) -> str:
    """Return the component after the last platform separator, or '' if there is none."""
    index = path.rfind(SEP)
    return "" if index < 0 else path[index + 1:]


def collect_files(path: str) -> list[str]:
    """Return the normalised paths of every file below the directory ``path``.

    Directories are walked depth first, the most recently found one first;
    entries within a directory are visited in name order.
    """
    if not os.path.isdir(path):
        raise NotADirectoryError(f"Path '{path}' is not a directory.")

    result: list[str] = []
    pending = [path]
    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as entries:
                names = sorted(
                    (entry.name, entry.is_dir()) for entry in entries
                )
        except OSError:
            continue
        for name, is_directory in names:
            if not name:
                continue
            full_path = current + SEP + name
            if is_directory:
                pending.append(full_path)
            else:
                result.append(normalize_path(full_path))
    return result