"""Reading pack entries from a directory or a zip archive.

Key functions: read_pack_entries, is_safe_entry_path, normalize_entry_path
"""
from dataclasses import dataclass

from bootstrap.primary_imports import os, pathlib, zipfile


@dataclass(frozen=True)
class PackEntry:
    path: str  # relative, POSIX separators
    data: bytes


def is_safe_entry_path(path):
    """True if path is relative and cannot escape the pack root."""
    if not path or path.startswith(("/", "\\")):
        return False
    parts = pathlib.PurePosixPath(path.replace("\\", "/")).parts
    if parts and parts[0].endswith(":"):
        return False  # windows drive
    return ".." not in parts


def normalize_entry_path(path):
    """Collapse repeated separators and "." segments, using "/" as separator: "dir//./a.xml" -> "dir/a.xml"."""
    return pathlib.PurePosixPath(path.replace("\\", "/")).as_posix()


def parent_dirs(path):
    """Return every directory above a normalized entry path: "a/b/c.xml" -> ["a/b", "a"]."""
    parents = pathlib.PurePosixPath(path).parents
    return [p.as_posix() for p in parents if p.as_posix() != "."]


def _read_directory(root):
    entries = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for name in sorted(filenames):
            full_path = os.path.join(dirpath, name)
            rel_path = pathlib.Path(full_path).relative_to(root).as_posix()
            with open(full_path, "rb") as f:
                entries.append(PackEntry(rel_path, f.read()))
    return entries


def _read_zip(zip_path):
    entries = []
    with zipfile.ZipFile(zip_path) as archive:
        for info in archive.infolist():
            if info.is_dir():
                continue
            entries.append(PackEntry(info.filename, archive.read(info)))
    return entries


def read_pack_entries(source):
    """
    Read every file of a pack in a stable order.

    Args:
        source: Path to a pack directory or a .zip archive

    Returns:
        list of PackEntry. Zip archives may contain the same name twice;
        both entries are returned.

    Raises:
        FileNotFoundError: if source does not exist
        ValueError: if source is neither a directory nor a zip archive
    """
    source = os.fspath(source)
    if not os.path.exists(source):
        raise FileNotFoundError(f"Pack source not found: {source}")
    if os.path.isdir(source):
        return _read_directory(source)
    if zipfile.is_zipfile(source):
        return _read_zip(source)
    raise ValueError(f"Pack source is neither a directory nor a zip archive: {source}")
