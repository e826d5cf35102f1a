"""Writing a processed pack to a directory or a zip archive.

Key function: write_pack
"""
from bootstrap.primary_imports import os, zipfile


def write_pack(destination, files):
    """
    Write (path, bytes) pairs below destination.

    A destination ending in .zip is written as a deflated archive, anything
    else as a directory tree (created if needed). Paths must already have
    passed is_safe_entry_path.
    """
    destination = os.fspath(destination)
    if destination.lower().endswith(".zip"):
        parent = os.path.dirname(destination)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with zipfile.ZipFile(destination, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for path, data in files:
                archive.writestr(path, data)
        return

    os.makedirs(destination, exist_ok=True)
    for path, data in files:
        target = os.path.join(destination, *path.split("/"))
        os.makedirs(os.path.dirname(target), exist_ok=True)
        with open(target, "wb") as f:
            f.write(data)
