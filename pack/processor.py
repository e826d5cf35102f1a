"""Run the attribute deduplication filter over every XML file of a pack.

Key function: process_pack
"""
from dataclasses import dataclass, field
from typing import Dict

from bootstrap.primary_imports import os
from xml_processing import sanitize
from . import failures as kinds
from .failures import PackFailures
from .output import write_pack
from .sources import is_safe_entry_path, normalize_entry_path, parent_dirs, read_pack_entries


@dataclass
class PackReport:
    xml: Dict[str, str] = field(default_factory=dict)
    other: Dict[str, bytes] = field(default_factory=dict)
    failures: PackFailures = field(default_factory=PackFailures)

    @property
    def ok(self) -> bool:
        return not self.failures.errors

    def output_files(self):
        """Return (path, bytes) pairs for everything that should be written, XML first."""
        files = [(path, text.encode("utf-8")) for path, text in self.xml.items()]
        files.extend(self.other.items())
        return files


def _filter_entry(path, entry, report):
    try:
        # utf-8-sig drops a leading BOM
        text = entry.data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        report.failures.error(kinds.UTF8_ERROR, path, str(e))
        return

    result = sanitize(text)
    if not result.ok:
        report.failures.error(kinds.XML_PARSE_ERROR, path, result.reason)
        return
    report.xml[path] = result.text


def process_pack(source, destination=None, *, copy_other_files=True, xml_extensions=(".xml",)):
    """
    Filter every XML entry of a pack and optionally write the cleaned pack.

    Per-entry problems never stop processing; they are collected in the
    report's failures. An XML entry that fails to decode or parse is left out
    of the output rather than written unfiltered.

    Args:
        source: Pack directory or .zip archive
        destination: Output directory, output .zip path, or None to only report
        copy_other_files: Pass non-XML entries through unchanged when True,
            otherwise skip them with a warning
        xml_extensions: Extensions (lowercase, with dot) treated as XML

    Returns:
        PackReport

    Raises:
        FileNotFoundError, ValueError: from read_pack_entries
    """
    xml_extensions = tuple(ext.lower() for ext in xml_extensions)
    report = PackReport()
    seen_paths = set()
    seen_dirs = set()

    for entry in read_pack_entries(source):
        if not is_safe_entry_path(entry.path):
            report.failures.warn(kinds.UNSAFE_PATH, entry.path)
            continue
        path = normalize_entry_path(entry.path)
        if path in seen_paths:
            report.failures.error(kinds.DUPLICATE_FILE, path)
            continue
        parents = parent_dirs(path)
        # a file and a directory of the same name cannot both be written
        if path in seen_dirs or any(p in seen_paths for p in parents):
            report.failures.error(kinds.PATH_CONFLICT, path)
            continue
        seen_paths.add(path)
        seen_dirs.update(parents)

        extension = os.path.splitext(path)[1].lower()
        if not extension:
            report.failures.warn(kinds.EXTENSION_LESS_FILE, path)
        elif extension in xml_extensions:
            _filter_entry(path, entry, report)
        elif copy_other_files:
            report.other[path] = entry.data
        else:
            report.failures.warn(kinds.SKIPPED_FILE, path)

    if destination is not None:
        write_pack(destination, report.output_files())

    return report
