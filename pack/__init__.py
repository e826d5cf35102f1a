"""Pack processing: filter every XML file of a directory or zip archive.

Sources: read_pack_entries, PackEntry
Processor: process_pack, PackReport
Failures: PackFailure, PackFailures
Output: write_pack
"""
from .sources import PackEntry, read_pack_entries
from .failures import PackFailure, PackFailures
from .output import write_pack
from .processor import PackReport, process_pack

__all__ = [
    'PackEntry',
    'read_pack_entries',
    'PackFailure',
    'PackFailures',
    'write_pack',
    'PackReport',
    'process_pack',
]
