"""Delayed imports: modules requiring runtime dependency checks.

Loaded after run_runtime_checks(). Includes: lxml.etree.
Stdlib (os, zipfile, etc.) come from primary_imports.
"""
# ruff: noqa: F401 - re-exports for other modules
from lxml import etree as ET
