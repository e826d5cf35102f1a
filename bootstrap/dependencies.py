"""Dependency checks run before the filter pipeline is imported.

Key functions: ensure_module, run_runtime_checks
"""
from .primary_imports import importlib, subprocess, sys

# (import name, pip distribution) pairs the pipeline cannot start without
REQUIRED_MODULES = [("lxml.etree", "lxml")]
if sys.version_info < (3, 11):
    REQUIRED_MODULES.append(("tomli", "tomli"))


def _importable(module_name):
    try:
        importlib.import_module(module_name)
    except ImportError:
        return False
    return True


def _pip_install(package_name):
    """Install package_name into the running interpreter. Returns True on success."""
    result = subprocess.run([sys.executable, "-m", "pip", "install", package_name])
    return result.returncode == 0


def ensure_module(module_name, package_name=None):
    """Import module_name, pip-installing package_name first if needed. Returns True if importable."""
    if _importable(module_name):
        return True

    package_name = package_name or module_name.split(".")[0]
    print(f"Module {module_name} not found. Installing {package_name}...")
    if not _pip_install(package_name):
        print(f"ERROR: Failed to install {package_name}.")
        return False

    importlib.invalidate_caches()
    if not _importable(module_name):
        print(f"ERROR: {module_name} still cannot be imported after installing {package_name}.")
        return False
    print(f"Successfully installed {package_name}.")
    return True


def run_runtime_checks():
    """Verify every REQUIRED_MODULES entry can be imported. Exit if any cannot."""
    missing = [package for module, package in REQUIRED_MODULES if not ensure_module(module, package)]
    if missing:
        print("ERROR: Not all required modules could be installed. Please install them manually.")
        print(f"Required packages: {', '.join(missing)}")
        sys.exit(1)
