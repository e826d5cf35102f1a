"""Runtime settings: pack paths, entry handling and report options.

All user-editable settings are loaded from settings_user.toml in the script root.
Key globals: PROJECT_ROOT, SOURCE_PATH, DESTINATION_PATH, XML_EXTENSIONS,
COPY_OTHER_FILES, PRINT_WARNINGS.
"""
from bootstrap.primary_imports import os

# Resolved relative to this config module so it works regardless of cwd.
_SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_SCRIPT_DIR)  # config -> project root

# TOML parser: use built-in tomllib (Python 3.11+) or tomli for older Python
try:
    import tomllib
except ImportError:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None


def _normalize_extension(ext):
    """Lowercase an extension and make sure it starts with a dot."""
    ext = str(ext).strip().lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


def _resolve_path(path_str, base):
    """Resolve path: if relative, join with base; if absolute, use as-is. Empty means unset."""
    if not path_str or not isinstance(path_str, str):
        return None
    path_str = path_str.strip()
    if not path_str:
        return None
    if os.path.isabs(path_str):
        return path_str
    return os.path.join(base, path_str)


def _expect(value, kind, key):
    """Raise ValueError unless value is an instance of kind."""
    if not isinstance(value, kind):
        names = kind.__name__ if isinstance(kind, type) else "/".join(k.__name__ for k in kind)
        raise ValueError(
            f"Invalid {key}: {value!r}. Expected a value of type {names}."
        )
    return value


def _load_user_settings(settings_path=None):
    """Load and validate settings from settings_user.toml. Returns merged config dict."""
    defaults = _get_default_settings()

    if settings_path is None:
        settings_path = os.path.join(_PROJECT_ROOT, "settings_user.toml")
    if not os.path.isfile(settings_path):
        return defaults

    if tomllib is None:
        raise ImportError(
            "Cannot load settings_user.toml: no TOML parser available. "
            "Use Python 3.11+ or install: pip install tomli"
        )

    try:
        with open(settings_path, "rb") as f:
            raw = tomllib.load(f)
    except Exception as e:
        raise ValueError(
            f"Error reading {os.path.basename(settings_path)}: {e}\n"
            f"Check the file for syntax errors (e.g. missing quotes, wrong brackets)."
        ) from e

    # Merge paths
    paths = raw.get("paths") or {}
    if isinstance(paths, dict):
        for k in ("source", "destination"):
            if k in paths and paths[k] is not None:
                defaults["paths"][k] = _expect(paths[k], str, f"paths.{k}")

    # Merge pack handling
    pack = raw.get("pack") or {}
    if isinstance(pack, dict):
        if pack.get("xml_extensions") is not None:
            exts = _expect(pack["xml_extensions"], (list, tuple), "pack.xml_extensions")
            exts = [_normalize_extension(x) for x in exts if str(x).strip()]
            if not exts:
                raise ValueError("Invalid pack.xml_extensions: at least one extension is required.")
            defaults["pack"]["xml_extensions"] = exts
        if pack.get("copy_other_files") is not None:
            defaults["pack"]["copy_other_files"] = _expect(
                pack["copy_other_files"], bool, "pack.copy_other_files"
            )

    # Merge output settings
    output = raw.get("output") or {}
    if isinstance(output, dict) and output.get("print_warnings") is not None:
        defaults["output"]["print_warnings"] = _expect(
            output["print_warnings"], bool, "output.print_warnings"
        )

    return defaults


def _get_default_settings():
    """Return default settings."""
    return {
        "paths": {
            "source": "_packs_inputs",
            "destination": "_packs_outputs",
        },
        "pack": {
            "xml_extensions": [".xml"],
            "copy_other_files": True,
        },
        "output": {
            "print_warnings": True,
        },
    }


def _apply_settings(cfg, base=_PROJECT_ROOT):
    """Apply merged config to module globals."""
    paths = cfg["paths"]

    glob = globals()
    glob["PROJECT_ROOT"] = base
    glob["SOURCE_PATH"] = _resolve_path(paths.get("source"), base) or os.path.join(base, "_packs_inputs")
    # An empty destination means "report only"
    glob["DESTINATION_PATH"] = _resolve_path(paths.get("destination"), base)
    glob["XML_EXTENSIONS"] = tuple(cfg["pack"].get("xml_extensions") or [".xml"])
    glob["COPY_OTHER_FILES"] = bool(cfg["pack"].get("copy_other_files", True))
    glob["PRINT_WARNINGS"] = bool(cfg["output"].get("print_warnings", True))


# Load settings on import
_cfg = _load_user_settings()
_apply_settings(_cfg)


if __name__ == "__main__":
    """Quick self-check: print effective settings."""
    print("Effective settings:")
    print("  SOURCE_PATH:", SOURCE_PATH)
    print("  DESTINATION_PATH:", DESTINATION_PATH)
    print("  XML_EXTENSIONS:", XML_EXTENSIONS)
    print("  COPY_OTHER_FILES:", COPY_OTHER_FILES)
    print("  PRINT_WARNINGS:", PRINT_WARNINGS)
