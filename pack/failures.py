"""Warning and error records collected while a pack is processed.

Key classes: PackFailure, PackFailures
"""
from dataclasses import dataclass, field
from typing import List

# Warning kinds
EXTENSION_LESS_FILE = "ExtensionLessFile"
SKIPPED_FILE = "SkippedFile"
UNSAFE_PATH = "UnsafePath"

# Error kinds
UTF8_ERROR = "Utf8Error"
XML_PARSE_ERROR = "XmlParseError"
DUPLICATE_FILE = "DuplicateFile"
PATH_CONFLICT = "PathConflict"


@dataclass(frozen=True)
class PackFailure:
    kind: str
    path: str
    message: str = ""

    def __str__(self):
        if self.message:
            return f"{self.kind}: {self.path}: {self.message}"
        return f"{self.kind}: {self.path}"


@dataclass
class PackFailures:
    """Warnings do not affect the output; errors mean an entry was dropped."""
    warnings: List[PackFailure] = field(default_factory=list)
    errors: List[PackFailure] = field(default_factory=list)

    def warn(self, kind, path, message=""):
        self.warnings.append(PackFailure(kind, path, message))

    def error(self, kind, path, message=""):
        self.errors.append(PackFailure(kind, path, message))

    def kinds(self):
        """Return the kinds of all recorded failures, warnings first."""
        return [f.kind for f in self.warnings] + [f.kind for f in self.errors]
