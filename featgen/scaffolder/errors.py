"""Exceptions raised by the feature scaffolder."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .generator import GenerationReport


class ScaffoldError(Exception):
    """Base class for every error the scaffolder raises."""


class UnknownFeatureTypeError(ScaffoldError):
    """Raised when a feature type is not registered in the catalog."""

    def __init__(self, feature_type: str, available: list[str]):
        self.feature_type = feature_type
        self.available = list(available)
        super().__init__(
            f"Unknown feature type: {feature_type}. "
            f"Available types: {', '.join(self.available)}"
        )


class PathOutsideOutputError(ScaffoldError):
    """Raised when a resolved file path would escape the output directory."""

    def __init__(self, path: Path, output_dir: Path):
        self.path = Path(path)
        self.output_dir = Path(output_dir)
        super().__init__(
            f"Resolved path {self.path} is outside the output directory {self.output_dir}"
        )


class FilesystemWriteError(ScaffoldError):
    """Raised when creating a directory or writing a file fails mid-batch.

    ``cause`` is the underlying ``OSError``, or the ``ValueError`` raised for
    a path or content that cannot be encoded (e.g. an embedded NUL byte).

    ``report`` holds the files that were written before the failure; they are
    left on disk.
    """

    def __init__(self, path: Path, cause: OSError | ValueError, report: GenerationReport):
        self.path = Path(path)
        self.cause = cause
        self.report = report
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"Failed to write {self.path}: {reason}")
