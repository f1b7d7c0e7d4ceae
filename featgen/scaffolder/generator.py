"""Feature scaffolding engine.

Takes a feature type, a feature name and a ticket id, resolves the
placeholder tokens in every path and content pattern of the catalog entry,
and writes the resulting files under an output directory.

Substitution is literal: ``{name}``, ``{Name}`` and ``{ticket_id}`` are
replaced wherever they occur, in a single left-to-right pass, so replacement
values are never rescanned.  Any other ``{...}`` text is left untouched.
Existing files are always overwritten; running twice with the same
arguments produces byte-identical output.

Generation is sequential and unsynchronised.  Two concurrent runs that
target overlapping paths race each other; callers must not do that.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from pydantic import BaseModel, Field

from ..utils import console, ensure_dir, print_success
from .catalog import FeatureTypeDefinition, lookup
from .errors import FilesystemWriteError, PathOutsideOutputError


DEFAULT_OUTPUT_DIR = Path("./output")

PLACEHOLDER_TOKENS: tuple[str, ...] = ("{name}", "{Name}", "{ticket_id}")


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class PlannedFile(BaseModel):
    """A fully resolved file that has not been written yet."""

    relative_path: str = Field(..., description="Resolved path pattern, relative to the output dir")
    path: Path = Field(..., description="Output path joined onto the output dir")
    content: str = Field(default="")
    source: str = Field(default="", description="Catalog template the file came from")


class GenerationReport(BaseModel):
    """Outcome of one generation run.

    ``files`` lists written paths in catalog order.  When a write fails the
    report attached to the ``FilesystemWriteError`` holds only the files
    written before the failure.
    """

    feature_type: str
    name: str
    ticket_id: str
    output_dir: Path
    files: list[Path] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.files)


# ---------------------------------------------------------------------------
# Placeholder handling
# ---------------------------------------------------------------------------


def capitalize_ascii(value: str) -> str:
    """Upper-case the first character if it is an ASCII letter.

    The rest of the string is left as is.  Non-ASCII first characters are
    not touched.
    """
    if value and "a" <= value[0] <= "z":
        return value[0].upper() + value[1:]
    return value


def build_placeholders(name: str, ticket_id: str) -> dict[str, str]:
    """Build the token -> replacement mapping for one generation run.

    Examples::

        build_placeholders("USER-management", "T-1")
        -> {"{name}": "user-management", "{Name}": "User-management", "{ticket_id}": "T-1"}
    """
    lowered = name.lower()
    return {
        "{name}": lowered,
        "{Name}": capitalize_ascii(lowered),
        "{ticket_id}": ticket_id,
    }


def substitute(pattern: str, placeholders: dict[str, str]) -> str:
    """Replace every occurrence of every token in *pattern*.

    Tokens not present in *placeholders* stay verbatim.
    """
    if not placeholders:
        return pattern
    # Longest first so a token that is a prefix of another cannot shadow it.
    tokens = sorted(placeholders, key=len, reverse=True)
    regex = re.compile("|".join(re.escape(token) for token in tokens))
    return regex.sub(lambda match: placeholders[match.group(0)], pattern)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class FeatureGenerator:
    """Generates the files for one feature.

    The feature type is validated on construction, so an unknown type fails
    before anything touches the filesystem.

    Usage::

        generator = FeatureGenerator("api", "user-management", "PROJ-123")
        report = generator.generate("./output")
    """

    def __init__(self, feature_type: str, name: str, ticket_id: str) -> None:
        self.definition: FeatureTypeDefinition = lookup(feature_type)
        self.feature_type = feature_type
        self.name = name
        self.ticket_id = ticket_id
        self.placeholders = build_placeholders(name, ticket_id)

    # -- Public API --------------------------------------------------------

    def plan(self, output_dir: str | Path = DEFAULT_OUTPUT_DIR) -> list[PlannedFile]:
        """Resolve every file of the feature type without writing anything.

        Raises:
            PathOutsideOutputError: If a resolved path would land outside
                *output_dir*.
        """
        root = Path(output_dir)
        planned: list[PlannedFile] = []
        for template in self.definition.files:
            relative = substitute(template.path, self.placeholders)
            target = _resolve_within(root, relative)
            planned.append(
                PlannedFile(
                    relative_path=relative,
                    path=target,
                    content=substitute(template.content, self.placeholders),
                    source=template.source,
                )
            )
        return planned

    def generate(self, output_dir: str | Path = DEFAULT_OUTPUT_DIR) -> GenerationReport:
        """Write every file of the feature type under *output_dir*.

        Returns:
            A ``GenerationReport`` listing the written paths in catalog order.

        Raises:
            PathOutsideOutputError: Before any write, if a resolved path
                escapes *output_dir*.
            FilesystemWriteError: On the first directory or file that cannot
                be written.  Files written earlier stay on disk and are listed
                in the error's ``report``.
        """
        planned = self.plan(output_dir)
        report = GenerationReport(
            feature_type=self.feature_type,
            name=self.name,
            ticket_id=self.ticket_id,
            output_dir=Path(output_dir),
        )

        try:
            ensure_dir(output_dir)
        except (OSError, ValueError) as exc:
            raise FilesystemWriteError(Path(output_dir), exc, report) from exc

        for item in planned:
            try:
                _write_file(item.path, item.content)
            except (OSError, ValueError) as exc:
                raise FilesystemWriteError(item.path, exc, report) from exc
            report.files.append(item.path)
            print_success(f"Created: {item.path}")

        console.print()
        print_success(
            f"Generated {report.count} files for {self.feature_type} feature: {self.name}"
        )
        return report


def generate(
    feature_type: str,
    name: str,
    ticket_id: str,
    output_dir: str | Path = DEFAULT_OUTPUT_DIR,
) -> GenerationReport:
    """Shortcut for ``FeatureGenerator(feature_type, name, ticket_id).generate(output_dir)``."""
    return FeatureGenerator(feature_type, name, ticket_id).generate(output_dir)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _resolve_within(root: Path, relative: str) -> Path:
    """Join *relative* onto *root*, rejecting results outside *root*."""
    base = Path(os.path.normpath(root))
    target = Path(os.path.normpath(root / relative))
    if target != base and base not in target.parents:
        raise PathOutsideOutputError(target, root)
    return target


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content.

    Content is encoded before the file is opened, so an unencodable name
    fails without leaving an empty file behind.
    """
    data = content.encode("utf-8")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
