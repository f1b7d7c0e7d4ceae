"""featgen scaffolder -- generates boilerplate files for a single feature.

A feature type ("api", "ui", "api-secure") maps to a fixed list of path and
content patterns.  The generator substitutes ``{name}``, ``{Name}`` and
``{ticket_id}`` throughout both and writes the files under an output
directory.

Quick usage::

    from featgen.scaffolder import FeatureGenerator

    generator = FeatureGenerator("ui", "login-form", "PROJ-456")
    report = generator.generate("./src")
    print(report.count, report.files)
"""

from featgen.scaffolder.catalog import (
    FEATURE_TYPES,
    FeatureTypeDefinition,
    FileTemplate,
    available_types,
    lookup,
)
from featgen.scaffolder.errors import (
    FilesystemWriteError,
    PathOutsideOutputError,
    ScaffoldError,
    UnknownFeatureTypeError,
)
from featgen.scaffolder.generator import (
    FeatureGenerator,
    GenerationReport,
    PlannedFile,
    build_placeholders,
    generate,
    substitute,
)
from featgen.scaffolder.templates import TemplateLoader

__all__ = [
    "FEATURE_TYPES",
    "FeatureGenerator",
    "FeatureTypeDefinition",
    "FileTemplate",
    "FilesystemWriteError",
    "GenerationReport",
    "PathOutsideOutputError",
    "PlannedFile",
    "ScaffoldError",
    "TemplateLoader",
    "UnknownFeatureTypeError",
    "available_types",
    "build_placeholders",
    "generate",
    "lookup",
    "substitute",
]
