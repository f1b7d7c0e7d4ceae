"""Static registry of feature types and the files each one scaffolds.

The catalog is built once at import time and exposed as a read-only mapping.
Each ``FileTemplate`` pairs a path pattern with a content pattern; both may
contain the placeholder tokens ``{name}``, ``{Name}`` and ``{ticket_id}``.
The catalog itself performs no substitution.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field

from .errors import UnknownFeatureTypeError
from .templates import TemplateLoader


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class FileTemplate(BaseModel):
    """One generated file: a path pattern and its content pattern."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Output path pattern, relative to the output directory")
    content: str = Field(..., description="Content pattern (multi-line text)")
    source: str = Field(default="", description="Template file the content was read from")


class FeatureTypeDefinition(BaseModel):
    """A named feature type and its ordered file templates."""

    model_config = ConfigDict(frozen=True)

    key: str
    description: str = ""
    files: tuple[FileTemplate, ...] = ()


# ---------------------------------------------------------------------------
# Catalog layout: (path pattern, template name) per feature type
# ---------------------------------------------------------------------------

_API_FILES: tuple[tuple[str, str], ...] = (
    ("src/routes/{name}.js", "api/routes.js.tmpl"),
    ("src/controllers/{name}Controller.js", "api/controller.js.tmpl"),
    ("src/services/{name}Service.js", "api/service.js.tmpl"),
    ("tests/{name}.test.js", "api/test.js.tmpl"),
)

_UI_FILES: tuple[tuple[str, str], ...] = (
    ("src/components/{Name}/{Name}.jsx", "ui/component.jsx.tmpl"),
    ("src/components/{Name}/{Name}.css", "ui/component.css.tmpl"),
    ("src/components/{Name}/index.js", "ui/index.js.tmpl"),
    ("src/components/{Name}/{Name}.test.jsx", "ui/component.test.jsx.tmpl"),
)

# Authenticated routes and enveloped controller responses; service and tests
# are shared with the plain api type.
_API_SECURE_FILES: tuple[tuple[str, str], ...] = (
    ("src/routes/{name}.js", "api-secure/routes.js.tmpl"),
    ("src/controllers/{name}Controller.js", "api-secure/controller.js.tmpl"),
    ("src/services/{name}Service.js", "api/service.js.tmpl"),
    ("tests/{name}.test.js", "api/test.js.tmpl"),
)

_LAYOUT: dict[str, tuple[str, tuple[tuple[str, str], ...]]] = {
    "api": ("Express route, controller, service and supertest suite", _API_FILES),
    "ui": ("React component with stylesheet, index and test", _UI_FILES),
    "api-secure": ("Authenticated Express API with response envelopes", _API_SECURE_FILES),
}


def _build_catalog(
    loader: TemplateLoader | None = None,
) -> Mapping[str, FeatureTypeDefinition]:
    loader = loader or TemplateLoader()
    catalog: dict[str, FeatureTypeDefinition] = {}
    for key, (description, entries) in _LAYOUT.items():
        files = tuple(
            FileTemplate(path=path, content=loader.source(name), source=name)
            for path, name in entries
        )
        catalog[key] = FeatureTypeDefinition(key=key, description=description, files=files)
    return MappingProxyType(catalog)


FEATURE_TYPES: Mapping[str, FeatureTypeDefinition] = _build_catalog()


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


def available_types() -> list[str]:
    """Return the registered feature type keys in registration order."""
    return list(FEATURE_TYPES)


def lookup(feature_type: str) -> FeatureTypeDefinition:
    """Return the definition for *feature_type*.

    Raises:
        UnknownFeatureTypeError: If the key is not registered. The error
            carries the list of valid keys.
    """
    try:
        return FEATURE_TYPES[feature_type]
    except KeyError:
        raise UnknownFeatureTypeError(feature_type, available_types()) from None
