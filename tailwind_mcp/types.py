"""All shared types, enums, and type aliases. Everything imports from here."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tailwind_mcp.exceptions import InvalidInputError


# ── Enums ──────────────────────────────────────────────────────────────

class Framework(str, Enum):
    REACT = "react"
    VUE = "vue"
    SVELTE = "svelte"
    ANGULAR = "angular"

class Optimization(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"


def _dedupe_features(value: list[str]) -> list[str]:
    seen: list[str] = []
    for item in value or []:
        feature = str(item).strip().lower()
        if feature and feature not in seen:
            seen.append(feature)
    return seen


# ── Conversion ─────────────────────────────────────────────────────────

class ConversionOptions(BaseModel):
    """Per-call switches for convert_component. Every field has a default."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    include_types: bool = Field(default=False, alias="includeTypes")
    add_accessibility: bool = Field(default=False, alias="addAccessibility")
    optimize_bundle: bool = Field(default=False, alias="optimizeBundle")
    component_name: str = Field(default="TailwindComponent", alias="componentName")
    ai_enhance: bool = Field(default=True, alias="aiEnhance")

    @field_validator("component_name")
    @classmethod
    def _pascal_case(cls, v: str) -> str:
        parts = [p for p in "".join(c if c.isalnum() else " " for c in v).split() if p]
        name = "".join(p[:1].upper() + p[1:] for p in parts)
        if not name or not name[0].isalpha():
            return "TailwindComponent"
        return name


class ConversionResult(BaseModel):
    """Deterministic code plus enrichment metadata."""
    framework: str
    code: str
    ai_enriched: bool = False
    ai_suggestions: Optional[str] = None
    warnings: list[str] = Field(default_factory=list)


# ── Projects ───────────────────────────────────────────────────────────

class ProjectConfig(BaseModel):
    """Scaffold request for FrameworkAdapter.generate_project."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(min_length=1)
    framework: str
    features: list[str] = Field(default_factory=list)
    build_tool: str = Field(default="vite", alias="buildTool")
    css_framework: str = Field(default="tailwind", alias="cssFramework")

    @field_validator("name")
    @classmethod
    def _non_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("project name must not be blank")
        return v.strip()

    @field_validator("features")
    @classmethod
    def _ordered_set(cls, v: list[str]) -> list[str]:
        return _dedupe_features(v)


class ProjectFile(BaseModel):
    path: str
    content: str


class ProjectStructure(BaseModel):
    files: list[ProjectFile] = Field(min_length=1)

    def paths(self) -> list[str]:
        return [f.path for f in self.files]

    def get(self, path: str) -> Optional[ProjectFile]:
        for f in self.files:
            if f.path == path:
                return f
        return None


# ── Build tools ────────────────────────────────────────────────────────

class BuildToolConfig(BaseModel):
    """Project shape handed to a BuildToolIntegration."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    framework: str
    features: list[str] = Field(default_factory=list)
    output_dir: str = Field(default="dist", alias="outputDir")
    public_dir: str = Field(default="public", alias="publicDir")
    entry_point: str = Field(default="src/main.tsx", alias="entryPoint")
    css_framework: str = Field(default="tailwind", alias="cssFramework")
    optimization: Optimization = Optimization.DEVELOPMENT

    @field_validator("framework", "css_framework")
    @classmethod
    def _lower(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("features")
    @classmethod
    def _ordered_set(cls, v: list[str]) -> list[str]:
        return _dedupe_features(v)


class BuildToolOutput(BaseModel):
    """Serialized config file plus the packages it needs."""
    filename: str
    content: str
    dependencies: dict[str, str] = Field(default_factory=dict)
    files: list[ProjectFile] = Field(default_factory=list)


def coerce_model(model: type[BaseModel], value: Any) -> Any:
    """Validate a caller payload into ``model``; pydantic errors become InvalidInputError."""
    if isinstance(value, model):
        return value
    try:
        return model.model_validate(value or {})
    except ValidationError as e:
        raise InvalidInputError(
            f"Invalid {model.__name__}: {e.error_count()} validation error(s)",
            details={"errors": e.errors(include_url=False)},
        ) from e
