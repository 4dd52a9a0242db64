"""Domain models for deployment configuration and execution plans."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_HELM_BIN = "helm"
SUPPORTED_SCHEMA_VERSION = "v2"
MANIFEST_FILE_NAME = "manifest.yaml"


def _none_as_empty(value: Any) -> Any:
    return [] if value is None else value


class Deployment(BaseModel):
    """A single named variant of the chart."""

    name: str = Field(..., description="Deployment name, used in the output path")
    enabled: bool | None = Field(
        default=None, description="Activate/deactivate this deployment"
    )
    release_name: str | None = Field(
        default=None, description="Override of the document release name"
    )
    additional_options: list[str] = Field(
        default_factory=list, description="Options appended to the top level ones"
    )
    values: list[Path] = Field(
        default_factory=list, description="Value files appended to the top level ones"
    )

    @field_validator("additional_options", "values", mode="before")
    @classmethod
    def null_lists_as_empty(cls, value: Any) -> Any:
        return _none_as_empty(value)

    @property
    def disabled(self) -> bool:
        return self.enabled is False


class Config(BaseModel):
    """A configuration document describing a chart and its deployments."""

    version: str = Field(..., description="Schema version")
    helm_version: str | None = Field(
        default=None, description="Helm version constraint (not enforced)"
    )
    enabled: bool | None = Field(
        default=None, description="Activate/deactivate the whole document"
    )
    chart: Path = Field(..., description="Chart to render")
    namespace: str | None = Field(default=None, description="Value for --namespace")
    release_name: str = Field(..., description="Release name passed to helm template")
    output_path: Path = Field(..., description="Base directory for rendered output")
    additional_options: list[str] = Field(
        default_factory=list, description="Raw options passed to helm template"
    )
    values: list[Path] = Field(
        default_factory=list, description="Value files passed via --values"
    )
    deployments: list[Deployment] = Field(
        default_factory=list, description="Deployments to render"
    )
    base_dir: Path | None = Field(
        default=None,
        exclude=True,
        description="Directory relative paths are resolved against",
    )

    @field_validator("additional_options", "values", "deployments", mode="before")
    @classmethod
    def null_lists_as_empty(cls, value: Any) -> Any:
        return _none_as_empty(value)

    @property
    def disabled(self) -> bool:
        return self.enabled is False

    def resolve(self, path: Path) -> Path:
        """Resolve ``path`` against the document's base directory."""
        if self.base_dir is None or path.is_absolute():
            return path
        return self.base_dir / path


class CliOverrides(BaseModel):
    """Options given on the command line, applied to every deployment."""

    additional_options: list[str] = Field(default_factory=list)
    update_dependencies: bool = False
    filter: str | None = None
    pipe: list[str] = Field(default_factory=list)
    helm_bin: str = DEFAULT_HELM_BIN


class RenderCommand(BaseModel):
    """One ``helm template`` invocation and where its output goes."""

    output_path: Path
    args: list[str]

    @property
    def command_line(self) -> str:
        return " ".join(self.args)


class ExecutionPlan(BaseModel):
    """Commands compiled from one configuration document.

    ``pre_commands`` keeps insertion order and is executed in that order.
    ``commands`` is keyed by deployment name; callers must not rely on
    the order in which deployments are rendered.
    """

    skip: bool = False
    pre_commands: dict[str, list[str]] = Field(default_factory=dict)
    commands: dict[str, RenderCommand] = Field(default_factory=dict)
    working_dir: Path | None = None
