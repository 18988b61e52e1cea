"""
Module declaration file format.

A declaration file is JSON: ``{"modules": [...]}``, where each entry's
``type`` selects the module kind.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ConfigurationError
from ..models.app import AppConfig, ModuleProperties


class _Declaration(BaseModel):
    name: str
    dir: str = Field(default=".")
    libs: list[str] = Field(default_factory=list)

    model_config = {"extra": "forbid"}


class AndroidAppDeclaration(_Declaration):
    """An ``android_app`` entry."""

    type: Literal["android_app"]
    sdk_version: str = ""
    manifest: str | None = None
    no_standard_libraries: bool = False

    certificate: str = ""
    additional_certificates: list[str] = Field(default_factory=list)
    export_package_resources: bool = False
    aaptflags: list[str] = Field(default_factory=list)
    package_splits: list[str] = Field(default_factory=list)
    asset_dirs: list[str] = Field(default_factory=list)
    android_resource_dirs: list[str] = Field(default_factory=list)

    def module_properties(self) -> ModuleProperties:
        return ModuleProperties(
            name=self.name,
            dir=self.dir,
            sdk_version=self.sdk_version,
            manifest=self.manifest,
            no_standard_libraries=self.no_standard_libraries,
            libs=tuple(self.libs),
        )

    def app_config(self) -> AppConfig:
        return AppConfig(
            certificate=self.certificate,
            additional_certificates=tuple(self.additional_certificates),
            export_package_resources=self.export_package_resources,
            aaptflags=tuple(self.aaptflags),
            package_splits=tuple(self.package_splits),
            asset_dirs=tuple(self.asset_dirs),
            android_resource_dirs=tuple(self.android_resource_dirs),
        )


class SdkPrebuiltDeclaration(_Declaration):
    """An ``sdk_prebuilt`` entry: prebuilt SDK jars, relative to ``dir``."""

    type: Literal["sdk_prebuilt"]
    jars: list[str] = Field(default_factory=lambda: ["android.jar"])


class JavaLibraryDeclaration(_Declaration):
    """A ``java_library`` entry; compiled elsewhere, ignored by packaging."""

    type: Literal["java_library"]


ModuleDeclaration = Annotated[
    Union[AndroidAppDeclaration, SdkPrebuiltDeclaration, JavaLibraryDeclaration],
    Field(discriminator="type"),
]


class DeclarationFile(BaseModel):
    """Top-level declaration document."""

    modules: list[ModuleDeclaration] = Field(default_factory=list)


def load_declarations(path: Path) -> DeclarationFile:
    """Parse a declaration file.

    Raises:
        ConfigurationError: If the file is missing or malformed.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(message=f"cannot read declarations: {path}", cause=e) from e

    try:
        return DeclarationFile.model_validate_json(content)
    except PydanticValidationError as e:
        raise ConfigurationError(
            message=f"invalid declarations in {path}",
            context={"errors": e.error_count()},
            cause=e,
        ) from e
