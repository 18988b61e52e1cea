"""
Android app module.

Sequences directory resolution, input collection, include flags, flag
assembly and certificate resolution into the packaging invocations for one
app: an optional resource compile, an optional export package and the
signed app package.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.exceptions import ApkPackError, BuildActionError, ManifestNotFoundError
from ..core.logging import get_logger, module_context
from ..core.types import ActionState
from ..models.actions import BuildActions, InstallDeclaration, InvocationKind, PackagingInvocation
from ..models.app import AppConfig, DirectoryCategory, ModuleProperties
from .certificates import resolve_certificates
from .classpath import FRAMEWORK_RES, resolve_dep_flags
from .context import ModuleContext
from .deps import collect_deps
from .directories import resolve_directories
from .flags import assemble_flags, with_product_flag

logger = get_logger(__name__)

STANDARD_SDK_VERSIONS = ("current", "system_current", "")


@dataclass
class AaptFlags:
    """Base flags, rebuild inputs and the resource gate for one app."""

    flags: tuple[str, ...]
    deps: list[Path]
    has_resources: bool


class AndroidApp:
    """An app module: packages resources, assets and code into a signed APK."""

    def __init__(self, properties: ModuleProperties, app: AppConfig) -> None:
        self.properties = properties
        self.app = app
        self._export_package: Path | None = None
        self.actions: BuildActions | None = None

    @property
    def name(self) -> str:
        return self.properties.name

    def dependencies(self) -> list[str]:
        """Names of the modules this app depends on, in declaration order.

        Apps built against the platform pull in framework-res; apps built
        against a numbered SDK use that SDK's prebuilt android.jar instead.
        A name listed more than once is kept at its first position.
        """
        deps: list[str] = []
        if not self.properties.no_standard_libraries:
            sdk_version = self.properties.sdk_version
            if sdk_version in STANDARD_SDK_VERSIONS:
                deps.append(FRAMEWORK_RES)
            else:
                deps.append(f"sdk_v{sdk_version}")
        deps.extend(self.properties.libs)
        return list(dict.fromkeys(deps))

    def exported_resource_package(self) -> Path | None:
        """The published package-export.apk, once actions were generated."""
        return self._export_package

    def aapt_flags(self, ctx: ModuleContext) -> AaptFlags:
        """Resolve the base aapt flags and every file that must retrigger aapt."""
        env = ctx.env
        asset_dirs = resolve_directories(
            DirectoryCategory.ASSETS,
            self.app.asset_dirs,
            ctx.module_dir,
            module_name=self.name,
        )
        resource_dirs = resolve_directories(
            DirectoryCategory.RESOURCES,
            self.app.android_resource_dirs,
            ctx.module_dir,
            overlay_roots=env.overlay_roots(),
            source_root=env.source_root,
            module_name=self.name,
        )

        resource_files, has_resources = collect_deps(resource_dirs.paths)
        asset_files, _ = collect_deps(asset_dirs.paths)
        deps = resource_files + asset_files

        manifest_path = ctx.module_dir / self.properties.manifest_file
        if not manifest_path.is_file():
            raise ManifestNotFoundError(
                message="manifest not found",
                module_name=self.name,
                manifest_path=str(manifest_path),
            )
        deps.append(manifest_path)

        dep_flags, dep_files = resolve_dep_flags(ctx.direct_deps)
        deps.extend(dep_files)

        flags = assemble_flags(
            self.app,
            {DirectoryCategory.ASSETS: asset_dirs, DirectoryCategory.RESOURCES: resource_dirs},
            manifest_path,
            dep_flags,
            self.properties.sdk_version,
            env,
        )
        return AaptFlags(flags, deps, has_resources)

    def generate_build_actions(self, ctx: ModuleContext) -> BuildActions:
        """Emit this app's packaging invocations and install declaration.

        Raises:
            BuildActionError: If any step fails. Nothing is published for the
                module in that case.
        """
        with module_context(self.name):
            states = [ActionState.INIT]
            try:
                actions = self._emit(ctx, states)
            except ApkPackError as e:
                logger.error("build_actions_failed", state=states[-1].value, error=str(e))
                raise BuildActionError(
                    message=str(e),
                    module_name=self.name,
                    state=states[-1].value,
                    cause=e,
                ) from e

        self._export_package = actions.export_package
        self.actions = actions
        return actions

    def _emit(self, ctx: ModuleContext, states: list[ActionState]) -> BuildActions:
        env = ctx.env
        out = ctx.intermediates_dir
        aapt = self.aapt_flags(ctx)
        states.append(ActionState.FLAGS_COMPUTED)
        logger.debug("aapt_flags", flags=list(aapt.flags), inputs=len(aapt.deps))

        actions = BuildActions(module_name=self.name)
        inputs = tuple(aapt.deps)

        if aapt.has_resources:
            states.append(ActionState.RESOURCES_PRESENT)
            public_resources = out / "public_resources.xml"
            proguard_options = out / "proguard.options"
            java_file_list = out / "java_files.list"
            actions.invocations.append(
                PackagingInvocation(
                    kind=InvocationKind.RESOURCE_COMPILE,
                    flags=tuple(aapt.flags),
                    inputs=inputs,
                    outputs=(public_resources, proguard_options, java_file_list),
                )
            )
            actions.extra_src_lists.append(java_file_list)

            if self.app.export_package_resources:
                export_package = out / "package-export.apk"
                actions.invocations.append(
                    PackagingInvocation(
                        kind=InvocationKind.EXPORT_PACKAGE,
                        flags=tuple(with_product_flag(aapt.flags, env.product_aapt_characteristics)),
                        inputs=inputs,
                        outputs=(export_package,),
                    )
                )
                actions.export_package = export_package
                actions.checkbuild_files.append(export_package)
                states.append(ActionState.EXPORT_PACKAGE)

            actions.checkbuild_files += [public_resources, proguard_options, java_file_list]
        else:
            states.append(ActionState.NO_RESOURCES)
            logger.debug("no_resources", module_dir=str(ctx.module_dir))

        certificates = resolve_certificates(
            self.app.certificate,
            self.app.additional_certificates,
            env.default_certificate,
            env.default_app_certificate_dir,
            str(ctx.module_dir),
        )
        output_file = out / f"{self.name}.apk"
        actions.invocations.append(
            PackagingInvocation(
                kind=InvocationKind.APP_PACKAGE,
                flags=tuple(with_product_flag(aapt.flags, env.product_aapt_characteristics)),
                inputs=inputs,
                outputs=(output_file,),
                certificates=certificates,
            )
        )
        actions.output_file = output_file
        states.append(ActionState.MAIN_PACKAGE_BUILT)

        actions.install = InstallDeclaration(
            source=output_file,
            destination=env.install_dir / "app" / f"{self.name}.apk",
        )
        states.append(ActionState.INSTALLED)
        actions.states = list(states)

        logger.info(
            "build_actions_generated",
            invocations=[i.kind.value for i in actions.invocations],
            certificate=certificates.primary,
        )
        return actions
