"""Unit tests for core models and configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from apkpack.core.config import BuildEnvironment, Config
from apkpack.core.exceptions import BuildActionError, ConfigurationError, ManifestNotFoundError
from apkpack.models.actions import InvocationKind, PackagingInvocation
from apkpack.models.app import AppConfig, CertificateSet, ModuleProperties


class TestAppModels:
    """Tests for app configuration models."""

    def test_app_config_is_frozen(self):
        cfg = AppConfig(aaptflags=("-z",))

        with pytest.raises(ValidationError):
            cfg.aaptflags = ("--other",)
        assert isinstance(cfg.aaptflags, tuple)

    def test_default_manifest(self):
        assert ModuleProperties(name="Foo").manifest_file == "AndroidManifest.xml"
        assert ModuleProperties(name="Foo", manifest="src/M.xml").manifest_file == "src/M.xml"

    def test_certificate_order(self):
        certs = CertificateSet(primary="p", additional=("a", "b"))
        assert certs.all == ["p", "a", "b"]

    def test_invocation_render(self):
        invocation = PackagingInvocation(
            kind=InvocationKind.APP_PACKAGE, flags=("-z", "-M AndroidManifest.xml")
        )
        assert invocation.render() == "-z -M AndroidManifest.xml"


class TestConfig:
    """Tests for configuration."""

    def test_default_certificate(self):
        assert BuildEnvironment().default_certificate == "build/target/product/security/testkey"
        assert BuildEnvironment(default_app_certificate="k/dev").default_certificate == "k/dev"

    def test_overlay_roots_are_anchored(self):
        env = BuildEnvironment(source_root=Path("/src"), resource_overlays=[Path("device/overlay")])
        assert env.overlay_roots() == [Path("/src/device/overlay")]

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("APKPACK_PLATFORM_SDK_VERSION", "30")
        monkeypatch.setenv("APKPACK_RESOURCE_OVERLAYS", "device/a:vendor/b")
        monkeypatch.setenv("APKPACK_FAIL_FAST", "false")

        cfg = Config.from_env()

        assert cfg.environment.platform_sdk_version == "30"
        assert cfg.environment.resource_overlays == [Path("device/a"), Path("vendor/b")]
        assert not cfg.walker.fail_fast


class TestExceptions:
    """Tests for exception formatting."""

    def test_configuration_error(self):
        err = ConfigurationError(message="bad", module_name="Foo", property_name="asset_dirs")
        assert str(err) == "Configuration error in 'Foo.asset_dirs': bad"

    def test_build_action_error(self):
        cause = ManifestNotFoundError(message="m", module_name="Foo", manifest_path="x.xml")
        err = BuildActionError(message=str(cause), module_name="Foo", state="init", cause=cause)

        assert str(err).startswith("[Foo] build actions failed after state 'init'")
        assert "x.xml" in str(err)
