"""Unit tests for aapt flag assembly."""

from pathlib import Path

import pytest

from apkpack.core.config import BuildEnvironment
from apkpack.models.app import (
    AppConfig,
    DirectoryCategory,
    DirectoryEntry,
    Provenance,
    ResolvedDirectorySet,
)
from apkpack.packaging.flags import assemble_flags, has_flag, with_product_flag


@pytest.fixture
def platform():
    return BuildEnvironment(
        platform_sdk_version="25",
        platform_version="7.1",
        build_number="4242",
        product_aapt_characteristics="tablet",
    )


@pytest.fixture
def dirs():
    return {
        DirectoryCategory.ASSETS: ResolvedDirectorySet(
            category=DirectoryCategory.ASSETS,
            entries=(DirectoryEntry(path=Path("app/assets"), provenance=Provenance.DEFAULT),),
        ),
        DirectoryCategory.RESOURCES: ResolvedDirectorySet(
            category=DirectoryCategory.RESOURCES,
            entries=(
                DirectoryEntry(path=Path("overlay/app/res"), provenance=Provenance.OVERLAY),
                DirectoryEntry(path=Path("app/res"), provenance=Provenance.DEFAULT),
            ),
        ),
    }


def assemble(cfg, dirs, platform, sdk_version="", dep_flags=("-I sdk/android.jar",)):
    return assemble_flags(
        cfg, dirs, Path("app/AndroidManifest.xml"), list(dep_flags), sdk_version, platform
    )


class TestAssembleFlags:
    """Tests for the base flag sequence."""

    def test_full_sequence(self, dirs, platform):
        flags = assemble(AppConfig(aaptflags=("--auto-add-overlay",)), dirs, platform)

        assert flags == (
            "--auto-add-overlay",
            "-z",
            "-M app/AndroidManifest.xml",
            "-A app/assets",
            "-S overlay/app/res",
            "-S app/res",
            "-I sdk/android.jar",
            "--min-sdk-version 25",
            "--target-sdk-version 25",
            "--version-code 25",
            "--version-name 7.1-4242",
        )

    def test_declared_sdk_version(self, dirs, platform):
        flags = assemble(AppConfig(), dirs, platform, sdk_version="21")

        assert "--min-sdk-version 21" in flags
        assert "--target-sdk-version 21" in flags
        assert "--version-code 25" in flags

    def test_explicit_version_code_wins(self, dirs, platform):
        flags = assemble(AppConfig(aaptflags=("--version-code 7",)), dirs, platform)

        assert [f for f in flags if f.startswith("--version-code")] == ["--version-code 7"]
        assert "--version-name 7.1-4242" in flags

    def test_explicit_version_name_wins(self, dirs, platform):
        flags = assemble(AppConfig(aaptflags=("--version-name custom",)), dirs, platform)

        assert [f for f in flags if f.startswith("--version-name")] == ["--version-name custom"]
        assert "--version-code 25" in flags

    def test_no_directories(self, platform):
        flags = assemble(AppConfig(), {}, platform, dep_flags=())

        assert not has_flag(flags, "-A ")
        assert not has_flag(flags, "-S ")
        assert flags[:2] == ("-z", "-M app/AndroidManifest.xml")

    def test_deterministic(self, dirs, platform):
        cfg = AppConfig(aaptflags=("--extra-packages com.example",))
        assert assemble(cfg, dirs, platform) == assemble(cfg, dirs, platform)


class TestProductFlag:
    """Tests for the per-invocation --product default."""

    def test_appends_characteristics(self):
        assert with_product_flag(["-z"], "tablet") == ["-z", "--product tablet"]

    def test_explicit_product_wins(self):
        flags = ["--product phone", "-z"]
        assert with_product_flag(flags, "tablet") == flags

    def test_copies_are_isolated(self, dirs, platform):
        base = assemble(AppConfig(), dirs, platform)

        export_flags = with_product_flag(base, "tablet")
        main_flags = with_product_flag(base, "tablet")
        export_flags.append("--extra")

        assert main_flags[-1] == "--product tablet"
        assert "--extra" not in main_flags
        assert len(main_flags) == len(base) + 1
        assert not has_flag(base, "--product")

    def test_scans_are_independent(self):
        base = ["-z"]
        export_flags = with_product_flag(base + ["--product phone"], "tablet")
        main_flags = with_product_flag(base, "tablet")

        assert export_flags.count("--product tablet") == 0
        assert main_flags[-1] == "--product tablet"
