"""Test configuration for apkpack."""

import tempfile
from pathlib import Path

import pytest

from apkpack.core.config import BuildEnvironment
from apkpack.packaging.context import ModuleContext

APP_DIR = "packages/apps/Foo"


def write_file(path: Path, content: str = "") -> Path:
    """Create a file and any missing parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests.

    Yields:
        Path: A Path object pointing to the temporary directory.
            The directory is automatically cleaned up after the test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def env(temp_dir):
    """Build environment rooted at the temporary source tree.

    Returns:
        BuildEnvironment: Fixed platform values so flags are predictable.
    """
    return BuildEnvironment(
        platform_sdk_version="25",
        platform_version="7.1",
        build_number="4242",
        product_aapt_characteristics="default",
        source_root=temp_dir,
        out_dir=temp_dir / "out",
        install_dir=temp_dir / "out/system",
    )


@pytest.fixture
def app_dir(temp_dir):
    """Create an app module with a manifest, one resource and one asset.

    Returns:
        Path: The module directory.
    """
    module_dir = temp_dir / APP_DIR
    write_file(module_dir / "AndroidManifest.xml", '<manifest package="com.example.foo"/>')
    write_file(module_dir / "res/values/strings.xml", "<resources/>")
    write_file(module_dir / "assets/data.txt", "data")
    return module_dir


@pytest.fixture
def make_context(env, temp_dir):
    """Factory for module contexts inside the temporary tree.

    Returns:
        Callable: Builds a ModuleContext for a module name, directory and deps.
    """

    def _make(name="Foo", directory=APP_DIR, deps=()):
        return ModuleContext(
            name=name,
            module_dir=temp_dir / directory,
            env=env,
            intermediates_dir=temp_dir / "out" / name,
            direct_deps=tuple(deps),
        )

    return _make
