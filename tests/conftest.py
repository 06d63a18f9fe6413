"""
Pytest configuration and shared fixtures.

Provides an isolated config environment, sample value object types, and a
helper for writing importable target modules used by the CLI tests.
"""

import sys
import textwrap
from pathlib import Path

import pytest

from vohydrator.core.config import clear_cache
from vohydrator.core.values import (
    CollectionValueObject,
    CompositeValueObject,
    EnumValueObject,
    Page,
    PerPage,
    Positive,
    SearchTerm,
)


class Flavor(EnumValueObject):
    """String-backed enum used across the test suite."""

    FIZ = "fiz"
    BIZ = "biz"


class Flavors(CollectionValueObject):
    item_type = Flavor
    minimum_size = 0
    maximum_size = 3


class Search(CompositeValueObject):
    term: SearchTerm
    limit: Positive | None
    per_page: PerPage
    page: Page
    biz: bool = False


# ==============================================================================
# Environment Fixtures
# ==============================================================================


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """
    Keep every test away from the real user/project config.

    Points XDG_CONFIG_HOME into tmp_path, runs in a fresh project directory,
    drops VOHYDRATOR_* variables and clears the config cache.
    """
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for name in ("VOHYDRATOR_MAX_DEPTH", "VOHYDRATOR_NULL_AS_MISSING", "VOHYDRATOR_LOG_LEVEL"):
        # Registered via setenv first so values written straight to os.environ
        # (e.g. by load_layered_env) are removed again on teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

    clear_cache()
    yield project
    clear_cache()


@pytest.fixture
def user_config_dir(tmp_path: Path) -> Path:
    """Provide the temporary XDG_CONFIG_HOME/vohydrator directory."""
    config_dir = tmp_path / "config" / "vohydrator"
    config_dir.mkdir(parents=True)
    return config_dir


# ==============================================================================
# Sample Types
# ==============================================================================


@pytest.fixture
def flavor() -> type[Flavor]:
    return Flavor


@pytest.fixture
def flavors() -> type[Flavors]:
    return Flavors


@pytest.fixture
def search() -> type[Search]:
    return Search


@pytest.fixture
def target_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """
    Write an importable module of value object types and return its name.

    Usage:
        name = target_module('''
            class Point(CompositeValueObject):
                x: int
        ''')
        # -> "hydration_targets", importable as hydration_targets:Point
    """
    module_name = "hydration_targets"
    module_dir = tmp_path / "modules"
    module_dir.mkdir()
    monkeypatch.syspath_prepend(str(module_dir))
    monkeypatch.delitem(sys.modules, module_name, raising=False)

    def write(source: str) -> str:
        header = "from vohydrator.core.values import *  # noqa: F403\n\n"
        (module_dir / f"{module_name}.py").write_text(header + textwrap.dedent(source))
        return module_name

    yield write
    sys.modules.pop(module_name, None)
