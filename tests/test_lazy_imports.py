"""Tests for saferoute.__init__ — names load from their modules on first access."""

import subprocess
import sys
from importlib import import_module

import pytest

import saferoute


def _modules_after(code: str) -> set[str]:
    """Run *code* in a fresh interpreter and return the saferoute modules it loaded."""
    script = (
        f"{code}\n"
        "import sys\n"
        "print('\\n'.join(m for m in sys.modules if m.startswith('saferoute')))\n"
    )
    result = subprocess.run(
        [sys.executable, "-c", script], capture_output=True, text=True, check=True
    )
    return set(result.stdout.split())


class TestRegistry:
    def test_matches_public_names(self) -> None:
        assert set(saferoute._LAZY_IMPORTS) == set(saferoute.__all__)

    @pytest.mark.parametrize("name", sorted(saferoute._LAZY_IMPORTS))
    def test_resolves_to_defining_module(self, name: str) -> None:
        module = import_module(saferoute._LAZY_IMPORTS[name])
        assert getattr(saferoute, name) is getattr(module, name)

    def test_unknown_name(self) -> None:
        with pytest.raises(AttributeError, match="has no attribute 'ThisDoesNotExist'"):
            saferoute.ThisDoesNotExist  # noqa: B018


class TestDeferredLoading:
    def test_import_loads_only_the_package(self) -> None:
        assert _modules_after("import saferoute") == {"saferoute"}

    def test_access_loads_the_defining_module(self) -> None:
        loaded = _modules_after("import saferoute\nsaferoute.SafeURL")
        assert "saferoute.safe_url" in loaded

    def test_light_names_skip_safe_url(self) -> None:
        loaded = _modules_after("import saferoute\nsaferoute.ScopedError")
        assert "saferoute.errors" in loaded
        assert "saferoute.safe_url" not in loaded
