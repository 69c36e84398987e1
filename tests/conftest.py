from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
import sys

import pytest


# Ensure `import pluscodes` works when the package isn't installed.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    # Env from the developer shell must not leak into tests.
    monkeypatch.delenv("PLUSCODES_STRICT_FULL_CODES", raising=False)
    monkeypatch.delenv("PLUSCODES_DEFAULT_CODE_LENGTH", raising=False)

    from pluscodes.core.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def strict_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    from pluscodes.core.settings import get_settings

    monkeypatch.setenv("PLUSCODES_STRICT_FULL_CODES", "true")
    get_settings.cache_clear()
