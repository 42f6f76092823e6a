from pathlib import Path
from typing import Dict

import pytest

RESOURCES = Path(__file__).resolve().parent / "resources"


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    # Settings must come from the test, never from the developer's shell
    monkeypatch.delenv("FXVARIANTS_CONFIG", raising=False)
    monkeypatch.delenv("FXVARIANTS_LOG_LEVEL", raising=False)


@pytest.fixture(scope="session")
def default_effect_xml() -> str:
    return (RESOURCES / "DefaultEffect.xml").read_text(encoding="utf-8")


@pytest.fixture()
def make_tree(tmp_path: Path):
    """
    Writes {relative path: content} under a fresh scan root and returns the root.
    """

    def _make(files: Dict[str, str]) -> Path:
        root = tmp_path / "effects"
        root.mkdir(parents=True, exist_ok=True)
        for rel, content in files.items():
            p = root / rel
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text(content, encoding="utf-8")
        return root

    return _make
