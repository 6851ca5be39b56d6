from pathlib import Path

import pytest
from wallgen.core.env import ENV_OPTIONS


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """No WALLGEN_* variables, and any set during the test are removed after it."""
    # setenv first so anything load_env() writes is undone after the test
    for name in ENV_OPTIONS:
        monkeypatch.setenv(f'WALLGEN_{name.upper()}', '')
        monkeypatch.delenv(f'WALLGEN_{name.upper()}')
    return monkeypatch


@pytest.fixture
def workdir(tmp_path: Path, clean_env: pytest.MonkeyPatch) -> Path:
    """Empty repo-like cwd, so no stray .env is picked up."""
    (tmp_path / '.git').mkdir()
    clean_env.chdir(tmp_path)
    return tmp_path
