import pytest

from labsh.config import ENV_FIELDS


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep the user's config file and LABSH_* variables out of every test."""
    for env_key in ENV_FIELDS:
        monkeypatch.delenv(env_key, raising=False)
    path = tmp_path / "config.json"
    monkeypatch.setenv("LABSH_CONFIG", str(path))
    return path
