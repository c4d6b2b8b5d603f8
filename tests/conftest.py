import pytest


@pytest.fixture
def pyproject(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / 'pyproject.toml'

    def _write(src: str):
        path.write_text(src)
        return path

    return _write
