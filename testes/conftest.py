import pytest


@pytest.fixture(autouse=True)
def isolated_reports(tmp_path, monkeypatch):
    # Log and report files are written relative to the working directory
    monkeypatch.chdir(tmp_path)
    for var in ("STRAPI_TOKEN", "STRAPI_API_URL", "WP_API_URL"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path
