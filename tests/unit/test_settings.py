import pytest

from image_store.config.settings import Settings


@pytest.mark.unit
def test_defaults(monkeypatch):
    for var in ("IMAGE_STORAGE_PATH", "PORT", "MAX_FILE_SIZE_MB"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings(_env_file=None)

    assert settings.image_storage_path == "./uploads"
    assert settings.port == 3000
    assert settings.max_file_size_bytes == 10 * 1024 * 1024


@pytest.mark.unit
def test_reads_environment(monkeypatch):
    monkeypatch.setenv("IMAGE_STORAGE_PATH", '"/srv/images"')
    monkeypatch.setenv("MAX_FILE_SIZE_MB", "5")

    settings = Settings(_env_file=None)

    assert settings.image_storage_path == "/srv/images"
    assert settings.max_file_size_mb == 5


@pytest.mark.unit
def test_cors_origin_list():
    settings = Settings(_env_file=None, cors_origins=" http://a.test , ,http://b.test")

    assert settings.cors_origin_list == ["http://a.test", "http://b.test"]
