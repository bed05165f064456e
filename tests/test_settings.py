from pixai import settings


def test_load_key_prefers_environment(monkeypatch, tmp_path):
    key_file = tmp_path / "pixai.key"
    key_file.write_text("from-file\n")
    monkeypatch.setenv("PIXAI_API_KEY", "from-env")

    assert settings.load_key(str(key_file)) == "from-env"


def test_load_key_reads_file(monkeypatch, tmp_path):
    key_file = tmp_path / "pixai.key"
    key_file.write_text("  from-file\n")
    monkeypatch.delenv("PIXAI_API_KEY", raising=False)

    assert settings.load_key(str(key_file)) == "from-file"


def test_load_key_missing(monkeypatch, tmp_path):
    monkeypatch.delenv("PIXAI_API_KEY", raising=False)

    assert settings.load_key(str(tmp_path / "pixai.key")) is None
    assert settings.load_key(None) is None
