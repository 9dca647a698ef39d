import logging

from binsize.util.config import DEFAULT_CONFIG, load_config


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "binsize.toml")
    assert config == DEFAULT_CONFIG
    config["logging"]["level"] = "DEBUG"
    assert DEFAULT_CONFIG["logging"]["level"] == "INFO"


def test_file_overrides_defaults(tmp_path):
    path = tmp_path / "binsize.toml"
    path.write_text('[logging]\nlevel = "debug"\nfile = true\n', encoding="utf-8")
    config = load_config(path)
    assert config["logging"]["level"] == "DEBUG"
    assert config["logging"]["file"] is True
    assert config["logging"]["rich_tracebacks"] is True


def test_unknown_sections_are_kept(tmp_path):
    path = tmp_path / "binsize.toml"
    path.write_text("[extra]\nvalue = 1\n", encoding="utf-8")
    config = load_config(path)
    assert config["logging"] == DEFAULT_CONFIG["logging"]
    assert config["extra"] == {"value": 1}


def test_invalid_values_fall_back(tmp_path, caplog):
    caplog.set_level(logging.ERROR, logger="binsize")
    path = tmp_path / "binsize.toml"
    path.write_text('[logging]\nlevel = "LOUD"\n', encoding="utf-8")
    assert load_config(path) == DEFAULT_CONFIG
    assert "Failed to load config" in caplog.text


def test_wrong_type_falls_back(tmp_path):
    path = tmp_path / "binsize.toml"
    path.write_text('[logging]\nfile = "yes"\n', encoding="utf-8")
    assert load_config(path) == DEFAULT_CONFIG


def test_malformed_toml_falls_back(tmp_path, caplog):
    caplog.set_level(logging.ERROR, logger="binsize")
    path = tmp_path / "binsize.toml"
    path.write_text("[logging\nlevel = ", encoding="utf-8")
    assert load_config(path) == DEFAULT_CONFIG
    assert "Failed to load config" in caplog.text
