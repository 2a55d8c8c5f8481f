from pathlib import Path

from jcard.config import Settings, load_settings


def test_missing_file_gives_defaults(tmp_path: Path):
    assert load_settings(tmp_path / "jcard.toml") == Settings()


def test_reads_values(tmp_path: Path):
    conf = tmp_path / "jcard.toml"
    conf.write_text('default_region = "de"\nlog_level = "debug"\nindent = 4\n', encoding="utf-8")
    settings = load_settings(conf)
    assert settings.default_region == "DE"
    assert settings.log_level == "DEBUG"
    assert settings.indent == 4


def test_malformed_file_gives_defaults(tmp_path: Path):
    conf = tmp_path / "jcard.toml"
    conf.write_text("default_region = \n", encoding="utf-8")
    assert load_settings(conf) == Settings()


def test_bad_values_are_ignored(tmp_path: Path):
    conf = tmp_path / "jcard.toml"
    conf.write_text('log_level = "chatty"\nindent = "wide"\n', encoding="utf-8")
    settings = load_settings(conf)
    assert settings.log_level == "WARNING"
    assert settings.indent == 2
