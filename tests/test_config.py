"""Configuration loading."""

import pytest
from pydantic import ValidationError

from biofeed.config import (
    Config,
    ConfigModel,
    FetchConfig,
    SourceConfig,
    default_config_path,
    load_config,
    load_sources,
    save_config,
    save_sources,
)


def test_missing_file_gives_defaults(tmp_path):
    config = Config(tmp_path / "config.yaml").config
    assert config.fetch.timeout == 10.0
    assert config.fetch.default_max_items == 10
    assert config.fetch.max_items_cap == 50
    assert config.server.allow_origins == ["*"]
    assert config.cache.ttl_seconds == 0
    assert config.cache.max_entries == 256


def test_load_config_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("fetch: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_config(path)


def test_invalid_values(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("fetch:\n  timeout: -1\n")
    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config(path)


def test_default_must_fit_cap():
    with pytest.raises(ValidationError):
        FetchConfig(default_max_items=20, max_items_cap=5)


def test_saved_config_is_reloaded(tmp_path):
    path = tmp_path / "nested" / "config.yaml"
    save_config(ConfigModel(fetch={"timeout": 3.5}, server={"port": 9001}), path)

    config = load_config(path)
    assert config.fetch.timeout == 3.5
    assert config.server.port == 9001


def test_env_var_selects_config_path(tmp_path, monkeypatch):
    monkeypatch.setenv("BIOFEED_CONFIG", str(tmp_path / "custom.yaml"))
    assert default_config_path() == tmp_path / "custom.yaml"
    assert Config().sources_path == tmp_path / "sources.yaml"


def test_sources_skip_invalid_entries(tmp_path, capsys):
    path = tmp_path / "sources.yaml"
    path.write_text(
        "sources:\n"
        "  - name: good\n"
        "    url: https://good.example/feed\n"
        "    feed_type: podcast\n"
        "  - name: bad-type\n"
        "    url: https://bad.example/feed\n"
        "    feed_type: newsletter\n"
        "  - name: no-url\n"
    )

    sources = load_sources(path)

    assert [s.name for s in sources] == ["good"]
    assert sources[0].max_items == 10
    assert "Skipping invalid source bad-type" in capsys.readouterr().out


def test_empty_sources_file(tmp_path):
    path = tmp_path / "sources.yaml"
    path.write_text("")
    assert load_sources(path) == []


def test_save_sources(tmp_path):
    path = tmp_path / "sources.yaml"
    save_sources([SourceConfig(name="a", url="https://a/feed", feed_type="blog")], path)
    assert load_sources(path)[0].feed_type == "blog"
