import yaml

import config


def _use_tmp_config(tmp_path, monkeypatch):
    path = tmp_path / "todoist.yaml"
    monkeypatch.setattr(config, "USER_CONFIG_PATH", path)
    monkeypatch.delenv("TODOIST_TOKEN", raising=False)
    return path


def test_token_roundtrip_and_clear(tmp_path, monkeypatch):
    path = _use_tmp_config(tmp_path, monkeypatch)
    assert config.get_user_token() == ""
    config.set_user_token("  abc  ")
    assert yaml.safe_load(path.read_text()) == {"token": "abc"}
    assert config.get_user_token() == "abc"
    config.set_user_token("")
    assert config.get_user_token() == ""
    assert not path.exists()


def test_env_token_wins(tmp_path, monkeypatch):
    _use_tmp_config(tmp_path, monkeypatch)
    config.set_user_token("saved")
    monkeypatch.setenv("TODOIST_TOKEN", "from-env")
    assert config.get_user_token() == "from-env"


def test_filter_and_closed_share_file(tmp_path, monkeypatch):
    path = _use_tmp_config(tmp_path, monkeypatch)
    config.set_filter("#Work")
    config.set_last_closed(123)
    assert config.get_filter() == "#Work"
    assert config.get_last_closed() == 123
    assert yaml.safe_load(path.read_text()) == {"filter": "#Work", "closed": 123}


def test_broken_file_reads_as_empty(tmp_path, monkeypatch):
    path = _use_tmp_config(tmp_path, monkeypatch)
    path.write_text("token: [unterminated", encoding="utf-8")
    assert config.get_user_token() == ""
    assert config.get_filter() == ""


def test_non_numeric_closed_is_ignored(tmp_path, monkeypatch):
    path = _use_tmp_config(tmp_path, monkeypatch)
    path.write_text(yaml.safe_dump({"closed": "abc"}), encoding="utf-8")
    assert config.get_last_closed() is None


def test_user_config_store_port(tmp_path, monkeypatch):
    _use_tmp_config(tmp_path, monkeypatch)
    store = config.UserConfigStore()
    assert store.last_closed() is None
    store.save_closed(9)
    store.save_filter("today")
    assert store.last_closed() == 9
    assert config.get_filter() == "today"


def test_non_mapping_file_reads_as_empty(tmp_path, monkeypatch):
    path = _use_tmp_config(tmp_path, monkeypatch)
    for content in ("just a token\n", "- a\n- b\n", "42\n"):
        path.write_text(content, encoding="utf-8")
        assert config.get_user_token() == ""
        assert config.get_filter() == ""
        assert config.get_last_closed() is None
    config.set_filter("#Work")
    assert yaml.safe_load(path.read_text()) == {"filter": "#Work"}
