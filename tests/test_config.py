from todoserve.config import Config, load_config


def test_reads_both_keys_from_mapping():
    config = load_config({"SERVER_ADDRESS": "127.0.0.1:9000", "DB_URI": "sqlite:///todos.db"})
    assert config == Config(server_address="127.0.0.1:9000", db_uri="sqlite:///todos.db")


def test_missing_keys_leave_settings_empty():
    config = load_config({})
    assert config.server_address == ""
    assert config.db_uri == ""


def test_unrelated_keys_are_ignored():
    config = load_config({"OTHER": "value", "DB_URI": ":memory:"})
    assert config == Config(db_uri=":memory:")


def test_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("SERVER_ADDRESS", ":7000")
    monkeypatch.setenv("DB_URI", "todos.db")
    config = load_config()
    assert config.server_address == ":7000"
    assert config.db_uri == "todos.db"


def test_explicit_mapping_wins_over_environment(monkeypatch):
    monkeypatch.setenv("DB_URI", "from-env.db")
    assert load_config({"DB_URI": "from-mapping.db"}).db_uri == "from-mapping.db"