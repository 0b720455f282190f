from pathlib import Path

import pytest

from assistant_config.settings import ENV_KEYS, EnvConfig, EnvFile


def test_env_defaults_load_when_missing(tmp_path: Path):
    cfg = EnvFile(tmp_path / ".env").load()
    assert cfg == EnvConfig()
    assert cfg.get("OPENAI_API_KEY") == ""
    assert cfg.get("PERSONALIZATION_FILE") == "./personalization.json"
    assert cfg.get("SCRATCH_PAD_DIR") == "./scratchpad"
    assert cfg.get("ACTIVE_MEMORY_FILE") == "./active_memory.json"
    assert cfg.get("SQLITE_URL") == "./db/mock_sqlite.db"
    assert cfg.get("DUCKDB_URL") == "./db/mock_duck.duckdb"
    assert cfg.get("FIRECRAWL_API_KEY") == ""
    assert cfg.get("POSTGRES_URL") == ""


def test_env_save_writes_fixed_key_order(tmp_path: Path):
    env = EnvFile(tmp_path / ".env")
    env.save(EnvConfig(openai_api_key="sk-test", postgres_url="postgresql://localhost/db"))

    lines = env.path.read_text(encoding="utf-8").split("\n")
    assert lines[-1] == ""
    assert [ln.split("=", 1)[0] for ln in lines[:-1]] == [k for k, _ in ENV_KEYS]
    assert lines[0] == "OPENAI_API_KEY=sk-test"
    assert "POSTGRES_URL=postgresql://localhost/db" in lines


def test_env_roundtrip_save_load(tmp_path: Path):
    env = EnvFile(tmp_path / ".env")
    cfg = EnvConfig(
        openai_api_key="sk-abc123",
        personalization_file="/srv/assistant/p.json",
        scratch_pad_dir="/tmp/scratch",
        active_memory_file="mem.json",
        firecrawl_api_key="fc-999",
        postgres_url="postgresql://u@h:5432/db",
        sqlite_url="",
        duckdb_url="data.duckdb",
    )
    env.save(cfg)
    assert env.load() == cfg


def test_env_save_is_idempotent(tmp_path: Path):
    env = EnvFile(tmp_path / ".env")
    cfg = EnvConfig(openai_api_key="sk-1")
    env.save(cfg)
    first = env.path.read_bytes()
    env.save(cfg)
    assert env.path.read_bytes() == first
    assert not (tmp_path / ".env.tmp").exists()


def test_env_load_splits_on_first_equals_only(tmp_path: Path):
    p = tmp_path / ".env"
    p.write_text("POSTGRES_URL=postgresql://h/db?sslmode=require&a=b\n", encoding="utf-8")
    assert EnvFile(p).load().postgres_url == "postgresql://h/db?sslmode=require&a=b"


def test_env_load_skips_unknown_and_malformed_lines(tmp_path: Path):
    p = tmp_path / ".env"
    p.write_text(
        "# comment line\n"
        "UNKNOWN_KEY=whatever\n"
        "no separator here\n"
        "\n"
        "OPENAI_API_KEY=sk-live\n"
        "=orphan value\n",
        encoding="utf-8",
    )
    cfg = EnvFile(p).load()
    assert cfg.openai_api_key == "sk-live"
    assert cfg.sqlite_url == "./db/mock_sqlite.db"


def test_env_load_keeps_values_verbatim(tmp_path: Path):
    p = tmp_path / ".env"
    p.write_text('OPENAI_API_KEY= "quoted" \nDUCKDB_URL=\n', encoding="utf-8")
    cfg = EnvFile(p).load()
    assert cfg.openai_api_key == ' "quoted" '
    assert cfg.duckdb_url == ""


def test_env_load_accepts_crlf(tmp_path: Path):
    p = tmp_path / ".env"
    p.write_bytes(b"OPENAI_API_KEY=sk-win\r\nSQLITE_URL=C:\\db\\x.db\r\n")
    cfg = EnvFile(p).load()
    assert cfg.openai_api_key == "sk-win"
    assert cfg.sqlite_url == "C:\\db\\x.db"


def test_env_unreadable_file_falls_back_to_defaults(tmp_path: Path):
    p = tmp_path / ".env"
    p.mkdir()  # reading a directory raises IsADirectoryError / PermissionError
    assert EnvFile(p).load() == EnvConfig()


def test_env_set_rejects_unknown_key():
    with pytest.raises(KeyError):
        EnvConfig().set("NOT_A_KEY", "x")


def test_env_load_ignores_utf8_bom(tmp_path: Path):
    p = tmp_path / ".env"
    p.write_bytes(b"\xef\xbb\xbfOPENAI_API_KEY=sk-bom\nDUCKDB_URL=x.duckdb\n")
    cfg = EnvFile(p).load()
    assert cfg.openai_api_key == "sk-bom"
    assert cfg.duckdb_url == "x.duckdb"
