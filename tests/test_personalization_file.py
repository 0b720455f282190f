import json
from pathlib import Path

import pytest

from assistant_config.settings import (
    PERSONALIZATION_FIELDS,
    PersonalizationConfig,
    PersonalizationDecodeError,
    PersonalizationFile,
)


def _write(path: Path, obj) -> None:
    path.write_text(json.dumps(obj), encoding="utf-8")


def test_personalization_defaults_load_when_missing(tmp_path: Path):
    cfg = PersonalizationFile(tmp_path / "personalization.json").load()
    assert cfg.browser_urls == ["https://google.com", "https://chat.openai.com", "https://claude.ai/chat"]
    assert cfg.browser_command == "open -a 'Google Chrome'"
    assert cfg.ai_assistant_name == "Ada"
    assert cfg.human_name == "User"
    assert cfg.sql_dialect == "duckdb"
    assert cfg.system_message_suffix == "Keep all of your responses ultra short."


def test_personalization_defaults_do_not_share_url_list():
    a = PersonalizationConfig()
    b = PersonalizationConfig()
    a.browser_urls.append("https://example.com")
    assert "https://example.com" not in b.browser_urls


def test_personalization_roundtrip_save_load(tmp_path: Path):
    pf = PersonalizationFile(tmp_path / "personalization.json")
    cfg = PersonalizationConfig(
        browser_urls=["https://b.example", "https://a.example"],
        browser_command="firefox",
        ai_assistant_name="Iris",
        human_name="Sam",
        sql_dialect="postgres",
        system_message_suffix="Answer in German.\nBe brief.",
    )
    pf.save(cfg)
    assert pf.load() == cfg


def test_personalization_save_key_order_and_idempotence(tmp_path: Path):
    pf = PersonalizationFile(tmp_path / "personalization.json")
    pf.save(PersonalizationConfig())
    first = pf.path.read_bytes()

    data = json.loads(first.decode("utf-8"))
    assert list(data.keys()) == list(PERSONALIZATION_FIELDS)
    assert list(PERSONALIZATION_FIELDS) == [
        "browser_urls",
        "browser_command",
        "ai_assistant_name",
        "human_name",
        "sql_dialect",
        "system_message_suffix",
    ]

    pf.save(PersonalizationConfig())
    assert pf.path.read_bytes() == first


def test_personalization_invalid_json_yields_defaults_and_backup(tmp_path: Path):
    p = tmp_path / "personalization.json"
    p.write_text("{not valid json", encoding="utf-8")

    assert PersonalizationFile(p).load() == PersonalizationConfig()

    baks = sorted(p.parent.glob(p.name + ".bak.*"))
    assert baks, "Expected a backup of the invalid personalization file"
    assert baks[0].read_text(encoding="utf-8") == "{not valid json"


def test_personalization_missing_field_is_not_partially_applied(tmp_path: Path):
    p = tmp_path / "personalization.json"
    _write(
        p,
        {
            "browser_urls": ["https://only.example"],
            "browser_command": "firefox",
            "ai_assistant_name": "Iris",
            "human_name": "Sam",
            "sql_dialect": "sqlite",
            # system_message_suffix missing
        },
    )
    assert PersonalizationFile(p).load() == PersonalizationConfig()


@pytest.mark.parametrize(
    "patch",
    [
        {"browser_urls": "https://not-a-list"},
        {"browser_urls": ["ok", 3]},
        {"human_name": None},
        {"sql_dialect": 1},
    ],
)
def test_personalization_wrong_types_fail_strict_decode(patch):
    data = json.loads(PersonalizationConfig().to_json())
    data.update(patch)
    with pytest.raises(PersonalizationDecodeError):
        PersonalizationConfig.from_dict(data)


def test_personalization_root_must_be_object(tmp_path: Path):
    p = tmp_path / "personalization.json"
    _write(p, ["https://google.com"])
    assert PersonalizationFile(p).load() == PersonalizationConfig()


def test_personalization_extra_keys_are_ignored(tmp_path: Path):
    p = tmp_path / "personalization.json"
    data = json.loads(PersonalizationConfig(human_name="Kim").to_json())
    data["theme"] = "dark"
    _write(p, data)
    cfg = PersonalizationFile(p).load()
    assert cfg.human_name == "Kim"


def test_personalization_dialect_is_not_enforced(tmp_path: Path):
    pf = PersonalizationFile(tmp_path / "personalization.json")
    pf.save(PersonalizationConfig(sql_dialect="mysql"))
    assert pf.load().sql_dialect == "mysql"


def test_personalization_deeply_nested_json_yields_defaults(tmp_path: Path):
    p = tmp_path / "personalization.json"
    p.write_text("[" * 200000, encoding="utf-8")
    assert PersonalizationFile(p).load() == PersonalizationConfig()


def test_personalization_load_accepts_utf8_bom(tmp_path: Path):
    p = tmp_path / "personalization.json"
    p.write_bytes(b"\xef\xbb\xbf" + PersonalizationConfig(human_name="Kim").to_json().encode("utf-8"))
    assert PersonalizationFile(p).load().human_name == "Kim"
