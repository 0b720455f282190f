from __future__ import annotations

from assistant_config.log_utils import mask_secret, sanitize_log


def test_sanitize_log_removes_ansi_and_cr() -> None:
    raw = "saving\rsaved\n\x1b[0;93m2026-02-28 12:00:00 [WARNING] slow disk\x1b[m\r\ndone\x1b[0m"

    cleaned = sanitize_log(raw)

    assert "\r" not in cleaned
    assert "\x1b" not in cleaned
    lines = cleaned.splitlines()
    assert lines[:2] == ["saving", "saved"]
    assert any("[WARNING] slow disk" in ln for ln in lines)
    assert lines[-1] == "done"


def test_sanitize_log_empty() -> None:
    assert sanitize_log("") == ""


def test_mask_secret_keeps_only_tail() -> None:
    assert mask_secret("sk-abcdefghijklmnop1234") == "sk-…1234"
    assert mask_secret("fcabcdefghij9876") == "…9876"
    assert mask_secret("short") == "*****"
    assert mask_secret("") == ""
