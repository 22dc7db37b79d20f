# tests/test_api.py

import logging

import pytest
from pydantic import ValidationError

from upc_checker.api.main import check, setup_logging
from upc_checker.api.schemas import CheckRequest
from upc_checker.policy import CheckPolicy


def test_check_valid():
    req = CheckRequest(standard="UPC-A", payload=[0, 3, 6, 0, 0, 0, 2, 4, 1, 4, 5], check_digit=7)
    resp = check(req)
    assert resp.valid is True
    assert resp.expected_check_digit == 7
    assert resp.error is None


def test_check_invalid_digit_reports_expected():
    req = CheckRequest(payload=[9] * 12, check_digit=7)
    resp = check(req)
    assert resp.standard == "UPC-A"
    assert resp.valid is False
    assert resp.expected_check_digit == 4


def test_check_payload_error(caplog):
    req = CheckRequest(payload=[9, 9, 9, 9, 9, 12, 9, 9, 9, 9, 9], check_digit=7)
    with caplog.at_level(logging.WARNING, logger="upc_checker.api"):
        resp = check(req)
    assert resp.valid is None
    assert resp.error == "PayloadDigitOutOfRange"
    assert "Rejected UPC-A request" in caplog.text


def test_check_check_digit_error():
    req = CheckRequest(payload=[9] * 12, check_digit=70)
    resp = check(req)
    assert resp.error == "CheckDigitOutOfRange"
    assert resp.expected_check_digit is None


def test_check_wrong_length_propagates():
    req = CheckRequest(standard="UPC-E", payload=[1, 2, 3], check_digit=0)
    with pytest.raises(ValueError):
        check(req)


def test_request_rejects_unknown_standard():
    with pytest.raises(ValidationError):
        CheckRequest(standard="EAN-13", payload=[0] * 12, check_digit=0)


def test_setup_logging_from_yaml(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = tmp_path / "logging.yaml"
    cfg.write_text(
        "version: 1\n"
        "disable_existing_loggers: false\n"
        "loggers:\n"
        "  upc_checker.probe:\n"
        "    level: ERROR\n",
        encoding="utf-8",
    )
    setup_logging(str(cfg))
    assert (tmp_path / "logs").is_dir()
    assert logging.getLogger("upc_checker.probe").level == logging.ERROR


def test_setup_logging_bad_config_falls_back(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    cfg = tmp_path / "logging.yaml"
    cfg.write_text("version: 99\n", encoding="utf-8")
    setup_logging(str(cfg))
    assert "[logging] Failed to load" in capsys.readouterr().out


def test_setup_logging_missing_file(tmp_path):
    setup_logging(str(tmp_path / "nope.yaml"))


def test_request_rejects_string_digits():
    with pytest.raises(ValidationError):
        CheckRequest(payload=["0", "3", "6", "0", "0", "0", "2", "4", "1", "4", "5"], check_digit=7)
    with pytest.raises(ValidationError):
        CheckRequest(payload=[0, 3, 6, 0, 0, 0, 2, 4, 1, 4, 5], check_digit="7")


def test_request_rejects_float_and_bool_digits():
    with pytest.raises(ValidationError):
        CheckRequest(payload=[0, 3, 6, 0, 0, 0, 2, 4, 1, 4, 5.0], check_digit=7)
    with pytest.raises(ValidationError):
        CheckRequest(payload=[0, 3, 6, 0, 0, 0, 2, 4, 1, 4, 5], check_digit=7.0)
    with pytest.raises(ValidationError):
        CheckRequest(payload=[0, 3, 6, 0, 0, 0, 2, 4, 1, 4, True], check_digit=7)


def test_check_uses_policy_partition():
    req = CheckRequest(payload=[2] * 11, check_digit=8)
    resp = check(req, CheckPolicy(partition="value"))
    assert resp.valid is True
    assert resp.expected_check_digit == 8
