from pathlib import Path
from urllib.parse import quote, quote_plus

import pytest

from torrest.log import LogLevel
from torrest.utils import (
    join_path,
    join_strings,
    parse_env,
    sanitize_ip_address,
    unescape_string,
)


def test_sanitize_ipv4_default():
    assert sanitize_ip_address("192.168.1.1") == "192.168.X.X"


def test_sanitize_ipv6_keeps_empty_groups():
    assert sanitize_ip_address("2001:db8::1", 2) == "2001:db8::X"


@pytest.mark.parametrize("ip", ["10.0.0.255", "fe80::1:2:3", "1.2.3.4:8080"])
def test_sanitize_preserves_length_and_separators(ip):
    masked = sanitize_ip_address(ip, 0)
    assert len(masked) == len(ip)
    assert [c for c in masked if c in ":."] == [c for c in ip if c in ":."]
    assert set(masked) <= {"X", ":", "."}


def test_sanitize_many_leading_groups_is_identity():
    assert sanitize_ip_address("172.16.254.3", 10) == "172.16.254.3"


def test_join_strings():
    assert join_strings(["a", "b", "c"], ", ") == "a, b, c"
    assert join_strings([], ",") == ""
    assert join_strings(["only"], ",") == "only"


@pytest.mark.parametrize("text", ["hello world", "héllo wörld/?&=", "100% sure"])
def test_unescape_roundtrip_quote(text):
    assert unescape_string(quote(text)) == text
    assert unescape_string(quote_plus(text)) == text


def test_unescape_plus_and_mixed_case_hex():
    assert unescape_string("a+b%2fc%2F") == unescape_string("a b/c/")


@pytest.mark.parametrize("bad", ["%", "%4", "%zz", "abc%g1", "%+1"])
def test_unescape_invalid(bad):
    with pytest.raises(ValueError, match="Invalid escaped string"):
        unescape_string(bad)


def test_parse_env_unset_returns_default(monkeypatch):
    monkeypatch.delenv("TORREST_TEST_VALUE", raising=False)
    assert parse_env("TORREST_TEST_VALUE", 8080, int) == 8080


def test_parse_env_converts(monkeypatch):
    monkeypatch.setenv("TORREST_TEST_VALUE", "9090")
    assert parse_env("TORREST_TEST_VALUE", 8080, int) == 9090


def test_parse_env_strict_failure(monkeypatch):
    monkeypatch.setenv("TORREST_TEST_VALUE", "abc")
    with pytest.raises(ValueError, match="Unable to parse TORREST_TEST_VALUE environment variable"):
        parse_env("TORREST_TEST_VALUE", 8080, int)


def test_parse_env_lenient_failure(monkeypatch):
    monkeypatch.setenv("TORREST_TEST_VALUE", "abc")
    assert parse_env("TORREST_TEST_VALUE", 8080, int, strict=False) == 8080


def test_parse_env_log_level(monkeypatch):
    monkeypatch.setenv("TORREST_TEST_LEVEL", "Debug")
    assert parse_env("TORREST_TEST_LEVEL", LogLevel.INFO, LogLevel.parse) is LogLevel.DEBUG


def test_join_path_relative(tmp_path):
    assert join_path(tmp_path, "x", "y") == tmp_path / "x" / "y"


def test_join_path_absolute_replaces(tmp_path):
    assert join_path("relative", "dir", tmp_path, "z") == tmp_path / "z"
    assert join_path("a", "b") == Path("a") / "b"