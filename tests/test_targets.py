"""Tests for port specification parsing and host normalization."""

from netprobe.scanner.targets import normalize_host, parse_ports


def test_parse_single_ports():
    assert parse_ports("80,443,22") == [22, 80, 443]


def test_parse_range():
    assert parse_ports("1-5") == [1, 2, 3, 4, 5]


def test_parse_mixed_with_whitespace_and_duplicates():
    assert parse_ports(" 80 , 79-81 ,80,") == [79, 80, 81]


def test_parse_skips_invalid_pieces():
    assert parse_ports("0,70000,abc,10-5,1-2-3,443") == [443]


def test_parse_range_upper_bound_checked():
    assert parse_ports("65534-65536") == []
    assert parse_ports("65534-65535") == [65534, 65535]


def test_parse_empty():
    assert parse_ports("") == []


def test_normalize_host_strips_brackets():
    assert normalize_host("[::1]") == "::1"
    assert normalize_host("  [fe80::1] ") == "fe80::1"


def test_normalize_host_leaves_others():
    assert normalize_host(" example.com ") == "example.com"
    assert normalize_host("10.0.0.1") == "10.0.0.1"
