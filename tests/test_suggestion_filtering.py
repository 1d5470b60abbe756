import pytest
from username_finder.suggestion_provider import filter_usernames, parse_usernames_payload


def test_filter_keeps_order_and_drops_out_of_range() -> None:
    assert filter_usernames(["gamer1", "xx", "pro_gm", "toolongname"]) == ["gamer1", "pro_gm"]


def test_filter_accepts_both_length_boundaries() -> None:
    assert filter_usernames(["abc", "abcdefg"]) == ["abc", "abcdefg"]


def test_filter_skips_non_string_entries() -> None:
    assert filter_usernames(["gamer1", 12345, None, ["nested"], {"u": "x"}]) == ["gamer1"]


def test_filter_tolerates_stray_characters_by_default() -> None:
    assert filter_usernames(["gm.pro", "gm-42"]) == ["gm.pro", "gm-42"]


@pytest.mark.parametrize("strict_charset", [False, True])
def test_filter_is_idempotent(strict_charset: bool) -> None:
    raw = ["gamer1", "xx", "pro_gm", "gm.pro", "abcdefgh", "ok_1"]
    once = filter_usernames(raw, strict_charset=strict_charset)

    assert filter_usernames(once, strict_charset=strict_charset) == once


def test_parse_reads_usernames_array() -> None:
    assert parse_usernames_payload('  {"usernames": ["gamer1", "xx"]}\n') == ["gamer1", "xx"]


@pytest.mark.parametrize(
    "raw_text",
    [None, "", "   ", "{not json", "[]", "42", '{"usernames": null}', '{"other": []}'],
)
def test_parse_treats_unusable_payloads_as_empty(raw_text) -> None:
    assert parse_usernames_payload(raw_text) == []


def test_parse_treats_deeply_nested_payload_as_empty() -> None:
    raw_text = "[" * 100_000 + "]" * 100_000

    assert parse_usernames_payload(raw_text) == []
