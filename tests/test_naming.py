import pytest

from filesession.errors import InvalidTTLError
from filesession.naming import (
    SessionFilename,
    build_filename,
    decode,
    encode,
    match_pattern,
    parse_filename,
)


def test_encode_is_lowercase_hex_of_id_bytes():
    assert encode(b"\x00\xffAB") == "00ff4142"
    assert encode("testsessionid") == "74657374736573736f6e6964"


def test_str_ids_are_utf8_encoded():
    assert encode("café") == "café".encode("utf-8").hex()
    assert encode("abc") == encode(b"abc")


def test_encode_rejects_other_types():
    with pytest.raises(TypeError):
        encode(12345)


def test_encode_is_injective():
    ids = [b"", b"a", b"aa", b"\x00", b"\x00\x00", b"a/b", b"A", "é", b"__", b"x.json"]
    fragments = [encode(i) for i in ids]
    assert len(set(fragments)) == len(ids)
    for session_id, fragment in zip(ids, fragments):
        expected = session_id.encode("utf-8") if isinstance(session_id, str) else session_id
        assert decode(fragment) == expected


def test_build_filename():
    assert build_filename("testsessionid", 60000) == encode("testsessionid") + "__60000.json"
    assert build_filename("funsessionid", 300) == encode("funsessionid") + "__300.json"
    assert build_filename(b"x", 0) == "78__0.json"


@pytest.mark.parametrize("ttl", [-1, 1.5, 60000.0, True, "60000", None])
def test_build_filename_rejects_bad_ttl(ttl):
    with pytest.raises(InvalidTTLError):
        build_filename("sid", ttl)


def test_invalid_ttl_is_a_value_error():
    with pytest.raises(ValueError):
        build_filename("sid", -5)


def test_match_pattern_ignores_ttl():
    assert match_pattern("testsessionid") == encode("testsessionid") + "__*.json"


def test_parse_filename():
    name = build_filename(b"sid", 60000)
    parsed = parse_filename(name)
    assert parsed == SessionFilename(fragment=encode(b"sid"), ttl_ms=60000)
    assert parsed.session_id == b"sid"
    assert str(parsed) == name


@pytest.mark.parametrize(
    "name",
    [
        "736964__abc.json",
        "736964__60000.txt",
        "736964__-1.json",
        "736964__060000.json",
        "73696__60000.json",
        "736964__1__2.json",
        ".736964__60000.json.0f0f.tmp",
        "ZZ__60000.json",
    ],
)
def test_parse_filename_rejects_foreign_names(name):
    assert parse_filename(name) is None
