import pytest

from bidikit import types
from bidikit.types import (
    CharType,
    Flags,
    ParType,
    char_from_bidi_type,
    get_bidi_type,
    is_explicit_or_bn,
    is_isolate,
    level_is_rtl,
)


@pytest.mark.parametrize(
    "code, expected",
    [
        (types.CHAR_LRE, CharType.LRE),
        (types.CHAR_RLE, CharType.RLE),
        (types.CHAR_PDF, CharType.PDF),
        (types.CHAR_LRO, CharType.LRO),
        (types.CHAR_RLO, CharType.RLO),
        (types.CHAR_LRI, CharType.LRI),
        (types.CHAR_RLI, CharType.RLI),
        (types.CHAR_FSI, CharType.FSI),
        (types.CHAR_PDI, CharType.PDI),
        (types.CHAR_LRM, CharType.LTR),
        (types.CHAR_RLM, CharType.RTL),
        (types.CHAR_HEBREW_ALEF, CharType.RTL),
        (types.CHAR_ARABIC_ALEF, CharType.AL),
        (types.CHAR_ARABIC_ZERO, CharType.AN),
        (types.CHAR_PERSIAN_ZERO, CharType.EN),
        (types.CHAR_PS, CharType.BS),
        (types.CHAR_LS, CharType.WS),
        (types.CHAR_ZWNBSP, CharType.BN),
    ],
)
def test_named_characters(code, expected):
    assert get_bidi_type(code) is expected


def test_string_and_code_point_agree():
    for ch in "aZ1 \t\n!,+$\u05d0\u0627":
        assert get_bidi_type(ch) is get_bidi_type(ord(ch))


def test_ascii_basics():
    assert get_bidi_type("a") is CharType.LTR
    assert get_bidi_type(" ") is CharType.WS
    assert get_bidi_type("\n") is CharType.BS


def test_aliases_are_same_members():
    assert get_bidi_type("a") is CharType.L
    assert get_bidi_type(types.CHAR_HEBREW_ALEF) is CharType.R
    assert get_bidi_type("\n") is CharType.B
    assert get_bidi_type("\t") is CharType.S
    assert char_from_bidi_type(CharType.L) == "L"
    assert char_from_bidi_type(CharType.R) == "R"
    assert char_from_bidi_type(CharType.B) == "B"
    assert char_from_bidi_type(CharType.S) == "S"


def test_never_sentinel_for_real_characters():
    found = {get_bidi_type(cp) for cp in range(0, 0x3000)}
    assert CharType.SENTINEL not in found
    assert CharType.LTR in found


@pytest.mark.parametrize("bad", [-1, types.UNICODE_CHARS, "ab", ""])
def test_bad_values(bad):
    with pytest.raises(ValueError):
        get_bidi_type(bad)


def test_bad_type():
    with pytest.raises(TypeError):
        get_bidi_type(1.5)


def test_explicit_and_isolate_disjoint():
    explicit = {t for t in CharType if is_explicit_or_bn(t)}
    isolates = {t for t in CharType if is_isolate(t)}
    assert explicit.isdisjoint(isolates)
    assert isolates == {CharType.LRI, CharType.RLI, CharType.FSI, CharType.PDI}
    assert explicit == {
        CharType.LRE,
        CharType.RLE,
        CharType.LRO,
        CharType.RLO,
        CharType.PDF,
        CharType.BN,
    }


def test_level_is_rtl_alternates():
    for level in range(types.MAX_RESOLVED_LEVELS):
        assert level_is_rtl(level) != level_is_rtl(level + 1)
    assert level_is_rtl(0) is False
    assert level_is_rtl(types.SENTINEL) is True


@pytest.mark.parametrize(
    "char_type, symbol",
    [
        (CharType.LTR, "L"),
        (CharType.RTL, "R"),
        (CharType.AL, "A"),
        (CharType.EN, "1"),
        (CharType.AN, "9"),
        (CharType.ES, "w"),
        (CharType.ET, "w"),
        (CharType.CS, "w"),
        (CharType.NSM, "`"),
        (CharType.BN, "b"),
        (CharType.BS, "B"),
        (CharType.SS, "S"),
        (CharType.WS, "_"),
        (CharType.ON, "n"),
        (CharType.RLO, "+"),
        (CharType.PDF, "-"),
        (CharType.FSI, "+"),
        (CharType.PDI, "-"),
        (CharType.SENTINEL, "$"),
        (ParType.WLTR, "l"),
        (ParType.WRTL, "r"),
        (ParType.ON, "n"),
    ],
)
def test_char_from_bidi_type(char_type, symbol):
    assert char_from_bidi_type(char_type) == symbol


def test_every_char_type_has_symbol():
    for t in CharType:
        symbol = char_from_bidi_type(t)
        assert len(symbol) == 1
        assert symbol != "?"


def test_flag_combinations():
    assert Flags(0x00000001) is Flags.SHAPE_MIRRORING
    assert Flags(0x00000002) is Flags.REORDER_NSM
    assert Flags(0x00040003) == Flags.DEFAULT
    assert Flags(0x00000300) == Flags.ARABIC
    assert Flags.SHAPE_ARAB_PRES not in Flags(0x00040003)
    assert not Flags(0x00040003) & Flags(0x00000300)