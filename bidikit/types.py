"""Core bidi types, option flags and Unicode constants."""

from __future__ import annotations

import enum
import unicodedata

__all__ = [
    "CharType",
    "ParType",
    "Flags",
    "get_bidi_type",
    "is_explicit_or_bn",
    "is_isolate",
    "level_is_rtl",
    "char_from_bidi_type",
]

NAME = "GNU FriBidi"
VERSION = "1.0.4"
MAJOR_VERSION = 1
MINOR_VERSION = 0
MICRO_VERSION = 4
INTERFACE_VERSION = 4
INTERFACE_VERSION_STRING = "4"

# Character data comes from the interpreter's Unicode database.
UNICODE_VERSION = unicodedata.unidata_version

UNICODE_CHARS = 0x110000

BIDI_NUM_TYPES = 19
MAX_EXPLICIT_LEVEL = 125
MAX_RESOLVED_LEVELS = 127
MAX_NESTED_BRACKET_PAIRS = 63

LEVEL_INVALID = MAX_RESOLVED_LEVELS
SENTINEL = -1

NO_BRACKET = 0

CHAR_LRM = 0x200E
CHAR_RLM = 0x200F
CHAR_LRE = 0x202A
CHAR_RLE = 0x202B
CHAR_PDF = 0x202C
CHAR_LRO = 0x202D
CHAR_RLO = 0x202E
CHAR_LRI = 0x2066
CHAR_RLI = 0x2067
CHAR_FSI = 0x2068
CHAR_PDI = 0x2069
CHAR_LS = 0x2028
CHAR_PS = 0x2029
CHAR_ZWNJ = 0x200C
CHAR_ZWJ = 0x200D
CHAR_HEBREW_ALEF = 0x05D0
CHAR_ARABIC_ALEF = 0x0627
CHAR_ARABIC_ZERO = 0x0660
CHAR_PERSIAN_ZERO = 0x06F0
CHAR_ZWNBSP = 0xFEFF
CHAR_FILL = CHAR_ZWNBSP


class CharType(enum.Enum):
    """Bidirectional character type; values are Unicode bidi class codes."""

    LTR = "L"
    RTL = "R"
    AL = "AL"
    EN = "EN"
    AN = "AN"
    ES = "ES"
    ET = "ET"
    CS = "CS"
    NSM = "NSM"
    BN = "BN"
    BS = "B"
    SS = "S"
    WS = "WS"
    ON = "ON"
    LRE = "LRE"
    RLE = "RLE"
    LRO = "LRO"
    RLO = "RLO"
    PDF = "PDF"
    LRI = "LRI"
    RLI = "RLI"
    FSI = "FSI"
    PDI = "PDI"
    SENTINEL = "$"

    # Aliases
    L = "L"
    R = "R"
    B = "B"
    S = "S"


class ParType(enum.Enum):
    """Paragraph base direction."""

    LTR = "L"
    RTL = "R"
    ON = "ON"
    WLTR = "WL"
    WRTL = "WR"


class Flags(enum.IntFlag):
    """Option flags used by shaping and reordering functions."""

    SHAPE_MIRRORING = 0x00000001
    REORDER_NSM = 0x00000002
    SHAPE_ARAB_PRES = 0x00000100
    SHAPE_ARAB_LIGA = 0x00000200
    SHAPE_ARAB_CONSOLE = 0x00000400
    REMOVE_BIDI = 0x00010000
    REMOVE_JOINING = 0x00020000
    REMOVE_SPECIALS = 0x00040000

    DEFAULT = SHAPE_MIRRORING | REORDER_NSM | REMOVE_SPECIALS
    ARABIC = SHAPE_ARAB_PRES | SHAPE_ARAB_LIGA


_EXPLICIT_OR_BN = frozenset(
    {CharType.LRE, CharType.RLE, CharType.LRO, CharType.RLO, CharType.PDF, CharType.BN}
)
_ISOLATES = frozenset({CharType.LRI, CharType.RLI, CharType.FSI, CharType.PDI})

_TYPE_CHARS = {
    CharType.LTR: "L",
    CharType.RTL: "R",
    CharType.AL: "A",
    CharType.EN: "1",
    CharType.AN: "9",
    CharType.ES: "w",
    CharType.ET: "w",
    CharType.CS: "w",
    CharType.NSM: "`",
    CharType.BN: "b",
    CharType.BS: "B",
    CharType.SS: "S",
    CharType.WS: "_",
    CharType.ON: "n",
    CharType.LRE: "+",
    CharType.RLE: "+",
    CharType.LRO: "+",
    CharType.RLO: "+",
    CharType.PDF: "-",
    CharType.LRI: "+",
    CharType.RLI: "+",
    CharType.FSI: "+",
    CharType.PDI: "-",
    CharType.SENTINEL: "$",
    ParType.LTR: "L",
    ParType.RTL: "R",
    ParType.ON: "n",
    ParType.WLTR: "l",
    ParType.WRTL: "r",
}


def _code_point(ch: int | str) -> int:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {len(ch)}")
        return ord(ch)
    if isinstance(ch, bool) or not isinstance(ch, int):
        raise TypeError(f"expected a character or code point, got {type(ch).__name__}")
    if not 0 <= ch < UNICODE_CHARS:
        raise ValueError(f"code point out of range: {ch:#x}")
    return ch


def get_bidi_type(ch: int | str) -> CharType:
    """Return the bidi type of a character given as a string or code point."""
    bidi_class = unicodedata.bidirectional(chr(_code_point(ch)))
    if not bidi_class:
        return CharType.LTR
    return CharType(bidi_class)


def is_explicit_or_bn(char_type: CharType) -> bool:
    """True for explicit embedding/override codes and boundary neutrals."""
    return char_type in _EXPLICIT_OR_BN


def is_isolate(char_type: CharType) -> bool:
    """True for isolate initiators and PDI."""
    return char_type in _ISOLATES


def level_is_rtl(level: int) -> bool:
    """True if an embedding level is right-to-left (odd)."""
    return bool(level & 1)


def char_from_bidi_type(char_type: CharType | ParType) -> str:
    """Return the one-character debug symbol of a bidi or paragraph type."""
    return _TYPE_CHARS.get(char_type, "?")