# bidikit

Building blocks for laying out bidirectional text: Unicode bidi character
types, Arabic joining types and the cursive joining algorithm, the run lists
that bidi resolution works on, and removal of bidi marks from a string.

Character data comes from the Python interpreter's own Unicode database
(`unicodedata`), so there are no runtime dependencies.

## Install

```
pip install bidikit
pip install "bidikit[test]"   # with pytest for the test suite
```

## Modules

- `bidikit.types`: the `CharType` enum (bidi classes, with the aliases
  `L`, `R`, `B`, `S`, and a `SENTINEL` member), `ParType` (paragraph
  directions `LTR`, `RTL`, `ON`, `WLTR`, `WRTL`) and the `Flags` option bits
  (including `Flags.DEFAULT` and `Flags.ARABIC`). Functions:
  `get_bidi_type(ch)` accepts a one-character string or a code point and
  raises `ValueError`/`TypeError` for anything else; `is_explicit_or_bn`,
  `is_isolate`, `level_is_rtl` and `char_from_bidi_type` (a one-character
  debug symbol). It also holds constants such as `CHAR_LRM`, `CHAR_RLM`,
  `MAX_EXPLICIT_LEVEL` and `UNICODE_VERSION`.
- `bidikit.joining_types`: `JoiningType` (`U`, `R`, `D`, `C`, `T`, `L`, `G`)
  encoded as mask bits (`MASK_JOINS_RIGHT`, `MASK_JOINS_LEFT`, ...), the
  class tests `is_joining_type_u` ... `is_joining_type_lc`, the queries
  `joins_right`, `joins_left`, `arab_shapes`, `is_join_skipped`,
  `is_join_base_shapes`, `joins_preceding_mask`, `joins_following_mask`,
  `join_shape`, plus `joining_type_name` (returns `"?"` for unknown values)
  and `char_from_joining_type`.
- `bidikit.joining`: `join_arabic(bidi_types, embedding_levels, ar_props)`
  applies the Arabic cursive joining rules and returns a new list of
  properties. Characters at different embedding levels never join; explicit
  codes and boundary neutrals match any level. The three inputs must have
  the same length, else `ValueError`.
- `bidikit.runs`: `Run` (a dataclass with `type`, `pos`, `length`, `level`,
  `isolate_level`, `bracket_type` and links), `RunList` (a circular list
  around a sentinel, iterable, with `len()`, `append`, `remove` and
  `validate`), `encode_bidi_types(bidi_types, bracket_types)` which groups
  equal types into runs (brackets and isolates each get a run of their own),
  and `shadow_run_list(base, over, preserve_length)` which lays the runs of
  `over` onto `base`, consuming `over`.
- `bidikit.legacy`: `Options` (mirroring and mark-reordering switches over a
  `Flags` value, both on by default), `get_type`, `get_type_internal` and
  `remove_bidi_marks`, which strips explicit codes, isolates, boundary
  neutrals, LRM and RLM, compacts the accompanying lists and returns a
  `RemovedMarks` result.
- `bidikit.info`: `version_info`, `debug_status` and `set_debug`.

## Example

```python
from bidikit.types import get_bidi_type
from bidikit.runs import encode_bidi_types

types = [get_bidi_type(ch) for ch in "abc \u05d0\u05d1"]
for run in encode_bidi_types(types, None):
    print(run.pos, run.length, run.type)
```

```python
from bidikit.legacy import remove_bidi_marks

result = remove_bidi_marks("a\u200eb", positions_to_this=[0, 1, 2])
print(result.text)               # "ab"
print(result.positions_to_this)  # [0, -1, 1]
```

## What it does not do

bidikit provides the pieces listed above and no more. It does not resolve
paragraph embedding levels, pair brackets, reorder lines into visual order,
apply Arabic presentation-form shaping or mirroring to a string, or convert
between legacy character sets. There is no command-line tool.

## Tests

```
pytest
```