# yenxo

`yenxo` provides `Variant`, a tagged value that works as a small document
object model. A variant holds one of these: null, a boolean, a character,
a fixed-width signed or unsigned integer (8 to 64 bits), a double, a string,
a list of variants or a map from strings to variants. Every value has a
`TypeTag`. When a value is read as another type, the conversion is checked.
A value that does not fit, or has the wrong kind, raises an error. It is
never silently truncated.

## Installation

```
pip install .
```

The package has no runtime dependencies. It supports Python 3.10 and later.

## Modules

- `yenxo.types`: the `TypeTag` enumeration and the checked conversion
  helpers `type_name`, `infer_tag`, `checked_cast` and `checked_equal`.
- `yenxo.variant`: the `Variant` class.
- `yenxo.equality`: `equal`, which compares variants by value.
- `yenxo.json_io`: `from_json`, `to_json`, `to_pretty_json`, `from_python`
  and `to_python`.
- `yenxo.string_conversion`: `to_string`, `to_strings` and `from_string`.
- `yenxo.errors`: the exceptions.

## Building values

```python
from yenxo.types import TypeTag
from yenxo.variant import Variant

empty = Variant()                      # null
count = Variant(7, TypeTag.UINT8)      # explicit tag
name = Variant("ab")                   # inferred: string
number = Variant(5)                    # inferred: int32
items = Variant([Variant(1), "ab"])    # list; items become variants
record = Variant({"x": 6})             # map with string keys
```

When no tag is given, the type comes from the Python value:

- `None` becomes null and `bool` becomes boolean.
- An `int` becomes the narrowest of int32, int64 and uint64 that holds it.
- A `float` becomes a double and a `str` becomes a string.
- A list or tuple becomes a list, and a mapping becomes a map.

If an object has a `to_variant()` method that returns a `Variant`, the
constructor converts the object through that method. A `CHAR` variant can
be built from a one-character string.

## Checked access

Each type has a getter and a variant of the getter that takes a default.
The default is used only when the variant is null.

| Type | Getter | With a default |
|------|--------|----------------|
| boolean | `boolean` | `boolean_or` |
| char | `character` | `character_or` |
| int8 | `int8` | `int8_or` |
| uint8 | `uint8` | `uint8_or` |
| int16 | `int16` | `int16_or` |
| uint16 | `uint16` | `uint16_or` |
| int32 | `int32` | `int32_or` |
| uint32 | `uint32` | `uint32_or` |
| int64 | `int64` | `int64_or` |
| uint64 | `uint64` | `uint64_or` |
| double | `floating` | `floating_or` |
| string | `str` | `str_or` |
| list | `vec` | `vec_or` |
| map | `map` | `map_or` |

The general forms are `as_type(tag)` and `as_or(tag, default)`.
`as_null()` returns `None` for a null variant.

```python
count.int32()          # 7, the value fits
Variant(300).uint8()   # raises VariantIntegralOverflow
Variant("").int32()    # raises VariantBadType
Variant().boolean()    # raises VariantEmpty
Variant().int16_or(1)  # 1
Variant(1.0).int8()    # 1; Variant(1.1).int8() raises VariantIntegralOverflow
```

Booleans never convert to or from numbers. Any integer type converts to a
double. A double converts to an integer type only if it is a whole number
in range.

`modify_vec()` and `modify_map()` return the held list or dict. Changes to
that object change the variant in place. `vec_or()` and `map_or()` return
copies. `copy()` makes a deep copy. Other methods are `type()`, `null()`,
`is_scalar()` and `type_name()`.

## Errors

All errors are in `yenxo.errors`. The three variant errors derive from
`VariantError`, and each one also derives from a built-in exception.

| Exception | Also a | Raised when |
|-----------|--------|-------------|
| `VariantEmpty` | `ValueError` | a value is read from a null variant |
| `VariantBadType` | `TypeError` | the held kind cannot be read as requested, for example `"expected 'boolean', actual 'int32'"` |
| `VariantIntegralOverflow` | `OverflowError` | the number does not fit, for example `"The type 'uint8' can not hold the value '300'"` |
| `StringConversionError` | `ValueError` | a string conversion fails |

## Comparing

`==` is strict. Both variants must have the same tag and equal contents.
A plain Python value on the right-hand side is turned into a variant first.

`yenxo.equality.equal` compares by value:

- Numbers of any width, any signedness, or double compare equal when their
  values are equal.
- Booleans are equal only to booleans.
- Lists and maps are compared element by element with the same rule.

```python
from yenxo.equality import equal

Variant(1, TypeTag.INT8) == Variant(1, TypeTag.UINT64)       # False
equal(Variant(1, TypeTag.INT8), Variant(1, TypeTag.UINT64))  # True
equal(Variant(-1), Variant(0, TypeTag.UINT32))               # False
```

## Text output

`str(variant)` gives a short readable form, for example:

```python
str(Variant({"y": Variant([1, 2])}))   # '{ y: [ 1, 2 ]; }'
```

Null prints as `Null`, booleans print as `1` or `0`, and characters print
as the character itself.

## JSON

```python
from yenxo.json_io import from_json, to_json, to_pretty_json

var = from_json('{"a": "b"}')
to_json(var)          # '{"a":"b"}'
to_pretty_json(var)   # indented by four spaces
```

`from_json` assigns number types as follows:

- A non-negative integer becomes uint32 or uint64.
- A negative integer becomes int32 or int64.
- Any other number becomes a double.

Text that is not valid JSON raises `ValueError`.

`from_python` converts plain Python data into variants, and `to_python`
converts variants back into `None`, `bool`, `int`, `float`, `str`, `list`
and `dict`.

## String conversion of enums

`yenxo.string_conversion` converts enumeration members to and from text.

A member's string forms are found in this order:

1. its `strings` attribute, which may be a sequence or a method returning one;
2. otherwise its value, if that is a string or a tuple of strings;
3. otherwise its name.

The conversion functions use these forms as follows:

- `to_string(member)` gives the first form.
- `to_strings(member, i)` gives form number `i`, and raises
  `StringConversionError` if there is no such form.
- `from_string(EnumType, text)` accepts any form and raises
  `StringConversionError` for unknown text, for example
  `"'e_11' is not of type 'E'"`.

`to_string` also handles numbers and strings. `from_string` with a
non-enum type calls that type with the text.

## What is not included

The package is a library only and installs no command-line tool. It does
not map classes or dataclasses to variants automatically. An object that
should become a variant provides its own `to_variant()` method. JSON is read
from and written to strings only, never to files or streams.

## Running the tests

```
pip install .[test]
pytest
```