# oogabooga

Building blocks for game code, in pure Python with no dependencies.

## Modules

- `oogabooga.vectors`: immutable `Vector2`, `Vector3`, `Vector4` (float) and
  `Vector2i`, `Vector3i`, `Vector4i` (integer). All support `+`, `-`, `*`
  (by a vector or a number), `/`, unary `-`, `abs()`, iteration and indexing,
  and have `scalar`, `zero`, `one`, `length` and `average`. Integer division
  truncates toward zero. The float vectors add `lerp`, `normalize` (the zero
  vector stays zero) and `dot`; `Vector2.cross` returns a number and
  `Vector3.cross` a `Vector3`. `to_int` and `to_float` convert between kinds.
  `Vector3` and `Vector4` have swizzle properties such as `xy`, `xyz`, and
  aliases `r`, `g`, `b`, `a` (and `left`, `bottom`, `right`, `top` on
  `Vector4`). `rotate_point_around_pivot` rotates a `Vector2` about another.
- `oogabooga.matrices`: immutable, row-major `Matrix4` and `Matrix3`, multiplied
  with `@`. Constructors: `scalar`, `identity`, `make_translation`,
  `make_rotation`, `make_scale`, and on `Matrix4` also `make_rotation_z` and
  `make_orthographic_projection`. Each has `translate`, `rotate`, `scale`,
  `transform` and `inverse`; a singular matrix inverts to the zero matrix.
  `Matrix3.to_matrix4` embeds a 2D transform into a 4x4 matrix.
- `oogabooga.hash_table`: `HashTable`, a flat table of `(hash, value)` entries
  in insertion order. Keys that hash equal are treated as the same key.
  Methods: `add` (may add duplicates), `set` (returns whether the key was new),
  `find` (value or `None`), `contains`, `get_nth_value`, `reserve`, `reset`,
  `destroy`; it also supports `in`, `len()`, iteration and `table[key]`.
  Optional `key_type` and `value_type` are checked on insert.
- `oogabooga.input`: `KeyCode`, `InputStateFlags`, `InputAxisFlags`,
  `InputEventKind`, `InputEvent`, `Deadzones` and `InputFrame`. `InputFrame`
  answers `is_key_down`, `is_key_up`, `is_key_just_pressed`,
  `is_key_just_released` and `has_key_state`, and the `consume_key_down`,
  `consume_key_just_pressed` and `consume_key_just_released` forms that clear
  the flag after reading it. Invalid key codes and impossible state
  combinations raise `ValueError`.
- `oogabooga.memory`: a simulated address space. `Heap` is a best-fit
  free-list heap made of page-aligned blocks that merges freed neighbours; it
  returns integer addresses and keeps real bytes behind them (`alloc`,
  `dealloc`, `realloc`, `read`, `write`, `allocation_size`, `free_nodes`,
  `sanity_check`). Errors raise `HeapError`. `TemporaryStorage` is a ring that
  wraps to its start (printing one warning) when it overflows; `Arena` is a
  bump allocator; `InitializationArena` raises `MemoryError` when full. Helpers:
  `align_next`, `align_previous`, `get_next_power_of_two`, `KB`, `MB`, `GB`.
- `oogabooga.log`: `LogLevel`, `default_logger` (writes a level prefix and the
  message to a stream, stdout by default), `version_string` and
  `version_number`.

## Install

```
pip install .
```

## Example

```python
from oogabooga.vectors import Vector2, Vector3
from oogabooga.matrices import Matrix4
from oogabooga.hash_table import HashTable
from oogabooga.input import InputFrame, KeyCode, InputStateFlags
from oogabooga.log import version_string

v = Vector2(3.0, 4.0)
print(v.length())          # 5.0
print(v.normalize())       # Vector2(x=0.6, y=0.8)

m = Matrix4.identity().translate(Vector3(1.0, 2.0, 3.0))
print(m.inverse() @ m == Matrix4.identity())  # True

table = HashTable()
table.set("answer", 42)
print(table.find("answer"))  # 42

frame = InputFrame()
frame.key_states[KeyCode.SPACEBAR] = InputStateFlags.DOWN | InputStateFlags.JUST_PRESSED
print(frame.consume_key_just_pressed(KeyCode.SPACEBAR))  # True
print(frame.is_key_just_pressed(KeyCode.SPACEBAR))       # False

print(version_string())  # 0.01.008
```

## What it does not do

There is no window, graphics, audio or operating-system event loop here.
`InputFrame` holds whatever state the calling code puts into it; nothing in
the package reads a keyboard, mouse or gamepad. The memory module manages a
simulated address space and does not reserve or protect real memory pages.

## Tests

```
pip install .[test]
pytest
```