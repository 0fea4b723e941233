# parus

The core building blocks of a small game engine, in plain Python with no
third-party dependencies.

## Modules

- `parus.logs`: leveled logging. `LogType` is a bit flag (`DEBUG`, `INFO`,
  `WARNING`, `ERROR`, `FATAL`, plus the `DEFAULT` and `ALL` presets). `Logs(mask,
  stream)` prints lines of the form `YYYY-MM-DD HH:MM:SS LEVEL [file:line] - message`
  for the levels in its mask. By default the mask is `ALL` when Python runs without
  `-O` and `DEFAULT` otherwise, and lines go to standard output. `log_type_name` and
  `current_datetime` are also available.
- `parus.asserts`: `ensure(condition, message, logs=None)` logs `message` as fatal,
  with the caller's file name and line, and raises `AssertionFailed` (a
  `RuntimeError`) when the condition is false.
- `parus.services`: `Services` is a service locator keyed by the exact type of each
  `Service`. It provides `register`, `get` and `clear`. `get` raises
  `ServiceNotFoundError` (a `LookupError`) for an unregistered type.
- `parus.events`: `EventSystem` is a typed publish/subscribe dispatcher over
  `EventType` (`APPLICATION_QUIT`, `KEY_PRESSED`, `KEY_RELEASED`, `CHAR_INPUT`,
  `MOUSE_BUTTON_PRESSED`, `MOUSE_BUTTON_RELEASED`, `MOUSE_MOVED`, `MOUSE_WHEEL`,
  `WINDOW_RESIZED`, `WINDOW_MINIMIZED`).
  - `register_event(event_type, callback, *types)` declares the event's parameter
    types.
  - `fire_event(event_type, *args)` calls the callbacks in registration order. It
    does nothing when nobody has subscribed.
  - A callback registered with different types, or arguments whose exact types
    differ from the declared ones, raise `EventTypeMismatch`.
  - `event_type_name` gives names such as `EVENT_KEY_PRESSED`.
- `parus.utils`: `read_file` (bytes) and `read_text` raise `AssertionFailed` when a
  file cannot be opened. `write_file` accepts bytes or text, storing text as UTF-8.
  The module also has `to_upper_case`, `to_lower_case`, `equals_ignore_case` and
  `trim`. `generate_hash` returns 32 hex digits: the time in nanoseconds followed by
  64 random bits.
- `parus.input`:
  - `Input(events)` tracks pressed `KeyButton`s (virtual-key codes) and
    `MouseButton`s (`LEFT`, `RIGHT`, `MIDDLE`), and the mouse position.
  - It fires key, button and mouse-move events only when the state changes. Character
    and wheel input are always fired.
  - `mouse_offset()` returns the last movement, or `(0, 0)` once that movement has
    already been reported.
  - `key_name` and `mouse_button_name` give names such as `KEY_ESCAPE` and
    `BUTTON_LEFT`.
- `parus.configs`: `Configs(folder="config")` holds group → key → string settings.
  - `load_all()` reads every `.ini` file directly in the folder, in name order.
  - `load_file(path)` reads one file. In a file:
    - `[group]` lines start a group.
    - Lines starting with `;` or `#` are comments.
    - Keys that come before any group go to `common`.
  - `get`, `write` and `get_by_group` read and set values.
  - `get_as_bool` accepts exactly `true` or `false`.
  - `get_as_int` reads a leading 32-bit integer. Both return `None` otherwise.
- `parus.linalg`: `Vector2`, `Vector3`, `Matrix4x4` and `Vertex`, with approximate
  equality (within single-precision epsilon).
  - `Matrix4x4` has `perspective`, `look_at`, `identity` and `transpose`.
  - The uniform buffer objects are `GlobalUbo`, `InstanceUbo` and
    `DirectionalLightUbo`.
  - Every type has `pack()`, which returns little-endian 32-bit float bytes in a GPU
    layout. A `Vector3` is padded to 16 bytes.
  - The helpers are `is_nearly_equal`, `radians` and `degrees`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from parus.events import EventSystem, EventType
from parus.input import Input, KeyButton

events = EventSystem()
events.register_event(EventType.KEY_PRESSED, lambda key: print(key), KeyButton)

keyboard = Input(events)
keyboard.process_key(KeyButton.ESCAPE, True)
assert keyboard.is_key_pressed(KeyButton.ESCAPE)
```

```python
from parus.configs import Configs

configs = Configs("config")
configs.load_all()
width = configs.get_as_int("Window", "width")
```

## What this package does not do

It has no window, no renderer, no user-interface layer and no main loop or command
to start a game. It supplies the services such a program builds on. Feeding
`Input` from a real keyboard and mouse, and drawing with the packed buffers, is up
to the code that uses it.