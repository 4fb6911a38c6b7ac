# settingskit

Building blocks for application settings that are addressed by
slash-separated paths (`/a/b/c`):

- a per-path setting record with a change signal;
- a listener that runs one callback when any of several settings change;
- equality rules for comparing setting values;
- safe file saving through a temporary file, with a set of rotating backups
  and support for symbolic links.

It has no dependencies outside the standard library.

## Installation

```
pip install settingskit
```

## Modules

- `settingskit.options`
  - `SettingOption`: flags `DEFAULT`, `DO_NOT_WRITE_TO_JSON`, `REMOTE` and
    `COMPARE_BEFORE_SET`. They can be combined with `|`.
  - `SignalArgs`: a dataclass with the fields `source`, `path`,
    `write_to_file` (default `True`) and `compare_before_set` (default
    `False`). `Source` lists where a change came from: `UNSET`, `SETTER`,
    `UNMARSHAL`, `ON_CONNECT` and `EXTERNAL`.
  - `SaveMethod` (`SAVE_MANUALLY`, `SAVE_ON_EXIT`, `SAVE_ON_SETTING_CHANGE`,
    `SAVE_ALL_THE_TIME`) and `LoadError`. These are plain enumerations for
    code built on top of the package.
- `settingskit.equal`
  - `is_equal(lhs, rhs)`: compares values structurally.
    - Tuples are compared element by element.
    - Dicts must have the same keys, and the values under each key are
      compared.
    - Lists must have the same length. A list that holds only `AnyValue`
      items is compared by length alone.
    - Any other value is compared with `==`.
  - `AnyValue(value)`: an opaque holder. Two holders are equal only when both
    are empty. `has_value` reports whether the holder has contents, and
    `value` returns them or raises `ValueError` when it is empty.
- `settingskit.paths`
  - `real_path(path)`: follows a chain of symbolic links and returns a
    `Path`. A relative link target is resolved against the directory of the
    original path. The final target does not need to exist. A loop raises
    `OSError` with `errno.ELOOP`.
  - `rename_file(source, target)`: moves a file and replaces the target.
- `settingskit.backup`
  - `BackupOptions(enabled=True, num_slots=3)`: `num_slots` must be between
    0 and 255, otherwise `ValueError` is raised.
  - `save_with_backup(path, options, do_write)`.
- `settingskit.settingdata`
  - `Signal`: `connect(callback)` returns a `Connection`. `invoke(*args)`
    calls every connected callback in the order they were connected.
    `len(signal)` gives the number of connected callbacks.
  - `Connection`: `disconnect()` can be called more than once. `connected`
    tells whether the callback is still attached. Used as a context manager,
    it disconnects on exit.
  - `SettingData(path, manager)`: the state of one path, with an `updated`
    signal, `path` and `update_iteration`.
- `settingskit.listener`
  - `SettingListener`: a single callback for many settings.

## Saving with backups

```python
from pathlib import Path
from settingskit.backup import BackupOptions, save_with_backup

def write(target: Path) -> None:
    target.write_text('{"lol": 10}')

save_with_backup("settings.json", BackupOptions(num_slots=3), write)
```

The save runs in four steps:

1. `write` receives `settings.json.tmp` and writes the new contents there.
2. The backups move up one slot: `.bkp-2` becomes `.bkp-3`, then `.bkp-1`
   becomes `.bkp-2`, and so on. The oldest backup is removed.
3. The current file becomes `settings.json.bkp-1`.
4. The temporary file takes the place of the current file.

Symbolic links at the file path and at the backup paths are followed, so
the links themselves stay in place.

Errors are handled like this:

- Any exception raised by `write` propagates, and the existing file and its
  backups are left untouched.
- Failures while moving backups are ignored. For example, on the first save
  there is nothing to move.
- A symbolic link loop raises an error, and so does a failure of the final
  rename.

With `BackupOptions(enabled=False)` no backups are kept. With
`num_slots=1` only `.bkp-1` is kept.

## Setting records and signals

`SettingData` holds its manager weakly. The manager can be any object that
provides two methods:

- `get(path)`, which returns the stored value or `None`;
- `set(path, value, args)`, which returns whether the value was stored.

```python
from settingskit.settingdata import SettingData

class Store:
    def __init__(self):
        self.values = {}

    def get(self, path):
        return self.values.get(path)

    def set(self, path, value, args):
        self.values[path] = value
        return True

store = Store()
data = SettingData("/lol", store)
connection = data.updated.connect(lambda value, args: print("new value", value))

data.marshal(10)           # True; stored through the manager
data.unmarshal()           # 10
data.notify_update(10)     # bumps update_iteration and invokes the signal
connection.disconnect()
```

Once the manager has been garbage collected, `marshal` returns `False` and
`unmarshal` returns `None`.

## Listening for changes

`SettingListener.add_setting(setting, auto_invoke=False)` works with any
object that has a `connect_simple(callback, auto_invoke)` method returning a
`Connection`.

```python
from settingskit.listener import SettingListener
from settingskit.settingdata import Signal

class Watched:
    def __init__(self):
        self.updated = Signal()

    def connect_simple(self, callback, auto_invoke):
        if auto_invoke:
            callback()
        return self.updated.connect(lambda *args: callback())

a, b = Watched(), Watched()
with SettingListener(lambda: print("something changed")) as listener:
    listener.add_setting(a, auto_invoke=True)   # prints once right away
    listener.add_setting(b)
    b.updated.invoke(42)                        # prints again
```

The listener also provides these methods:

- `invoke()` runs the callback by hand.
- `set_callback(callback)` replaces the callback.
- `reset_callback()` clears the callback, and later updates then do nothing.

Leaving the `with` block clears the callback and disconnects every
connection the listener made.

## What the package does not do

There is no settings manager in this package. It does not keep a JSON
document, it does not load or save settings files, and it has no typed
setting handle. The objects that `SettingData` and `SettingListener` work
with must be supplied by the caller, as in the examples above.
`SettingOption`, `SaveMethod` and `LoadError` are provided as values only.
Nothing in the package acts on them.

## Running the tests

```
pip install -e .[test]
pytest
```