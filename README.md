# deskmenu

Building blocks for a dmenu-style application launcher driven by
freedesktop `.desktop` files. It has no dependencies outside the standard
library.

## Modules

- `deskmenu.search_path.get_search_path()` – the `applications/`
  directories under `$XDG_DATA_HOME` and each entry of `$XDG_DATA_DIRS`,
  in that order, keeping only those that exist. Every returned path ends
  with a slash.
- `deskmenu.locale_suffixes` – `LocaleSuffixes` expands a locale name such
  as `en_US.UTF-8@mod` into the variants used by localized keys, most
  specific first, dropping the encoding. `match()` gives a variant's
  priority (0 is best) or `None`; `suffixes()` returns all variants.
  Called without a name it uses `current_messages_locale()`, which sets
  `LC_MESSAGES` from the environment and falls back to the C locale.
- `deskmenu.dynamic_compare.DynamicCompare` – a less-than comparison for
  menu names, case sensitive or ignoring ASCII case as chosen at run time;
  `key()` gives a matching sort key.
- `deskmenu.notify` – `DirectoryWatcher` watches the search path
  directories recursively (ignoring hidden files and directories) and
  reports `FileChange` records with a rank (index into the search path), a
  name relative to that directory and a `ChangeType` (`MODIFIED` or
  `DELETED`). A background thread rescans every half second; `fileno()`
  is readable while changes are pending, so it works with `select` or
  `poll`. `getchanges()` returns and clears them. Use it as a context
  manager or call `close()`.
- `deskmenu.lookup` – `lookup_name()` resolves what the user typed to an
  `ApplicationLookup` (with any text after the name as `args`) or a
  `CommandLookup`. `validate_search_path()` drops relative entries and
  warns about empty and duplicate ones; `parse_log_level()` maps `ERROR`,
  `WARNING`, `INFO` and `DEBUG` to `logging` levels.
- `deskmenu.commands` – `assemble_command()` builds an `Executable` that
  runs a command through `/bin/sh -c`, optionally inside a terminal
  emulator; `i3_assemble_command()` builds a command string for i3's IPC
  `exec`; `execute_app()` replaces the current process with an
  `Executable`, exiting with status 1 if that fails.
- `deskmenu.utilities` – small string, environment and file-descriptor
  helpers (`split`, `join`, `replace`, `get_variable`, `writen`, ...).

## Examples

Locale variants, best match first:

```python
from deskmenu.locale_suffixes import LocaleSuffixes

suffixes = LocaleSuffixes("en_US.UTF-8@mod")
suffixes.suffixes()           # ('en_US@mod', 'en_US', 'en@mod', 'en')
suffixes.match("en")          # 3
suffixes.match("de")          # None
```

Ordering names with or without regard to case:

```python
from deskmenu.dynamic_compare import DynamicCompare

DynamicCompare(False)("G", "a")   # True:  "G" sorts before "a"
DynamicCompare(True)("G", "a")    # False: "a" sorts before "G"
```

Resolving a menu choice; each mapping value is an `(app, is_generic)` pair:

```python
from deskmenu.lookup import lookup_name

mapping = {"Firefox": ("firefox-app", False)}
lookup_name("Firefox --private-window", mapping)
# ApplicationLookup(app='firefox-app', is_generic=False, args=' --private-window')
lookup_name("ls -l", mapping)
# CommandLookup(command='ls -l')
```

Building a command to run:

```python
from deskmenu.commands import assemble_command, i3_assemble_command

assemble_command("htop", "xterm", False).create_argv()
# ['xterm', '-e', '/bin/sh', '-c', 'exec htop']
i3_assemble_command("htop", "xterm", False)
# "xterm -e /bin/sh -c 'htop'"
```

Commands from desktop files are prefixed with `exec` so the shell is
replaced by the program; custom commands are left as typed.

## What it does not do

This is a library only. It installs no launcher command, does not read or
parse `.desktop` files, does not start or talk to dmenu, keeps no usage
history and does not connect to i3 itself. Those pieces are left to the
program that uses these modules.

## Environment

- `XDG_DATA_HOME` (default `$HOME/.local/share/`)
- `XDG_DATA_DIRS` (default `/usr/share/:/usr/local/share/`)