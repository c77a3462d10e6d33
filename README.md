# jlogkit

This package provides the basic parts of a logging system: levels, log
records, one-time error reporting and log file name patterns.

## Modules

### `jlogkit.levels`

- `Level(name, value, resource_bundle_name=None)` is a named level with an
  integer value. Each new level is added to a registry that can be looked up
  by name or by value. Two levels are equal when their values are equal. The
  hash of a level is its value, levels sort by value, `int(level)` returns
  the value and `str(level)` returns the name. The `localized_name` property
  returns the name.
- The standard levels are `OFF`, `SEVERE` (1000), `WARNING` (900), `INFO`
  (800), `CONFIG` (700), `FINE` (500), `FINER` (400), `FINEST` (300) and
  `ALL`. `OFF` is the largest 32-bit integer and `ALL` is the smallest. They
  are also available as class attributes, for example `Level.INFO`.
  `STANDARD_LEVELS` holds them in that order.
- `parse(name)` looks the name up among the known levels. If that finds
  nothing, it reads the name as a 32-bit integer and looks up a level with
  that value. If no such level exists, it creates a new level with that name
  and value. A name that is neither raises `ValueError('Bad level "<name>"')`.
- `find_level(name)` does the same lookup but returns `None` where `parse`
  would raise.

```python
from jlogkit import levels

levels.parse("WARNING") is levels.WARNING   # True
levels.parse("800") is levels.INFO          # True
levels.find_level("NOPE")                   # None
levels.INFO < levels.SEVERE                 # True
```

### `jlogkit.records`

`LogRecord` is a dataclass with these fields: `level`, `message`,
`parameters`, `thrown`, `logger_name`, `resource_bundle` (a mapping of
strings), `resource_bundle_name`, `source_class_name`, `source_method_name`,
`thread_id`, `instant` and `sequence_number`.

The thread id defaults to the current thread. The instant defaults to the
current UTC time. Sequence numbers increase from one record to the next. The
`millis` property reads or sets the instant as milliseconds since the epoch.
A `level` of `None` raises `TypeError`.

```python
from jlogkit.levels import WARNING
from jlogkit.records import LogRecord

record = LogRecord(WARNING, "disk {0} is {1}% full", ("sda1", 93))
record.millis = 0   # record.instant is now 1970-01-01T00:00:00+00:00
```

### `jlogkit.errors`

- `ErrorCode` is an `IntEnum` with these members: `GENERIC_FAILURE` (0),
  `WRITE_FAILURE`, `FLUSH_FAILURE`, `CLOSE_FAILURE`, `OPEN_FAILURE` and
  `FORMAT_FAILURE` (5).
- `ErrorManager(stream=None)` reports only the first error it is given.
  Calling `error(msg, exc, code)` writes
  `jlogkit.ErrorManager: <code>: <msg>` to the stream, followed by the
  exception's traceback if there is one. Every later call does nothing. The
  stream defaults to standard error.

### `jlogkit.filepattern`

`generate(pattern, count=1, generation=0, unique=0)` expands a file name
pattern into a `pathlib.Path`.

| Token | Meaning                                            |
|-------|----------------------------------------------------|
| `%t`  | the system temporary directory (home if none)      |
| `%h`  | the user's home directory                          |
| `%g`  | the generation number                              |
| `%u`  | the unique number                                  |
| `%%`  | a literal `%`                                      |

The token letters are case-insensitive. If `count` is greater than 1 and the
pattern has no `%g`, `.<generation>` is appended to the name. If `unique` is
greater than 0 and the pattern has no `%u`, `.<unique>` is appended too.
Using `%h` while the real and effective user ids differ raises `OSError`.

```python
from jlogkit.filepattern import generate

generate("logs/app%g.log", 3, 1)   # Path("logs/app1.log")
generate("app.log", 3, 2, 1)       # Path("app.log.2.1")
generate("%t/run%u.log", 1, 0, 4)  # <tempdir>/run4.log
```

## What this package does not do

The package has no handlers and no formatters. It does not write log output
to the console, to streams, to sockets or to files. It does not rotate log
files or take lock files, and it has no logger hierarchy. `generate` works
out file names but creates no files.

## Install

```
pip install jlogkit
```

The package has no runtime dependencies. To run the tests, install the test
extra and run pytest:

```
pip install "jlogkit[test]"
pytest
```