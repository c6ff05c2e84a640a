# torrest

Building blocks for a torrent streaming engine. Everything is in the
standard library; the package has no third-party dependencies.

- `torrest.settings` holds the engine settings: `Settings`, `ProxySettings`,
  and the enums `WriteMode`, `EncryptionPolicy` and `ProxyType`. Settings are
  read from JSON (`Settings.load`, `Settings.parse`, `Settings.from_dict`),
  written back (`Settings.save`, `Settings.dump`, `Settings.to_dict`) and
  checked with `validate()`. Keys missing from the JSON keep their defaults.
- `torrest.validation` has the checks that settings use: `validate(name,
  value, *rules)` with the rules `gt`, `gte`, `lt`, `lte` and `not_empty`. The
  first rule that fails raises `ValidationError`, a `ValueError`, with a message
  such as `'listen_port' must be less than or equal to 65535`.
- `torrest.log` keeps a shared list of log sinks, which starts with one
  stdout sink. `add_stdout_sink`, `add_file_sink`, `add_callback_sink`,
  `add_logger_sink` and `clear_sinks` change it; `create_logger(name)` makes an
  independent logger, at INFO level, that writes to the sinks present when it
  is created. `LogLevel` lists the levels (`TRACE` to `OFF`), and
  `LogLevel.parse` reads a level name case-insensitively.
- `torrest.utils` has `sanitize_ip_address`, `unescape_string`,
  `join_strings`, `join_path` and `parse_env`.
- `torrest.mime_application` and `torrest.mime_vendor` map file extensions to
  MIME types: `application_types()` for generic `application/*` types and
  `vendor_types()` for `application/vnd.*` types. Each call returns a new dict.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Load settings, or write the defaults if the file does not exist yet:

```python
from pathlib import Path
from torrest.settings import Settings

path = "settings.json"
if Path(path).exists():
    settings = Settings.load(path)
    settings.validate()
else:
    settings = Settings()
    settings.save(path)

print(settings.dump())
```

A failed check names the field:

```python
from torrest.settings import Settings
from torrest.validation import ValidationError

try:
    Settings(session_save=0).validate()
except ValidationError as error:
    print(error)  # 'session_save' must be greater than 0
```

Send every log record to a callback, which receives the `LogLevel` and the
message:

```python
from torrest.log import LogLevel, add_callback_sink, clear_sinks, create_logger

clear_sinks()
add_callback_sink(lambda level, message: print(level.label, message))
logger = create_logger("main")
logger.info("operation=start")  # prints: info operation=start

LogLevel.parse("Warning")  # LogLevel.WARN
```

Look up a MIME type:

```python
from torrest.mime_application import application_types
from torrest.mime_vendor import vendor_types

application_types()[".torrent"]  # "application/x-bittorrent"
vendor_types()[".apk"]           # "application/vnd.android.package-archive"
```

String and environment helpers:

```python
from torrest.utils import parse_env, sanitize_ip_address, unescape_string

sanitize_ip_address("192.168.1.20", 2)  # "192.168.X.XX"
unescape_string("a%20b+c")               # "a b c"; bad escapes raise ValueError
port = parse_env("TORREST_PORT", 8080, int, strict=False)
```

## What it does not do

The package has no command, no HTTP server and no torrent session; it holds
the settings, checks, logging and helpers such an engine is built on. It does
not list network interfaces, and its MIME tables cover only `application/*`
types: there is no lookup for audio, video, image or text extensions, and no
fallback to a default type for unknown extensions.