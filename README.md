# chromeagent

A small text helper for keeping output short and readable.

## Truncating text

`chromeagent.truncate.truncate_str(s, max_chars, suffix)` shortens a string to
at most `max_chars` characters and appends `suffix` when anything was cut off.
It counts characters (code points), not bytes, so accented letters, CJK text
and emoji are never split in the middle.

```python
from chromeagent.truncate import truncate_str

truncate_str("hello world", 5, "...")        # 'hello...'
truncate_str("short", 10, "...")             # 'short'
truncate_str("日本語テストデータ", 3, "...")   # '日本語...'
truncate_str("hello", 0, "...")              # '...'
truncate_str("", 5, "...")                   # ''
```

- A string already within the limit comes back unchanged, with no suffix.
- The suffix is not counted against the limit.
- A negative `max_chars` raises `ValueError`.

## What this package does not do

This package holds only the truncation helper. It has no command-line tool and
does not start, connect to or control a web browser.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```