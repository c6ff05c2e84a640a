"""Small string, path and environment helpers."""

from __future__ import annotations

import os
import re
import string
from pathlib import Path
from typing import Any, Callable, Iterable, TypeVar

T = TypeVar("T")

_SEPARATORS = re.compile(r"([:.])")


def sanitize_ip_address(ip: str, leading_groups: int = 2) -> str:
    """Mask all but the first ``leading_groups`` groups of an IP address with X."""
    out = []
    count = 0
    for piece in _SEPARATORS.split(ip):
        if piece in (":", "."):
            out.append(piece)
        elif piece:
            out.append(piece if count < leading_groups else "X" * len(piece))
            count += 1
    return "".join(out)


def join_strings(values: Iterable[str], delimiter: str) -> str:
    """Join ``values`` with ``delimiter`` between them."""
    return delimiter.join(values)


def _hex_digit(char: str | None) -> int:
    if char is None or char not in string.hexdigits:
        raise ValueError("Invalid escaped string")
    return int(char, 16)


def unescape_string(text: str) -> str:
    """Decode a URL-encoded string, turning '+' into spaces."""
    out = bytearray()
    chars = iter(text)
    for char in chars:
        if char == "+":
            out += b" "
        elif char != "%":
            out += char.encode("utf-8", "surrogateescape")
        else:
            high = _hex_digit(next(chars, None))
            low = _hex_digit(next(chars, None))
            out.append(high * 16 + low)
    return out.decode("utf-8", "surrogateescape")


def parse_env(
    name: str,
    default: T,
    convert: Callable[[str], Any] = str,
    strict: bool = True,
) -> Any:
    """Read and convert environment variable ``name``.

    Returns ``default`` when the variable is unset. When conversion fails,
    raises ValueError if ``strict`` is set, otherwise returns ``default``.
    """
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return convert(raw)
    except (ValueError, TypeError):
        if strict:
            raise ValueError(f"Unable to parse {name} environment variable") from None
        return default


def join_path(base: str | os.PathLike, *args: str | os.PathLike) -> Path:
    """Join path components; an absolute component replaces everything before it."""
    path = Path(base)
    for arg in args:
        part = Path(arg)
        path = part if part.is_absolute() else path / part
    return path