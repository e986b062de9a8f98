"""Naming and layout rules for generated Go source.

These functions know nothing about schema trees. They turn Parquet names into
exported Go identifiers, assemble parquet-go struct tags and convert between
the compact form the renderer emits and gofmt-style indentation.
"""

import re
from typing import Iterable, Tuple

INVALID_HEAD_PREFIX = "PARGO_PREFIX_"

_SPACES = re.compile(" +")

# Characters that would end the tag literal or split a tag entry
_TAG_BREAKING = re.compile(r'["`\\,=\x00-\x1f\x7f]')


def go_field_name(name: str) -> str:
    """Convert a Parquet field name into an exported Go identifier.

    Bytes outside ``[A-Za-z0-9_]`` are replaced with their decimal value, the
    first letter is upper-cased, and names that do not start with a letter
    get ``PARGO_PREFIX_`` so they stay exported identifiers.

    Args:
        name: Field name as stored in the Parquet file

    Returns:
        A valid, exported Go identifier

    Example:
        >>> go_field_name("shoe-brand")
        'Shoe45brand'
        >>> go_field_name("_id")
        'PARGO_PREFIX__id'
    """
    if not name:
        return name

    parts = []
    for byte in name.encode("utf-8"):
        char = chr(byte)
        if byte < 128 and (char.isalnum() or char == "_"):
            parts.append(char)
        else:
            parts.append(str(byte))
    ident = "".join(parts)

    head = ident[0]
    if "a" <= head <= "z" or "A" <= head <= "Z":
        return head.upper() + ident[1:]
    return INVALID_HEAD_PREFIX + ident


def is_tag_safe(value: str) -> bool:
    """Check that a value can be pasted into a parquet-go struct tag unescaped."""
    return not _TAG_BREAKING.search(value)


def struct_tag(pairs: Iterable[Tuple[str, str]]) -> str:
    """Build a parquet-go struct tag from ordered key/value pairs.

    Args:
        pairs: Tag entries in output order

    Returns:
        Tag literal such as ``parquet:"name=id, type=INT32"`` in backticks
    """
    body = ", ".join(f"{key}={value}" for key, value in pairs)
    return f'`parquet:"{body}"`'


def indent_go_source(text: str) -> str:
    """Indent compact Go source with one tab per open brace.

    Args:
        text: Source with one declaration element per line and no indentation

    Returns:
        The same source with gofmt-style leading tabs
    """
    lines = []
    depth = 0
    for raw in text.split("\n"):
        line = raw.strip()
        if line.startswith("}"):
            depth = max(depth - 1, 0)
        lines.append("\t" * depth + line if line else line)
        if line.endswith("{"):
            depth += 1
    return "\n".join(lines)


def compact_go_source(text: str) -> str:
    """Reduce Go source to the renderer's compact form for comparison.

    Tabs are dropped, runs of spaces collapse to one and trailing newlines are
    stripped, which undoes ``indent_go_source`` as well as gofmt alignment.
    """
    text = text.replace("\t", "")
    text = _SPACES.sub(" ", text)
    return text.rstrip("\n")
