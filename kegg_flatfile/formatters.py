#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Primitive Formatters - label column and word wrapping.

A KEGG flat-file line is a fixed-width label column followed by content:

    ENTRY       C00001                      Compound
    NAME        H2O;
                Water

Usage:
    from kegg_flatfile.formatters import pad_label, blank_label, wrap_text

    pad_label("NAME", 12)         # 'NAME        '
    blank_label(12)               # 12 spaces
    wrap_text(long_text, 68)      # ['first line', 'second line', ...]
"""

import re
from enum import Enum
from typing import Any, List

_WHITESPACE_RE = re.compile(r'\s+')


def normalize_label(key: Any) -> str:
    """
    Output form of a field id: uppercase, hyphens to underscores.

    >>> normalize_label("mol-weight")
    'MOL_WEIGHT'
    """
    text = key.value if isinstance(key, Enum) else str(key)
    return text.lstrip(':').replace('-', '_').upper()


def canonical_key(key: Any) -> str:
    """
    Internal form of a field id: lowercase, underscores to hyphens.

    "MOL_WEIGHT", "mol_weight", ":mol-weight" all become "mol-weight".
    """
    return str(key).strip().lstrip(':').replace('_', '-').lower()


def pad_label(label: Any, width: int) -> str:
    """
    Left-justify a label to exactly ``width`` characters.

    Longer labels are truncated, never wrapped.
    """
    width = max(width, 0)
    text = str(label)
    if len(text) >= width:
        return text[:width]
    return text.ljust(width)


def blank_label(width: int) -> str:
    """Label column of a continuation line."""
    return ' ' * max(width, 0)


def wrap_text(text: Any, width: int) -> List[str]:
    """
    Greedy word wrap.

    Words are accumulated while the line stays within ``width``. A single
    word longer than ``width`` is kept whole on its own line. Blank input
    yields ``[""]`` so every field occurrence renders at least one line.

    Args:
        text: Text to wrap (non-strings are converted with str())
        width: Maximum line length

    Returns:
        Non-empty list of lines
    """
    text = '' if text is None else str(text)
    words = [w for w in _WHITESPACE_RE.split(text) if w]
    if not words:
        return [""]

    lines = []
    current = ""
    for word in words:
        if not current:
            current = word
        elif len(current) + 1 + len(word) <= width:
            current = f"{current} {word}"
        else:
            lines.append(current)
            current = word
    lines.append(current)
    return lines


def chunk_text(text: str, size: int) -> List[str]:
    """Cut text into pieces of exactly ``size`` characters (last may be shorter)."""
    return [text[i:i + size] for i in range(0, len(text), size)]
