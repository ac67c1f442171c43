#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Field Emitter - turns one (field id, value) pair into flat-file lines.

Emission strategies:
- Scalar:     word-wrapped at content width, label on the first line only
- List:       each element wrapped on its own, label on the very first line
- Nested map: bare label header, then indented sub-fields in fixed order
- REFERENCE:  one header per reference with indented AUTHORS/TITLE/JOURNAL
- AASEQ/NTSEQ: residue count header, then fixed-width residue lines
- ATOM/BOND/BRACKET/KCF/HIERARCHY: pre-rendered text passed through

Empty values (None, blank strings, empty collections) produce no lines at
all; that is the only way a field is skipped.

Usage:
    from kegg_flatfile.emitters import FieldEmitter
    from kegg_flatfile.render_config import RenderConfig

    emitter = FieldEmitter(RenderConfig())
    emitter.emit_field("pathway", ["map00010  Glycolysis", "map00020  TCA cycle"])
    # ['PATHWAY     map00010  Glycolysis',
    #  '            map00020  TCA cycle']
"""

import re
from typing import Any, Iterable, List, Mapping, Optional

from .field_registry import REFERENCE_BODY_FIELDS, REFERENCE_SUBFIELDS
from .formatters import (
    blank_label, canonical_key, chunk_text, normalize_label, pad_label, wrap_text,
)
from .render_config import DEFAULT_CONFIG, RenderConfig

_WHITESPACE_RE = re.compile(r'\s+')

# Separator between the parts of a compound list element, e.g. a GENE
# element ["b0008", "talB; transaldolase B"] -> "b0008  talB; transaldolase B"
ITEM_PART_SEPARATOR = "  "

REFERENCE_LABEL = "REFERENCE"


def is_empty_value(value: Any) -> bool:
    """None, blank strings and empty collections are not emitted."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, frozenset, Mapping)):
        return len(value) == 0
    return False


def value_text(value: Any, separator: str = " ") -> str:
    """
    Flatten a value to one line of text.

    Lists are joined with ``separator``, mappings contribute their values in
    order; None parts are dropped.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        value = list(value.values())
    if isinstance(value, (list, tuple)):
        parts = (value_text(part, separator) for part in value if part is not None)
        return separator.join(part for part in parts if part)
    return str(value)


def ordered_subfields(mapping: Mapping) -> List[str]:
    """
    Sub-field keys of a nested map: the reference order first
    (authors, title, journal, doi, pubmed, sequence), then the rest sorted.
    """
    known = [key for key in REFERENCE_SUBFIELDS if key in mapping]
    rest = sorted((key for key in mapping if key not in REFERENCE_SUBFIELDS), key=str)
    return known + rest


class FieldEmitter:
    """
    Renders single fields with one fixed RenderConfig.

    Attributes:
        config: Layout used for every line this emitter produces.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or DEFAULT_CONFIG

    # ========================================================================
    # Label helpers
    # ========================================================================

    def label(self, field_id: Any) -> str:
        """Normalized, padded label column."""
        return pad_label(normalize_label(field_id), self.config.label_width)

    @property
    def blank(self) -> str:
        return blank_label(self.config.label_width)

    def _relabel(self, label_str: str, lines: Iterable[str]) -> List[str]:
        """First line gets the label, every following line the blank label."""
        result = []
        for idx, line in enumerate(lines):
            result.append((label_str if idx == 0 else self.blank) + line)
        return result

    # ========================================================================
    # Generic fields
    # ========================================================================

    def emit_field(self, field_id: Any, value: Any, depth: int = 0) -> List[str]:
        """
        Emit a field according to the shape of its value.

        Args:
            field_id: Field id or pre-built label (e.g. "  AUTHORS")
            value: Scalar, list, mapping
            depth: Nesting level, used for indentation of nested maps

        Returns:
            Output lines (empty for empty values)
        """
        if is_empty_value(value):
            return []

        if isinstance(value, Mapping):
            return self.emit_nested_map(field_id, value, depth)

        label_str = self.label(field_id)

        if isinstance(value, (list, tuple)):
            return self._emit_list(label_str, value)

        return self._relabel(label_str, wrap_text(value_text(value), self.config.content_width))

    def _emit_list(self, label_str: str, items: Iterable[Any]) -> List[str]:
        width = self.config.content_width
        wrapped = []
        for item in items:
            wrapped.extend(wrap_text(value_text(item, ITEM_PART_SEPARATOR), width))
        return self._relabel(label_str, wrapped)

    def emit_nested_map(self, field_id: Any, mapping: Mapping, depth: int = 0) -> List[str]:
        """
        Emit a mapping as a header line followed by indented sub-fields.

            REFERENCE
              AUTHORS   Kanehisa M, Goto S
              TITLE     KEGG: kyoto encyclopedia of genes and genomes.
        """
        if is_empty_value(mapping):
            return []

        lines = [self.label(field_id)]
        indent = self.config.sub_field_indent * (depth + 1)
        for key in ordered_subfields(mapping):
            sub_label = indent + normalize_label(key)
            lines.extend(self.emit_field(sub_label, mapping[key], depth + 1))
        return lines

    # ========================================================================
    # REFERENCE
    # ========================================================================

    def emit_reference(self, value: Any) -> List[str]:
        """
        Emit one reference or a list of references.

        KEGG layout:
            REFERENCE   PMID:12345
              AUTHORS   Name A, Name B, ...
              TITLE     The title of the paper...
              JOURNAL   J Name 123:456-789 (2020)
        """
        if is_empty_value(value):
            return []
        if isinstance(value, (list, tuple)):
            lines = []
            for ref in value:
                lines.extend(self.emit_single_reference(ref))
            return lines
        return self.emit_single_reference(value)

    def emit_single_reference(self, ref: Any) -> List[str]:
        """
        Emit a single REFERENCE block.

        A non-mapping reference is taken as the header identifier itself.
        """
        if is_empty_value(ref):
            return []
        if not isinstance(ref, Mapping):
            return [self.label(REFERENCE_LABEL) + value_text(ref)]

        ref = {canonical_key(key): val for key, val in ref.items()}
        identifier = ref.get("pmid") or ref.get("pubmed") or ""
        lines = [self.label(REFERENCE_LABEL) + value_text(identifier)]

        indent = self.config.sub_field_indent
        for key in REFERENCE_BODY_FIELDS:
            sub_value = ref.get(key)
            if sub_value:
                lines.extend(self.emit_field(indent + normalize_label(key), sub_value, depth=1))
        return lines

    # ========================================================================
    # AASEQ / NTSEQ
    # ========================================================================

    def emit_sequence(self, field_id: Any, value: Any) -> List[str]:
        """
        Emit sequence data: residue count, then fixed-width residue lines.

            AASEQ       120
                        MKVLAAGIVGLLLAGC...   (sequence_width residues)
                        ...

        All whitespace is removed first; lists of fragments are concatenated.
        Lines are cut at exactly ``sequence_width`` characters.
        """
        if is_empty_value(value):
            return []

        sequence = _WHITESPACE_RE.sub("", value_text(value, ""))
        if not sequence:
            return []

        lines = [self.label(field_id) + str(len(sequence))]
        for chunk in chunk_text(sequence, self.config.sequence_width):
            lines.append(self.blank + chunk)
        return lines

    # ========================================================================
    # ATOM / BOND / BRACKET / KCF / HIERARCHY
    # ========================================================================

    def emit_block(self, field_id: Any, value: Any) -> List[str]:
        """
        Emit a pre-rendered block.

        Text is split into lines and relabeled without re-wrapping. Structured
        values (lists, mappings) fall back to scalar emission of their
        flattened text.
        """
        if is_empty_value(value):
            return []

        if isinstance(value, str):
            lines = value.splitlines()
            while lines and not lines[-1].strip():
                lines.pop()
            while lines and not lines[0].strip():
                lines.pop(0)
            return self._relabel(self.label(field_id), lines)

        return self.emit_field(field_id, value_text(value))
