#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Record - one KEGG entry as a read-only mapping.

Field ids are normalized once, on construction, to the canonical internal
form (lowercase, hyphenated). "MOL_WEIGHT", "mol_weight" and "mol-weight"
all address the same slot, so the registry, emitters and extractors never
need to try several spellings.

Field values stay as supplied by the caller:

    str / int / float      scalar
    list / tuple           multi-value (elements may be lists or mappings)
    mapping                nested sub-fields (REFERENCE)
    multi-line str         pre-rendered block (ATOM, BOND, KCF, HIERARCHY)

Usage:
    from kegg_flatfile.record import Record

    record = Record({"ENTRY": "C00001", "Mol_Weight": "18.0153",
                     "record_type": "compound"})
    record["mol-weight"]        # '18.0153'
    record.get("MOL_WEIGHT")    # '18.0153'
    record.record_type          # RecordType.COMPOUND
"""

from typing import Any, Dict, Iterator, Mapping, Optional

from config.constants import RECORD_TYPE_ALIASES, RECORD_TYPE_KEY
from config.logging_config import get_logger

from .formatters import canonical_key
from .record_types import RecordType

logger = get_logger(__name__)


def normalize_value(value: Any) -> Any:
    """Canonicalize keys of nested mappings, recursively through lists."""
    if isinstance(value, Mapping):
        return normalize_mapping(value)
    if isinstance(value, (list, tuple)):
        return [normalize_value(item) for item in value]
    return value


def normalize_mapping(data: Mapping) -> Dict[str, Any]:
    """
    Copy a mapping with canonical keys.

    When two keys collapse to the same canonical id, a key already in
    canonical form wins; otherwise the first one seen is kept.
    """
    result: Dict[str, Any] = {}
    exact = set()
    for raw_key, value in data.items():
        key = canonical_key(raw_key)
        is_exact = isinstance(raw_key, str) and raw_key == key
        if key in result:
            if key in exact or not is_exact:
                logger.debug(f"Duplicate field {raw_key!r} ignored (already set as {key!r})")
                continue
        result[key] = normalize_value(value)
        if is_exact:
            exact.add(key)
    return result


class Record(Mapping):
    """
    Read-only KEGG entry.

    Attributes:
        record_type: Resolved RecordType (UNKNOWN when absent or unrecognized).
        declared_type: Type value as supplied, before resolution.
    """

    def __init__(self, data: Optional[Mapping] = None, record_type: Any = None):
        """
        Args:
            data: Field mapping, keys in any case / separator style
            record_type: Explicit type, overrides the one stored in data
        """
        fields = normalize_mapping(data or {})

        raw_type = record_type
        for alias in RECORD_TYPE_ALIASES:
            value = fields.pop(alias, None)
            if raw_type is None and value is not None:
                raw_type = value

        self._fields = fields
        self.declared_type = raw_type
        self.record_type = RecordType.from_value(raw_type)

    @classmethod
    def coerce(cls, data: Any, record_type: Any = None) -> 'Record':
        """Return data unchanged if it is already a Record (and no type is forced)."""
        if isinstance(data, Record) and record_type is None:
            return data
        if isinstance(data, Record):
            return cls(dict(data._fields), record_type=record_type)
        return cls(data, record_type=record_type)

    def __getitem__(self, key: Any) -> Any:
        return self._fields[canonical_key(key)]

    def __contains__(self, key: Any) -> bool:
        return canonical_key(key) in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict including the record type."""
        data = dict(self._fields)
        data[RECORD_TYPE_KEY] = self.record_type.value
        return data

    def __repr__(self) -> str:
        entry = self._fields.get("entry", "")
        return f"<Record(type={self.record_type.value}, entry={entry!r}, fields={len(self)})>"
