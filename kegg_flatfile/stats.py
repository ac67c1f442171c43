#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Statistics utilities for summarizing KEGG record collections.

Provides:
- Field frequency and coverage (which fields appear in records)
- Distinct values and value frequencies of one field
- Record summaries (counts by type, sample ids)
- CSV projection for downstream analysis

Records are read as plain mappings; nothing here calls the serializer.

Usage:
    from kegg_flatfile.stats import summarize_entries, entries_to_csv

    summary = summarize_entries(records)
    print(summary.total_count, summary.by_type)

    csv_text = entries_to_csv(records, ["entry", "name", "formula"])
"""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Set, Union

from config.logging_config import get_logger

from .errors import OutputWriteError
from .extractors import entry_type, get_field, unique_organism_codes
from .formatters import canonical_key
from .record_types import RecordType

logger = get_logger(__name__)


def _key(field_id: Any) -> str:
    return canonical_key(field_id)


def _is_type_key(key: str) -> bool:
    return key in ("record-type", "entry-type")


# =============================================================================
# Field analysis
# =============================================================================

def field_frequency(entries: Iterable[Mapping]) -> Dict[str, int]:
    """
    How many entries contain each field.

    Returns:
        field -> count, most frequent first
    """
    counts = Counter(
        _key(k) for entry in entries for k in entry if not _is_type_key(_key(k))
    )
    return dict(counts.most_common())


def field_coverage(entries: Iterable[Mapping]) -> Optional[Dict[str, float]]:
    """
    Percentage (0-100) of entries containing each field.

    Returns None for an empty collection.
    """
    entries = list(entries)
    if not entries:
        return None
    total = len(entries)
    return {k: 100.0 * v / total for k, v in field_frequency(entries).items()}


def fields_present(entry: Mapping) -> Set[str]:
    """Fields of an entry that hold a value."""
    return {_key(k) for k, v in entry.items() if v is not None and not _is_type_key(_key(k))}


def missing_fields(entry: Mapping, expected_fields: Iterable[Any]) -> List[str]:
    """Expected fields absent from an entry, in the expected order."""
    present = fields_present(entry)
    return [_key(f) for f in expected_fields if _key(f) not in present]


# =============================================================================
# Distinct values
# =============================================================================

def _flatten(value: Any) -> Iterable[Any]:
    if isinstance(value, (list, tuple)):
        for item in value:
            yield from _flatten(item)
    elif value is not None:
        yield value


def distinct_values(entries: Iterable[Mapping], field_id: Any) -> Set[str]:
    """Distinct non-blank values of a field, nested lists flattened."""
    values = set()
    for entry in entries:
        for value in _flatten(get_field(entry, field_id)):
            text = str(value)
            if text.strip():
                values.add(text)
    return values


def distinct_count(entries: Iterable[Mapping], field_id: Any) -> int:
    return len(distinct_values(entries, field_id))


def value_frequency(entries: Iterable[Mapping], field_id: Any) -> Dict[str, int]:
    """
    Frequency of the values of a field; list values count each element.

    Returns:
        value -> count, most frequent first
    """
    counts: Counter = Counter()
    for entry in entries:
        value = get_field(entry, field_id)
        if value is None:
            continue
        items = value if isinstance(value, (list, tuple)) else [value]
        counts.update(str(item) for item in items)
    return dict(counts.most_common())


# =============================================================================
# Summaries
# =============================================================================

@dataclass
class EntrySummary:
    """
    Overview of a record collection.

    Attributes:
        total_count: Number of records.
        by_type: Record count per type (None for untyped records).
        field_frequency: Field -> number of records containing it.
        sample_ids: ENTRY values of the first five records.
    """
    total_count: int = 0
    by_type: Dict[Optional[RecordType], int] = field(default_factory=dict)
    field_frequency: Dict[str, int] = field(default_factory=dict)
    sample_ids: List[Any] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_count": self.total_count,
            "by_type": {(t.value if t else None): c for t, c in self.by_type.items()},
            "field_frequency": dict(self.field_frequency),
            "sample_ids": list(self.sample_ids),
        }


def type_counts(entries: Iterable[Mapping]) -> Dict[RecordType, int]:
    """Record count per type; untyped records are not counted."""
    return dict(Counter(t for t in (entry_type(e) for e in entries) if t is not None))


def entries_by_type(entries: Iterable[Mapping]) -> Dict[Optional[RecordType], List[Mapping]]:
    groups: Dict[Optional[RecordType], List[Mapping]] = {}
    for entry in entries:
        groups.setdefault(entry_type(entry), []).append(entry)
    return groups


def summarize_entries(entries: Iterable[Mapping], sample_size: int = 5) -> EntrySummary:
    entries = list(entries)
    return EntrySummary(
        total_count=len(entries),
        by_type=dict(Counter(entry_type(e) for e in entries)),
        field_frequency=field_frequency(entries),
        sample_ids=[
            get_field(e, "id") or get_field(e, "entry") for e in entries[:sample_size]
        ],
    )


def quick_stats(entries: Iterable[Mapping]) -> Dict[str, Any]:
    """Counts for a quick look: records, types, distinct fields, organisms."""
    entries = list(entries)
    return {
        "count": len(entries),
        "types": type_counts(entries),
        "fields": len(field_frequency(entries)),
        "organisms": len(unique_organism_codes(entries)),
    }


def format_summary(entries: Iterable[Mapping], top_fields: int = 10) -> str:
    """Human-readable summary text."""
    summary = summarize_entries(entries)
    lines = ["=== KEGG Entry Summary ===", f"Total entries: {summary.total_count}", "", "By type:"]

    by_type = sorted(summary.by_type.items(), key=lambda item: -item[1])
    for record_type, count in by_type:
        name = record_type.value if record_type else "unknown"
        lines.append(f"  {name}: {count}")

    lines.extend(["", f"Top {top_fields} fields:"])
    for field_id, count in list(summary.field_frequency.items())[:top_fields]:
        lines.append(f"  {field_id}: {count}")

    sample = ", ".join(str(s) for s in summary.sample_ids if s is not None)
    lines.extend(["", f"Sample IDs: {sample}"])
    return "\n".join(lines)


# =============================================================================
# CSV export
# =============================================================================

def escape_csv_field(value: Any) -> str:
    """Quote a value containing commas, quotes or line breaks."""
    text = "" if value is None else str(value)
    if any(ch in text for ch in (',', '"', '\n', '\r')):
        return '"' + text.replace('"', '""') + '"'
    return text


def _csv_cell(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return "; ".join(str(v) for v in _flatten(value))
    return value


def entry_to_csv_row(entry: Mapping, fields: Sequence[Any], separator: str = ",") -> str:
    """One CSV row; list values are joined with '; '."""
    return separator.join(escape_csv_field(_csv_cell(get_field(entry, f))) for f in fields)


def entries_to_csv(entries: Iterable[Mapping], fields: Sequence[Any],
                   header: bool = True, separator: str = ",") -> str:
    """
    Project records onto columns.

    Args:
        entries: Records or mappings
        fields: Field ids, one per column
        header: Include a header row with the field ids
        separator: Column separator
    """
    rows = []
    if header:
        rows.append(separator.join(_key(f) for f in fields))
    rows.extend(entry_to_csv_row(e, fields, separator) for e in entries)
    return "\n".join(rows)


def write_csv(output_path: Union[str, Path], entries: Iterable[Mapping],
              fields: Sequence[Any], **options) -> Path:
    """
    Write a CSV projection of records to a file.

    Raises:
        OutputWriteError: The file could not be written
    """
    output_path = Path(output_path)
    text = entries_to_csv(entries, fields, **options)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Cannot write {output_path}: {e}") from e
    logger.info(f"Wrote CSV {output_path}")
    return output_path.absolute()
