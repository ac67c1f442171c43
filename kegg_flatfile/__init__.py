#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
KEGG Flat-File Serializer

Renders KEGG database records (compound, pathway, genes, ...) as KEGG
flat-file text: 12-column labels, 80-column lines, "///" terminators.

Layers:
1. Field Registry  - canonical field order per record type
2. Formatters      - label padding, word wrapping
3. Field Emitter   - scalar / list / nested / reference / sequence / block fields
4. Record Assembler - whole record, registry order, terminator
5. Serializer      - single records and batches

Usage:
    from kegg_flatfile import KeggSerializer, RenderConfig

    text = KeggSerializer(RenderConfig()).render(record)
"""

__version__ = "0.1.0"

from .errors import KeggFlatfileError, RenderConfigError, OutputWriteError, RecordInputError
from .record_types import RecordType, BlockKind
from .render_config import RenderConfig, DEFAULT_CONFIG
from .record import Record
from .field_registry import (
    field_order,
    is_known_type,
    all_record_types,
    is_special_block,
    classify_field,
    field_names,
    fields_for_type,
)
from .formatters import pad_label, blank_label, wrap_text, normalize_label, canonical_key
from .emitters import FieldEmitter
from .assembler import RecordAssembler, assemble_record
from .serializer import KeggSerializer, render, render_batch
from .writer import write_kegg_file, load_records, parse_records

__all__ = [
    # Errors
    "KeggFlatfileError",
    "RenderConfigError",
    "OutputWriteError",
    "RecordInputError",
    # Model
    "RecordType",
    "BlockKind",
    "RenderConfig",
    "DEFAULT_CONFIG",
    "Record",
    # Registry
    "field_order",
    "is_known_type",
    "all_record_types",
    "is_special_block",
    "classify_field",
    "field_names",
    "fields_for_type",
    # Formatters
    "pad_label",
    "blank_label",
    "wrap_text",
    "normalize_label",
    "canonical_key",
    # Rendering
    "FieldEmitter",
    "RecordAssembler",
    "assemble_record",
    "KeggSerializer",
    "render",
    "render_batch",
    # I/O
    "write_kegg_file",
    "load_records",
    "parse_records",
]
