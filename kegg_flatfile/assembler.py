#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Record Assembler - renders a whole record as a list of lines.

Fields are emitted in the registry order of the record type; records of an
unknown type keep their own key order. Each field goes through exactly one
emission path:

    reference            -> FieldEmitter.emit_reference
    aaseq / ntseq        -> FieldEmitter.emit_sequence
    other special blocks -> FieldEmitter.emit_block
    everything else      -> FieldEmitter.emit_field

Every record ends with the "///" terminator line.
"""

from typing import Any, List, Mapping, Optional, Sequence

from config.constants import RECORD_TERMINATOR
from config.logging_config import get_logger

from .emitters import FieldEmitter
from .field_registry import classify_field, field_order
from .record import Record
from .record_types import BlockKind, RecordType
from .render_config import RenderConfig

logger = get_logger(__name__)


class RecordAssembler:
    """
    Assembles flat-file lines for one record at a time.

    Stateless apart from its RenderConfig; one instance can serve any number
    of records, from any number of threads.
    """

    def __init__(self, config: Optional[RenderConfig] = None, emitter: Optional[FieldEmitter] = None):
        self.emitter = emitter or FieldEmitter(config)
        self.config = self.emitter.config

    def resolve_field_order(self, record: Record, record_type: RecordType) -> Sequence[str]:
        """Registry order for known types, otherwise the record's own keys."""
        order = field_order(record_type)
        if order is None:
            return list(record.keys())

        extra = [key for key in record if key not in order]
        if extra:
            logger.debug(f"Fields not in {record_type.value} order are skipped: {extra}")
        return order

    def emit(self, field_id: str, value: Any) -> List[str]:
        """Route one field to its emission strategy."""
        kind = classify_field(field_id)

        if kind is BlockKind.REFERENCE:
            return self.emitter.emit_reference(value)
        if kind is BlockKind.SEQUENCE:
            return self.emitter.emit_sequence(field_id, value)
        if kind.is_special:
            return self.emitter.emit_block(field_id, value)
        return self.emitter.emit_field(field_id, value)

    def assemble(self, record: Mapping, record_type: Any = None) -> List[str]:
        """
        Render a record to lines.

        Args:
            record: Record or plain mapping (keys in any spelling)
            record_type: Forces the type; defaults to the record's own type

        Returns:
            Lines of the record, the last one always "///"
        """
        record = Record.coerce(record)
        declared = record_type if record_type is not None else record.declared_type
        resolved = RecordType.from_value(declared)
        if resolved is RecordType.UNKNOWN and declared not in (None, RecordType.UNKNOWN, "unknown"):
            logger.warning(f"Unknown record type {declared!r}, using record key order")

        lines: List[str] = []
        for field_id in self.resolve_field_order(record, resolved):
            value = record.get(field_id)
            if value is None:
                continue
            try:
                lines.extend(self.emit(field_id, value))
            except (TypeError, ValueError) as e:
                logger.warning(f"Field {field_id!r} omitted from {resolved.value} record: {e}")

        lines.append(RECORD_TERMINATOR)
        return lines


def assemble_record(record: Mapping, record_type: Any = None,
                    config: Optional[RenderConfig] = None) -> List[str]:
    """Convenience wrapper around RecordAssembler.assemble."""
    return RecordAssembler(config).assemble(record, record_type)
