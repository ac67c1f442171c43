#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
KEGG Serializer - records to KEGG flat-file text.

The KEGG flat-file format uses:
- 12-character label column (left-aligned, space-padded)
- Content starting at column 13, lines up to 80 characters
- Continuation lines with a blank label column
- "///" after every entry, a blank line between entries in a batch

Usage:
    from kegg_flatfile import KeggSerializer, RenderConfig

    serializer = KeggSerializer()
    text = serializer.render({"entry": "C00001", "name": "H2O; Water",
                              "formula": "H2O", "record_type": "compound"})

    # Custom layout, several records, four worker threads
    serializer = KeggSerializer(RenderConfig(line_width=100))
    text = serializer.render_batch(records, workers=4)

Reference:
    https://www.genome.jp/kegg/document/ (entry formats per database)
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, List, Mapping, Optional

from config.constants import RECORD_SEPARATOR
from config.logging_config import get_logger

from .assembler import RecordAssembler
from .record import Record
from .record_types import RecordType
from .render_config import RenderConfig

logger = get_logger(__name__)


class KeggSerializer:
    """
    Renders records, one at a time or in batches.

    Every record type goes through the same generic path; the type only
    selects the field order. The named entry points (render_pathway,
    render_compound, render_genes) force a type on records that lack one.

    Attributes:
        config: Layout shared by every render of this serializer.
        assembler: Record assembler bound to config.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig.from_settings()
        self.assembler = RecordAssembler(self.config)

    # ========================================================================
    # Single record
    # ========================================================================

    def render_lines(self, record: Mapping, record_type: Any = None) -> List[str]:
        """Lines of one record, terminator included."""
        return self.assembler.assemble(record, record_type)

    def render(self, record: Mapping, record_type: Any = None) -> str:
        """
        Render one record to flat-file text.

        Args:
            record: Record or mapping with a "record_type" / "entry_type" field
            record_type: Overrides the record's own type

        Returns:
            Newline-joined lines ending with "///" (no trailing newline)
        """
        record = Record.coerce(record)
        logger.debug(f"Rendering {record!r}")
        return "\n".join(self.render_lines(record, record_type))

    def render_pathway(self, record: Mapping) -> str:
        return self.render(record, RecordType.PATHWAY)

    def render_compound(self, record: Mapping) -> str:
        return self.render(record, RecordType.COMPOUND)

    def render_genes(self, record: Mapping) -> str:
        return self.render(record, RecordType.GENES)

    # ========================================================================
    # Batches
    # ========================================================================

    def render_all(self, records: Iterable[Mapping], workers: int = 1) -> List[str]:
        """
        Render records individually, preserving input order.

        Args:
            records: Records or mappings
            workers: Thread count; 1 renders sequentially
        """
        records = list(records)
        if workers <= 1 or len(records) < 2:
            return [self.render(record) for record in records]

        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(self.render, records))

    def render_batch(self, records: Iterable[Mapping], workers: int = 1) -> str:
        """Render records separated by one blank line."""
        rendered = self.render_all(records, workers=workers)
        logger.debug(f"Rendered batch of {len(rendered)} records")
        return RECORD_SEPARATOR.join(rendered)


# ============================================================================
# Module-level convenience
# ============================================================================

def render(record: Mapping, config: Optional[RenderConfig] = None) -> str:
    """Render one record with the given (or settings-derived) config."""
    return KeggSerializer(config).render(record)


def render_batch(records: Iterable[Mapping], config: Optional[RenderConfig] = None) -> str:
    """Render several records separated by blank lines."""
    return KeggSerializer(config).render_batch(records)
