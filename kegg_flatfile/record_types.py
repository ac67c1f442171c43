#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Record Types

Closed set of KEGG database entry types plus the classification of fields
that need non-default emission.
"""

from enum import Enum
from typing import Any


class RecordType(Enum):
    """
    KEGG entry types supported by the serializer.

    UNKNOWN is the fallback for records without a type, or with a type that
    is not in this set; such records render in their own key order.
    """

    PATHWAY = "pathway"
    BRITE = "brite"
    MODULE = "module"
    KO = "ko"
    GENES = "genes"
    GENOME = "genome"
    COMPOUND = "compound"
    GLYCAN = "glycan"
    REACTION = "reaction"
    RCLASS = "rclass"
    ENZYME = "enzyme"
    NETWORK = "network"
    VARIANT = "variant"
    DISEASE = "disease"
    DRUG = "drug"
    DGROUP = "dgroup"

    UNKNOWN = "unknown"

    @classmethod
    def from_value(cls, value: Any) -> 'RecordType':
        """
        Resolve a record type from an enum member or a loose string.

        "Compound", "COMPOUND", ":compound" and " compound " all resolve to
        COMPOUND. Anything else, including None, resolves to UNKNOWN.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.UNKNOWN
        key = str(value).strip().lstrip(':').lower().replace('_', '-')
        try:
            return cls(key)
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_known(self) -> bool:
        return self is not RecordType.UNKNOWN


class BlockKind(Enum):
    """
    Emission strategy of a field.

    Every field id maps to exactly one kind; STANDARD covers everything not
    listed explicitly.
    """

    SEQUENCE = "sequence"      # AASEQ / NTSEQ
    STRUCTURE = "structure"    # ATOM / BOND / BRACKET (MOL), KCF
    HIERARCHY = "hierarchy"    # BRITE tree
    REFERENCE = "reference"    # REFERENCE with AUTHORS/TITLE/JOURNAL
    STANDARD = "standard"

    @property
    def is_special(self) -> bool:
        """Sequence, structure and hierarchy blocks; REFERENCE is handled apart."""
        return self in (BlockKind.SEQUENCE, BlockKind.STRUCTURE, BlockKind.HIERARCHY)
