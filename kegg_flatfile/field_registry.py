#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Field Registry - canonical field order per KEGG entry type.

Field order follows the DBGET help pages of each database so that a rendered
record lists its fields the way KEGG itself prints them:

- https://www.genome.jp/kegg/kegg3a.html (PATHWAY), kegg3b (BRITE), kegg3c (MODULE)
- https://www.genome.jp/kegg/kegg4.html  (KO, GENES, GENOME)
- https://www.genome.jp/kegg/kegg5.html  (COMPOUND, GLYCAN, REACTION, RCLASS, ENZYME)
- https://www.genome.jp/kegg/kegg6.html  (NETWORK, VARIANT)
- https://www.genome.jp/kegg/kegg7.html  (DISEASE, DRUG, DGROUP)

Field ids are stored in canonical form (lowercase, hyphenated). All lookups
accept any case and either separator.

Usage:
    from kegg_flatfile.field_registry import field_order, is_special_block

    field_order("COMPOUND")      # ('entry', 'name', 'formula', ...)
    field_order("nope")          # None -> caller falls back to record keys
    is_special_block("AASEQ")    # True
"""

from types import MappingProxyType
from typing import Any, FrozenSet, Optional, Tuple

from .formatters import canonical_key
from .record_types import BlockKind, RecordType


FieldOrder = Tuple[str, ...]


# =============================================================================
# FIELD ORDER TABLE
# =============================================================================

_FIELD_TABLE = {
    RecordType.PATHWAY: (
        "entry", "name", "description", "class", "pathway-map", "module",
        "disease", "drug", "organism", "gene", "compound", "rel-pathway",
        "ko-pathway", "reference", "dblinks",
    ),
    RecordType.BRITE: (
        "entry", "name", "description", "hierarchy", "reference", "dblinks",
    ),
    RecordType.MODULE: (
        "entry", "name", "definition", "orthology", "class", "pathway",
        "reaction", "compound", "comment", "reference", "dblinks",
    ),
    RecordType.KO: (
        "entry", "name", "definition", "pathway", "module", "brite",
        "dblinks", "genes", "reference",
    ),
    RecordType.GENES: (
        "entry", "name", "definition", "orthology", "organism", "pathway",
        "module", "brite", "structure", "position", "motif", "dblinks",
        "aaseq", "ntseq",
    ),
    RecordType.GENOME: (
        "entry", "name", "definition", "annotation", "taxonomy", "lineage",
        "data-source", "keywords", "disease", "comment", "reference", "dblinks",
    ),
    # ATOM/BOND/BRACKET are MOL-format blocks
    RecordType.COMPOUND: (
        "entry", "name", "formula", "exact-mass", "mol-weight", "remark",
        "comment", "reaction", "pathway", "enzyme", "brite", "dblinks",
        "atom", "bond", "bracket",
    ),
    RecordType.GLYCAN: (
        "entry", "name", "composition", "mass", "class", "remark", "comment",
        "reaction", "pathway", "enzyme", "brite", "dblinks", "kcf",
    ),
    RecordType.REACTION: (
        "entry", "name", "definition", "equation", "comment", "rclass",
        "enzyme", "pathway", "module", "orthology", "reference", "dblinks",
    ),
    RecordType.RCLASS: (
        "entry", "definition", "rpair", "reaction", "enzyme", "pathway",
        "orthology", "dblinks",
    ),
    RecordType.ENZYME: (
        "entry", "name", "class", "sysname", "reaction", "all-reac",
        "substrate", "product", "comment", "history", "pathway", "orthology",
        "genes", "reference", "dblinks",
    ),
    RecordType.NETWORK: (
        "entry", "name", "definition", "type", "pathway", "disease", "gene",
        "perturbant", "cardinality", "reference", "dblinks",
    ),
    RecordType.VARIANT: (
        "entry", "name", "gene", "variation", "disease", "dblinks",
    ),
    RecordType.DISEASE: (
        "entry", "name", "description", "category", "gene", "marker",
        "env-factor", "carcinogen", "pathogen", "drug", "pathway", "comment",
        "reference", "dblinks",
    ),
    RecordType.DRUG: (
        "entry", "name", "product", "formula", "exact-mass", "mol-weight",
        "sequence", "remark", "class", "efficacy", "target", "metabolism",
        "interaction", "str-map", "other-map", "source", "component",
        "comment", "brite", "dblinks", "atom", "bond",
    ),
    RecordType.DGROUP: (
        "entry", "name", "remark", "member", "class", "comment", "dblinks",
    ),
}

FIELD_REGISTRY = MappingProxyType(_FIELD_TABLE)


# =============================================================================
# REFERENCE SUB-FIELDS
# =============================================================================

# Order of sub-fields inside a REFERENCE (or any nested) block
REFERENCE_SUBFIELDS: FieldOrder = (
    "authors", "title", "journal", "doi", "pubmed", "sequence",
)

# Sub-fields printed under each REFERENCE header line
REFERENCE_BODY_FIELDS: FieldOrder = ("authors", "title", "journal")


# =============================================================================
# SPECIAL BLOCKS
# =============================================================================

_BLOCK_KINDS = MappingProxyType({
    "aaseq": BlockKind.SEQUENCE,
    "ntseq": BlockKind.SEQUENCE,
    "atom": BlockKind.STRUCTURE,
    "bond": BlockKind.STRUCTURE,
    "bracket": BlockKind.STRUCTURE,
    "kcf": BlockKind.STRUCTURE,
    "hierarchy": BlockKind.HIERARCHY,
    "reference": BlockKind.REFERENCE,
})

SPECIAL_BLOCK_FIELDS: FrozenSet[str] = frozenset(
    field_id for field_id, kind in _BLOCK_KINDS.items() if kind.is_special
)


# =============================================================================
# LOOKUPS
# =============================================================================

def field_order(record_type: Any) -> Optional[FieldOrder]:
    """
    Canonical field order for a record type.

    Returns None for unknown types; callers fall back to the record's own
    key order.
    """
    return FIELD_REGISTRY.get(RecordType.from_value(record_type))


def is_known_type(record_type: Any) -> bool:
    return RecordType.from_value(record_type) in FIELD_REGISTRY


def all_record_types() -> FrozenSet[RecordType]:
    """All record types that have a registered field order."""
    return frozenset(FIELD_REGISTRY)


def classify_field(field_id: Any) -> BlockKind:
    """Emission strategy of a field id."""
    return _BLOCK_KINDS.get(canonical_key(field_id), BlockKind.STANDARD)


def is_special_block(field_id: Any) -> bool:
    """True for sequence, chemical-structure and hierarchy fields."""
    return canonical_key(field_id) in SPECIAL_BLOCK_FIELDS


def field_names() -> Tuple[str, ...]:
    """Sorted union of every field id across all record types."""
    return tuple(sorted({f for fields in FIELD_REGISTRY.values() for f in fields}))


def fields_for_type(record_type: Any) -> FrozenSet[str]:
    """Set of field ids of a record type (empty for unknown types)."""
    return frozenset(field_order(record_type) or ())
