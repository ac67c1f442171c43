#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Extractors - common data patterns over collections of KEGG records.

All functions read records as plain mappings (Record or dict, keys in any
spelling) and never call the serializer. Functions returning many values
are generators, so large collections are processed lazily.

Common patterns:
- get_pathway_genes:     genes listed in pathway entries
- get_compound_names:    compound names and synonyms
- unique_organism_codes: organism codes of GENES entries
"""

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Set, Tuple, Union

from .formatters import canonical_key
from .record import Record
from .record_types import RecordType

Entries = Union[Mapping, Iterable[Mapping]]


# =============================================================================
# Key access
# =============================================================================

def get_field(entry: Mapping, field: Any) -> Any:
    """
    Field value of an entry, tolerating any key spelling.

    "mol-weight", "MOL_WEIGHT" and "mol_weight" all find the same value.
    """
    if isinstance(entry, Record):
        return entry.get(field)
    if field in entry:
        return entry[field]
    wanted = canonical_key(field)
    for key, value in entry.items():
        if canonical_key(key) == wanted:
            return value
    return None


def entry_type(entry: Mapping) -> Optional[RecordType]:
    """Record type of an entry, or None when it carries no type."""
    if isinstance(entry, Record):
        return entry.record_type if entry.declared_type is not None else None
    value = get_field(entry, "record-type") or get_field(entry, "entry-type")
    if value is None:
        return None
    return RecordType.from_value(value)


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _as_entries(entries: Entries) -> Iterable[Mapping]:
    return [entries] if isinstance(entries, Mapping) else entries


def _first_word(value: Any) -> Optional[str]:
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    words = str(value).split()
    return words[0] if words else None


def _id_pairs(entries: Entries, field: str) -> Iterator[Tuple[Any, Any]]:
    for entry in _as_entries(entries):
        for item in _as_list(get_field(entry, field)):
            if not item:
                continue
            if isinstance(item, (list, tuple)):
                yield tuple(item[:2]) if len(item) >= 2 else (item[0], None)
            else:
                yield (item, None)


# =============================================================================
# Genes
# =============================================================================

def get_pathway_genes(entries: Entries) -> Iterator[Tuple[Any, Any]]:
    """
    Genes of one pathway entry or several.

    Yields:
        (gene_id, description) pairs; description is None for bare ids
    """
    return _id_pairs(entries, "gene")


def genes_by_organism(gene_entries: Iterable[Mapping]) -> Dict[Any, List[Mapping]]:
    """Group GENES entries by their ORGANISM value."""
    groups: Dict[Any, List[Mapping]] = {}
    for entry in gene_entries:
        organism = get_field(entry, "organism")
        if isinstance(organism, list):
            organism = tuple(organism)
        groups.setdefault(organism, []).append(entry)
    return groups


# =============================================================================
# Compounds
# =============================================================================

def get_compound_names(entries: Entries) -> Iterator[str]:
    """All names (primary and synonyms) of compound entries, trimmed."""
    for entry in _as_entries(entries):
        for name in _as_list(get_field(entry, "name")):
            text = str(name).strip() if name is not None else ""
            if text:
                yield text


def compound_formula(entry: Mapping) -> Any:
    return get_field(entry, "formula")


def compound_mass(entry: Mapping) -> Any:
    """
    Molecular weight (falling back to exact mass) as a float.

    A value that does not parse as a number is returned unchanged.
    """
    mass = get_field(entry, "mol-weight") or get_field(entry, "exact-mass")
    if mass is None:
        return None
    try:
        return float(str(mass).strip())
    except ValueError:
        return mass


# =============================================================================
# Organisms
# =============================================================================

def organism_code(entry: Mapping) -> Optional[str]:
    """
    Organism code of a GENES entry, e.g. 'hsa' from 'hsa  Homo sapiens (human)'.
    """
    organism = get_field(entry, "organism")
    if organism is None:
        return None
    return _first_word(organism)


def unique_organism_codes(entries: Iterable[Mapping]) -> Set[str]:
    return {code for code in (organism_code(e) for e in entries) if code}


# =============================================================================
# Pathways
# =============================================================================

def pathway_id(entry: Mapping) -> Optional[str]:
    """Pathway id from the ENTRY field ('map00010  Pathway' -> 'map00010')."""
    value = get_field(entry, "entry")
    if value is None:
        return None
    return _first_word(value)


def pathway_compounds(entry: Mapping) -> Optional[List[Any]]:
    compounds = get_field(entry, "compound")
    return _as_list(compounds) or None


def get_pathway_modules(entries: Entries) -> Iterator[Tuple[Any, Any]]:
    """(module_id, description) pairs of one pathway entry or several."""
    return _id_pairs(entries, "module")


# =============================================================================
# Reactions
# =============================================================================

def reaction_equation(entry: Mapping) -> Any:
    return get_field(entry, "equation")


def reaction_enzymes(entry: Mapping) -> Optional[List[Any]]:
    """EC numbers of a reaction; a string value is split on whitespace."""
    enzymes = get_field(entry, "enzyme")
    if not enzymes:
        return None
    if isinstance(enzymes, (list, tuple)):
        return list(enzymes)
    return str(enzymes).split()


# =============================================================================
# DBLINKS
# =============================================================================

def get_dblinks(entry: Mapping) -> Optional[List[Any]]:
    """Database cross-references, e.g. [["CAS", "7732-18-5"], ["PubChem", "3303"]]."""
    return _as_list(get_field(entry, "dblinks")) or None


def dblink_by_database(entry: Mapping, database: str) -> Optional[List[Any]]:
    """
    Ids cross-referenced in one database (case-insensitive name).

    Works on list-shaped links (["UniProt", "P12345", ...]) and on string
    links ("UniProt: P12345 Q67890").
    """
    wanted = str(database).upper()
    for link in get_dblinks(entry) or []:
        if isinstance(link, (list, tuple)) and link:
            if str(link[0]).upper().rstrip(':') == wanted:
                return list(link[1:])
        elif isinstance(link, str) and ':' in link:
            db, _, ids = link.partition(':')
            if db.strip().upper() == wanted:
                return ids.split()
    return None


# =============================================================================
# Generic
# =============================================================================

def filter_by_type(entries: Iterable[Mapping], record_type: Any) -> Iterator[Mapping]:
    """Entries whose record type matches (any spelling of the type)."""
    wanted = RecordType.from_value(record_type)
    return (entry for entry in entries if entry_type(entry) is wanted)


def map_entries(entries: Iterable[Mapping], field: Any) -> Iterator[Any]:
    """Values of one field across entries, missing values skipped."""
    return (value for value in (get_field(e, field) for e in entries) if value is not None)
