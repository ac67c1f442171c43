"""
Unit tests for kegg_flatfile/extractors.py
"""
import pytest
from kegg_flatfile.extractors import (
    compound_formula, compound_mass, dblink_by_database, entry_type,
    filter_by_type, genes_by_organism, get_compound_names, get_dblinks,
    get_field, get_pathway_genes, get_pathway_modules, map_entries,
    organism_code, pathway_compounds, pathway_id, reaction_enzymes,
    reaction_equation, unique_organism_codes,
)
from kegg_flatfile.record import Record
from kegg_flatfile.record_types import RecordType


class TestFieldAccess:

    @pytest.mark.parametrize("field", ["mol-weight", "MOL_WEIGHT", "mol_weight"])
    def test_any_spelling(self, sample_compound, field):
        assert get_field(sample_compound, field) == "18.0153"
        assert get_field(Record(sample_compound), field) == "18.0153"

    def test_missing(self, sample_compound):
        assert get_field(sample_compound, "remark") is None

    def test_entry_type(self, sample_compound, sample_pathway):
        assert entry_type(sample_compound) is RecordType.COMPOUND
        assert entry_type(sample_pathway) is RecordType.PATHWAY
        assert entry_type({"entry": "x"}) is None
        assert entry_type({"record_type": "protein"}) is RecordType.UNKNOWN

    def test_entry_type_of_record(self, sample_genes):
        assert entry_type(Record(sample_genes)) is RecordType.GENES
        assert entry_type(Record({"entry": "x"})) is None


class TestGenes:

    def test_pathway_genes(self, sample_pathway):
        assert list(get_pathway_genes(sample_pathway)) == [
            ("b0008", "talB; transaldolase B"),
            ("b0114", "aceE; pyruvate dehydrogenase"),
        ]

    def test_pathway_genes_bare_ids(self):
        entries = [{"gene": ["b0001", "b0002"]}, {"gene": "b0003"}, {"name": "no genes"}]
        assert list(get_pathway_genes(entries)) == [
            ("b0001", None), ("b0002", None), ("b0003", None),
        ]

    def test_genes_by_organism(self):
        entries = [
            {"entry": "b0008", "organism": "eco"},
            {"entry": "b0114", "organism": "eco"},
            {"entry": "7157", "organism": "hsa"},
        ]
        groups = genes_by_organism(entries)
        assert [e["entry"] for e in groups["eco"]] == ["b0008", "b0114"]
        assert len(groups["hsa"]) == 1

    def test_organism_code(self, sample_genes):
        assert organism_code(sample_genes) == "eco"
        assert organism_code({"organism": ["hsa", "Homo sapiens"]}) == "hsa"
        assert organism_code({"entry": "x"}) is None

    def test_unique_organism_codes(self, sample_genes):
        entries = [sample_genes, {"organism": "hsa  Homo sapiens (human)"}, {"organism": "eco"}, {}]
        assert unique_organism_codes(entries) == {"eco", "hsa"}


class TestCompounds:

    def test_names(self):
        entries = [{"name": ["H2O", " Water "]}, {"name": "Glucose"}, {"name": None}]
        assert list(get_compound_names(entries)) == ["H2O", "Water", "Glucose"]

    def test_names_is_lazy(self):
        assert iter(get_compound_names([])) is not None
        assert not isinstance(get_compound_names([]), list)

    def test_formula(self, sample_compound):
        assert compound_formula(sample_compound) == "H2O"

    def test_mass_prefers_mol_weight(self, sample_compound):
        assert compound_mass(sample_compound) == pytest.approx(18.0153)

    def test_mass_falls_back_to_exact(self, sample_compound):
        del sample_compound["mol_weight"]
        assert compound_mass(sample_compound) == pytest.approx(18.0106)

    def test_unparseable_mass_returned_as_is(self):
        assert compound_mass({"mol_weight": "n/a"}) == "n/a"
        assert compound_mass({}) is None


class TestPathways:

    def test_pathway_id(self, sample_pathway):
        assert pathway_id(sample_pathway) == "map00010"
        assert pathway_id({"entry": "map00020  Pathway"}) == "map00020"
        assert pathway_id({}) is None

    def test_compounds(self):
        assert pathway_compounds({"compound": ["C00022", "C00031"]}) == ["C00022", "C00031"]
        assert pathway_compounds({"compound": "C00022"}) == ["C00022"]
        assert pathway_compounds({}) is None

    def test_modules(self):
        entry = {"module": [["M00001", "Glycolysis"], ["M00002", "Glycolysis, core"]]}
        assert dict(get_pathway_modules(entry)) == {"M00001": "Glycolysis", "M00002": "Glycolysis, core"}


class TestReactions:

    def test_equation(self):
        assert reaction_equation({"EQUATION": "C00001 <=> C00002"}) == "C00001 <=> C00002"

    def test_enzymes(self):
        assert reaction_enzymes({"enzyme": "2.7.1.1 2.7.1.2"}) == ["2.7.1.1", "2.7.1.2"]
        assert reaction_enzymes({"enzyme": ["2.7.1.1"]}) == ["2.7.1.1"]
        assert reaction_enzymes({}) is None


class TestDblinks:

    def test_list_links(self):
        entry = {"dblinks": [["CAS", "7732-18-5"], ["PubChem:", "3303", "3304"]]}
        assert get_dblinks(entry) == [["CAS", "7732-18-5"], ["PubChem:", "3303", "3304"]]
        assert dblink_by_database(entry, "cas") == ["7732-18-5"]
        assert dblink_by_database(entry, "PubChem") == ["3303", "3304"]

    def test_string_links(self):
        entry = {"DBLINKS": ["UniProt: P12345 Q67890", "NCBI-GeneID: 947"]}
        assert dblink_by_database(entry, "UNIPROT") == ["P12345", "Q67890"]
        assert dblink_by_database(entry, "NCBI-GeneID") == ["947"]

    def test_no_links(self):
        assert get_dblinks({}) is None
        assert dblink_by_database({}, "CAS") is None
        assert dblink_by_database({"dblinks": [["CAS", "1"]]}, "ChEBI") is None


class TestGeneric:

    def test_filter_by_type(self, sample_records):
        compounds = list(filter_by_type(sample_records, "COMPOUND"))
        assert compounds == [sample_records[0]]
        assert list(filter_by_type(sample_records, RecordType.GENES)) == [sample_records[2]]

    def test_map_entries(self, sample_records):
        assert list(map_entries(sample_records, "name")) == [
            "H2O; Water", "Glycolysis / Gluconeogenesis", "talB",
        ]
        assert list(map_entries(sample_records, "formula")) == ["H2O"]
