"""
Unit tests for kegg_flatfile/stats.py
"""
import pytest
from kegg_flatfile.errors import OutputWriteError
from kegg_flatfile.record import Record
from kegg_flatfile.record_types import RecordType
from kegg_flatfile.stats import (
    EntrySummary, distinct_count, distinct_values, entries_by_type,
    entries_to_csv, entry_to_csv_row, escape_csv_field, field_coverage,
    field_frequency, fields_present, format_summary, missing_fields,
    quick_stats, summarize_entries, type_counts, value_frequency, write_csv,
)


class TestFieldAnalysis:
    """Test field frequency and coverage."""

    def test_frequency(self, sample_records):
        freq = field_frequency(sample_records)
        assert list(freq)[:2] == ["entry", "name"]
        assert freq["entry"] == 3
        assert freq["formula"] == 1
        assert "record-type" not in freq
        assert "entry-type" not in freq

    def test_spellings_counted_together(self):
        freq = field_frequency([{"MOL_WEIGHT": 1}, {"mol-weight": 2}, {"mol_weight": 3}])
        assert freq == {"mol-weight": 3}

    def test_coverage(self, sample_records):
        coverage = field_coverage(sample_records)
        assert coverage["entry"] == pytest.approx(100.0)
        assert coverage["aaseq"] == pytest.approx(100.0 / 3)

    def test_coverage_empty(self):
        assert field_coverage([]) is None

    def test_fields_present(self, sample_compound):
        sample_compound["remark"] = None
        assert fields_present(sample_compound) == {"entry", "name", "formula", "exact-mass", "mol-weight"}

    def test_missing_fields(self, sample_compound):
        assert missing_fields(sample_compound, ["ENTRY", "FORMULA", "COMMENT", "DBLINKS"]) == [
            "comment", "dblinks",
        ]


class TestValues:
    """Test distinct values and value frequencies."""

    def test_distinct_values_flattened(self):
        entries = [{"enzyme": ["2.7.1.1", ["2.7.1.2"]]}, {"enzyme": "2.7.1.1"}, {"enzyme": " "}, {}]
        assert distinct_values(entries, "enzyme") == {"2.7.1.1", "2.7.1.2"}
        assert distinct_count(entries, "enzyme") == 2

    def test_value_frequency(self):
        entries = [{"organism": "eco"}, {"organism": "hsa"}, {"organism": "eco"}, {"name": "x"}]
        assert value_frequency(entries, "organism") == {"eco": 2, "hsa": 1}

    def test_value_frequency_counts_list_elements(self):
        entries = [{"class": ["Metabolism", "Carbohydrate"]}, {"class": ["Metabolism"]}]
        assert value_frequency(entries, "class") == {"Metabolism": 2, "Carbohydrate": 1}


class TestSummary:
    """Test record summaries."""

    def test_type_counts(self, sample_records):
        records = sample_records + [{"entry": "untyped"}, {"record_type": "compound"}]
        assert type_counts(records) == {
            RecordType.COMPOUND: 2, RecordType.PATHWAY: 1, RecordType.GENES: 1,
        }

    def test_entries_by_type(self, sample_records):
        groups = entries_by_type(sample_records + [{"entry": "x"}])
        assert groups[RecordType.GENES] == [sample_records[2]]
        assert groups[None] == [{"entry": "x"}]

    def test_summarize(self, sample_records):
        summary = summarize_entries(sample_records)
        assert isinstance(summary, EntrySummary)
        assert summary.total_count == 3
        assert summary.by_type[RecordType.PATHWAY] == 1
        assert summary.sample_ids == ["C00001", "map00010", "b0008  CDS  T00007"]

    def test_summarize_records(self, sample_records):
        summary = summarize_entries(Record(r) for r in sample_records)
        assert summary.by_type == {RecordType.COMPOUND: 1, RecordType.PATHWAY: 1, RecordType.GENES: 1}

    def test_sample_size(self, sample_records):
        assert len(summarize_entries(sample_records, sample_size=2).sample_ids) == 2

    def test_to_dict(self, sample_records):
        data = summarize_entries(sample_records + [{"entry": "x"}]).to_dict()
        assert data["total_count"] == 4
        assert data["by_type"] == {"compound": 1, "pathway": 1, "genes": 1, None: 1}

    def test_empty_summary(self):
        summary = summarize_entries([])
        assert summary.total_count == 0
        assert summary.by_type == {}
        assert summary.sample_ids == []

    def test_quick_stats(self, sample_records):
        stats = quick_stats(sample_records)
        assert stats["count"] == 3
        assert stats["organisms"] == 1
        assert stats["fields"] == len(field_frequency(sample_records))
        assert stats["types"][RecordType.COMPOUND] == 1

    def test_format_summary(self, sample_records):
        text = format_summary(sample_records + [{"entry": "x"}], top_fields=2)
        lines = text.split("\n")
        assert lines[0] == "=== KEGG Entry Summary ==="
        assert "Total entries: 4" in lines
        assert "  unknown: 1" in lines
        assert "  entry: 4" in lines
        assert "  formula: 1" not in lines
        assert lines[-1] == "Sample IDs: C00001, map00010, b0008  CDS  T00007, x"


class TestCsv:
    """Test CSV projection."""

    def test_escape(self):
        assert escape_csv_field("plain") == "plain"
        assert escape_csv_field("a,b") == '"a,b"'
        assert escape_csv_field('say "hi"') == '"say ""hi"""'
        assert escape_csv_field(None) == ""

    def test_escape_carriage_return(self):
        assert escape_csv_field("line one\r\nline two") == '"line one\r\nline two"'
        assert escape_csv_field("a\rb") == '"a\rb"'

    def test_row(self, sample_compound):
        assert entry_to_csv_row(sample_compound, ["entry", "formula", "remark"]) == "C00001,H2O,"

    def test_list_values_joined(self):
        assert entry_to_csv_row({"enzyme": ["2.7.1.1", "2.7.1.2"]}, ["enzyme"]) == "2.7.1.1; 2.7.1.2"

    def test_csv(self, sample_compound):
        text = entries_to_csv([sample_compound], ["ENTRY", "NAME", "MOL_WEIGHT"])
        assert text == "entry,name,mol-weight\nC00001,H2O; Water,18.0153"

    def test_csv_options(self, sample_compound):
        text = entries_to_csv([sample_compound], ["entry", "formula"], header=False, separator="\t")
        assert text == "C00001\tH2O"

    def test_write_csv(self, tmp_path, sample_records):
        output = write_csv(tmp_path / "out" / "records.csv", sample_records, ["entry"])
        assert output.read_text(encoding="utf-8") == "entry\nC00001\nmap00010\nb0008  CDS  T00007\n"

    def test_write_csv_failure(self, tmp_path, sample_records):
        blocker = tmp_path / "blocker"
        blocker.write_text("file")
        with pytest.raises(OutputWriteError):
            write_csv(blocker / "records.csv", sample_records, ["entry"])
