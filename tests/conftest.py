"""
Pytest configuration and shared fixtures for the KEGG flat-file tests.
"""
import sys
import pytest
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import Settings, get_settings
from kegg_flatfile.emitters import FieldEmitter
from kegg_flatfile.assembler import RecordAssembler
from kegg_flatfile.render_config import RenderConfig
from kegg_flatfile.serializer import KeggSerializer


# ============================================================================
# Fixtures: Configuration & Settings
# ============================================================================

@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from KEGG_* variables of the developer environment."""
    for name in ("KEGG_LABEL_WIDTH", "KEGG_LINE_WIDTH", "KEGG_SEQUENCE_WIDTH",
                 "KEGG_SUB_FIELD_INDENT", "KEGG_LOG_LEVEL", "KEGG_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings():
    """Settings with default layout, no .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def config():
    """Default 12 / 80 / 60 layout."""
    return RenderConfig()


@pytest.fixture
def emitter(config):
    return FieldEmitter(config)


@pytest.fixture
def assembler(config):
    return RecordAssembler(config)


@pytest.fixture
def serializer(config):
    return KeggSerializer(config)


# ============================================================================
# Fixtures: Sample Records
# ============================================================================

@pytest.fixture
def sample_compound():
    """Water, as a COMPOUND record."""
    return {
        "entry": "C00001",
        "name": "H2O; Water",
        "formula": "H2O",
        "exact_mass": "18.0106",
        "mol_weight": "18.0153",
        "record_type": "compound",
    }


@pytest.fixture
def sample_pathway():
    """Glycolysis pathway with genes and one reference."""
    return {
        "ENTRY": "map00010",
        "NAME": "Glycolysis / Gluconeogenesis",
        "DESCRIPTION": "Glycolysis is the process of converting glucose into pyruvate "
                       "and generating small amounts of ATP (energy) and NADH "
                       "(reducing power).",
        "GENE": [
            ["b0008", "talB; transaldolase B"],
            ["b0114", "aceE; pyruvate dehydrogenase"],
        ],
        "REFERENCE": {
            "pmid": "PMID:9787636",
            "authors": "Kanehisa M, Goto S",
            "title": "KEGG: kyoto encyclopedia of genes and genomes.",
            "journal": "Nucleic Acids Res 28:27-30 (2000)",
        },
        "ENTRY_TYPE": "pathway",
    }


@pytest.fixture
def sample_genes():
    """GENES entry with a 130-residue amino-acid sequence."""
    return {
        "entry": "b0008  CDS  T00007",
        "name": "talB",
        "organism": "eco  Escherichia coli K-12 MG1655",
        "aaseq": "M" * 70 + "\n" + "K" * 60,
        "record_type": "genes",
    }


@pytest.fixture
def sample_records(sample_compound, sample_pathway, sample_genes):
    return [sample_compound, sample_pathway, sample_genes]
