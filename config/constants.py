"""
Centralized constants for the KEGG flat-file serializer.
Layout numbers follow the KEGG DBGET flat-file convention.
"""

# ===========================================
# FLAT-FILE LAYOUT
# ===========================================
LABEL_WIDTH = 12                      # label column, content starts at col 13
LINE_WIDTH = 80                       # total line width
SEQUENCE_WIDTH = 60                   # residues per AASEQ/NTSEQ line
SUB_FIELD_INDENT = "  "               # REFERENCE sub-fields (AUTHORS, TITLE...)

# ===========================================
# RECORD STRUCTURE
# ===========================================
RECORD_TERMINATOR = "///"
RECORD_SEPARATOR = "\n\n"             # blank line between records in a batch
RECORD_TYPE_KEY = "record-type"

# Alternative spellings accepted for the record type field
RECORD_TYPE_ALIASES = ("record-type", "entry-type")

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = ''                         # empty: console only
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
