#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Serializer exceptions.

Rendering itself does not raise on odd record content: unknown record types
and unusable field values degrade to coarser output. Only a contradictory
layout configuration and I/O around the serializer surface as errors.
"""


class KeggFlatfileError(Exception):
    """Base error for the KEGG flat-file package"""
    pass


class RenderConfigError(KeggFlatfileError, ValueError):
    """Raised when label/line/sequence widths are contradictory"""
    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__(f"Invalid render configuration: {'; '.join(self.errors)}")


class OutputWriteError(KeggFlatfileError):
    """Rendered text could not be written"""
    pass


class RecordInputError(KeggFlatfileError):
    """Record input file is not a JSON mapping, array of mappings or JSON Lines"""
    pass
