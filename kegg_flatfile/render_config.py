#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
RenderConfig - layout parameters of one render call.

A RenderConfig is immutable and validated on construction. Emitters,
assemblers and serializers receive it explicitly, so renders with different
widths can run side by side.

Usage:
    from kegg_flatfile.render_config import RenderConfig

    config = RenderConfig()                           # 12 / 80 / 60
    wide = config.with_overrides(line_width=100)
    env = RenderConfig.from_settings(sequence_width=50)
"""

from dataclasses import dataclass, replace
from typing import List, Optional

from pydantic import ValidationError

from config.constants import LABEL_WIDTH, LINE_WIDTH, SEQUENCE_WIDTH, SUB_FIELD_INDENT
from config.settings import Settings, get_settings

from .errors import RenderConfigError


@dataclass(frozen=True)
class RenderConfig:
    """
    Layout of a rendered flat-file.

    Attributes:
        label_width: Width of the label column.
        line_width: Total line width; content width is line_width - label_width.
        sequence_width: Residues per line in AASEQ/NTSEQ blocks.
        sub_field_indent: Prefix of nested sub-field labels (REFERENCE AUTHORS...).
    """
    label_width: int = LABEL_WIDTH
    line_width: int = LINE_WIDTH
    sequence_width: int = SEQUENCE_WIDTH
    sub_field_indent: str = SUB_FIELD_INDENT

    def __post_init__(self):
        errors = self.validate()
        if errors:
            raise RenderConfigError(errors)

    def validate(self) -> List[str]:
        """Return list of problems (empty if valid)."""
        errors = []
        for name in ("label_width", "line_width", "sequence_width"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                errors.append(f"{name} must be an integer, got {value!r}")
            elif value <= 0:
                errors.append(f"{name} must be positive, got {value}")
        if errors:
            return errors

        if self.label_width >= self.line_width:
            errors.append(
                f"label_width ({self.label_width}) must be smaller than "
                f"line_width ({self.line_width})"
            )
        if not isinstance(self.sub_field_indent, str):
            errors.append("sub_field_indent must be a string")
        return errors

    @property
    def content_width(self) -> int:
        """Characters available after the label column."""
        return self.line_width - self.label_width

    def with_overrides(self, **overrides) -> 'RenderConfig':
        """Copy with some values replaced; None values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **overrides) -> 'RenderConfig':
        """
        Build a config from application settings (environment / .env).

        Settings values and overrides are merged before validation, so an
        override can repair a width that is invalid in the environment.

        Args:
            settings: Settings instance, defaults to the cached process settings
            **overrides: Per-call values taking precedence (None = keep setting)

        Raises:
            RenderConfigError: Environment values or the merged layout are invalid
        """
        changes = {k: v for k, v in overrides.items() if v is not None}
        if settings is None:
            try:
                # Init values win over KEGG_* variables in pydantic-settings
                settings = Settings(**changes) if changes else get_settings()
            except ValidationError as e:
                raise RenderConfigError(_settings_errors(e)) from e

        merged = {
            "label_width": settings.label_width,
            "line_width": settings.line_width,
            "sequence_width": settings.sequence_width,
            "sub_field_indent": settings.sub_field_indent,
        }
        merged.update(changes)
        return cls(**merged)


def _settings_errors(error: ValidationError) -> List[str]:
    """Readable messages of a pydantic ValidationError, one per field."""
    return [
        f"{'.'.join(str(part) for part in err['loc']) or 'settings'}: {err['msg']}"
        for err in error.errors()
    ]


DEFAULT_CONFIG = RenderConfig()
