#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File I/O around the serializer.

- write_kegg_file: render records and save them as a flat-file
- load_records:    read record mappings from JSON / JSON Lines

load_records only decodes JSON into Records; it is not a flat-file parser.
"""

import json
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Union

from config.logging_config import get_logger

from .errors import OutputWriteError, RecordInputError
from .record import Record
from .render_config import RenderConfig
from .serializer import KeggSerializer

logger = get_logger(__name__)

PathLike = Union[str, Path]


def write_kegg_file(output_path: PathLike, records: Iterable[Mapping],
                    config: Optional[RenderConfig] = None) -> Path:
    """
    Render records and write them to a flat-file.

    Args:
        output_path: Destination file (parent directories are created)
        records: Records or mappings
        config: Layout, defaults to settings

    Returns:
        Absolute path of the written file

    Raises:
        OutputWriteError: The file could not be written
    """
    text = KeggSerializer(config).render_batch(records)
    output_path = Path(output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Cannot write {output_path}: {e}") from e

    logger.info(f"Wrote {output_path} ({len(text)} chars)")
    return output_path.absolute()


def _to_records(data: Any, source: str) -> List[Record]:
    if isinstance(data, Mapping):
        data = [data]
    if not isinstance(data, list):
        raise RecordInputError(f"{source}: expected a JSON object or array, got {type(data).__name__}")

    records = []
    for idx, item in enumerate(data):
        if not isinstance(item, Mapping):
            raise RecordInputError(f"{source}: item {idx} is {type(item).__name__}, not an object")
        records.append(Record(item))
    return records


def parse_records(text: str, source: str = "<string>", json_lines: bool = False) -> List[Record]:
    """
    Decode records from JSON text.

    Args:
        text: A JSON object, a JSON array of objects, or JSON Lines
        source: Name used in error messages
        json_lines: Treat every non-blank line as one object
    """
    try:
        if json_lines:
            data = [json.loads(line) for line in text.splitlines() if line.strip()]
        else:
            data = json.loads(text)
    except json.JSONDecodeError as e:
        raise RecordInputError(f"{source}: invalid JSON ({e})") from e
    return _to_records(data, source)


def load_records(input_path: PathLike) -> List[Record]:
    """
    Read records from a .json or .jsonl file.

    Raises:
        RecordInputError: Missing file or malformed content
    """
    input_path = Path(input_path)
    try:
        text = input_path.read_text(encoding="utf-8")
    except OSError as e:
        raise RecordInputError(f"Cannot read {input_path}: {e}") from e

    json_lines = input_path.suffix.lower() in (".jsonl", ".ndjson")
    records = parse_records(text, source=str(input_path), json_lines=json_lines)
    logger.debug(f"Loaded {len(records)} records from {input_path}")
    return records
