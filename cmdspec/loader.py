# Cmdspec CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""loader.py
Loads cmdspec specs from files.

Supported formats, chosen by file suffix:
- `.yaml` / `.yml`: structured document (PyYAML, scalars kept as literal text)
- `.toml`: structured document (toml)
- `.json`: structured document
- `.cmdspec` / `.txt`: block-structured spec text
"""
from __future__ import annotations

import json
from pathlib import Path

import toml
import yaml

from cmdspec.compiler import compile_document, compile_spec
from cmdspec.exceptions import CommandParseFailedError
from cmdspec.logger import logger
from cmdspec.schema import ProgramSpec

SPEC_FILE_NAMES = ("cmdspec.yaml", "cmdspec.toml", "cmdspec.json", "command.cmdspec")
TEXT_SUFFIXES = (".cmdspec", ".txt")


def find_spec_file(directory: Path | str | None = None) -> Path | None:
    """Return the first well-known spec file found in `directory` (default: cwd)."""
    base = Path(directory) if directory is not None else Path.cwd()
    candidates = [base / name for name in SPEC_FILE_NAMES]
    return next((path for path in candidates if path.is_file()), None)


def loader(file_path: Path | str) -> ProgramSpec:
    """
    Load and compile a spec file.

    Args:
        file_path (Path | str): Path to a YAML, TOML, JSON or spec text file.

    Returns:
        ProgramSpec: The compiled schema.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the suffix is not supported.
        CommandParseFailedError: If the file cannot be decoded or does not hold
            a mapping.
        SpecError: If the spec itself is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such spec file: {file_path}")

    suffix = path.suffix.lower()
    with path.open("r", encoding="UTF-8") as spec_file:
        if suffix in TEXT_SUFFIXES:
            logger.debug("Loading spec text from '%s'", path)
            return compile_spec(spec_file.read())
        try:
            if suffix in (".yaml", ".yml"):
                raw_spec = yaml.load(spec_file, Loader=yaml.BaseLoader)
            elif suffix == ".toml":
                raw_spec = toml.load(spec_file)
            elif suffix == ".json":
                raw_spec = json.load(spec_file)
            else:
                raise ValueError(f"Unsupported spec format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError, json.JSONDecodeError) as error:
            raise CommandParseFailedError(
                f"Could not decode spec file '{path}': {error}"
            ) from error

    if not isinstance(raw_spec, dict):
        raise CommandParseFailedError(
            "Spec file must contain a mapping describing the main command.\n"
            "Example:\n"
            "name: demo\n"
            "args:\n"
            "  - meta: PRINT\n"
            "    type: string"
        )
    logger.debug("Loading spec document from '%s'", path)
    return compile_document(raw_spec)
