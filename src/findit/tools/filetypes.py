"""
File type classification for findit.

This module loads the static extension table and ignored-directory set from the
packaged ``filetypes.yaml`` and decides which files are worth searching. The
table is read once per process and exposed read-only.
"""

import os
import logging
from functools import lru_cache
from importlib import resources
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Optional, Union
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator


logger = logging.getLogger(__name__)

FILETYPES_RESOURCE = "filetypes.yaml"


class FileTypeTableError(Exception):
    """Raised when the file type table cannot be loaded or is inconsistent."""
    pass


class FileTypeTable(BaseModel):
    """
    Read-only lookup tables used to filter the walk.

    Attributes:
        text: Extensions whose files are searched
        binary: Extensions whose files are never searched
        ignore_dirs: Directory base names that are never descended into
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    text: FrozenSet[str] = Field(default_factory=frozenset, description="Searchable extensions")
    binary: FrozenSet[str] = Field(default_factory=frozenset, description="Excluded extensions")
    ignore_dirs: FrozenSet[str] = Field(default_factory=frozenset, description="Ignored directory names")

    @field_validator('text', 'binary', 'ignore_dirs', mode='before')
    @classmethod
    def validate_entries(cls, v: Any) -> Any:
        """Reject blank and non-string entries; a missing section is empty."""
        if v is None:
            return frozenset()
        if isinstance(v, (list, tuple, set, frozenset)):
            for entry in v:
                if not isinstance(entry, str) or not entry.strip():
                    raise ValueError(f"Invalid table entry: {entry!r}")
        return v

    @model_validator(mode='after')
    def validate_disjoint(self):
        """An extension cannot be both text and binary."""
        overlap = self.text & self.binary
        if overlap:
            raise ValueError(f"Extensions listed as both text and binary: {', '.join(sorted(overlap))}")
        return self

    @property
    def extension_map(self) -> Mapping[str, bool]:
        """Extension to is-text mapping."""
        mapping: Dict[str, bool] = {ext: False for ext in self.binary}
        mapping.update({ext: True for ext in self.text})
        return MappingProxyType(mapping)

    def is_text_extension(self, extension: str) -> bool:
        """Check if an extension is marked as text; unknown extensions are not."""
        return extension in self.text

    def is_known_extension(self, extension: str) -> bool:
        """Check if an extension appears in the table at all."""
        return extension in self.text or extension in self.binary

    def should_ignore_dir(self, name: str) -> bool:
        """Check if a directory base name is in the ignore set."""
        return name in self.ignore_dirs


def _load_yaml_file(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load and parse a file type table from a YAML file.

    Args:
        file_path: Path to YAML file

    Returns:
        Parsed YAML data as dictionary

    Raises:
        FileTypeTableError: If file cannot be read or parsed
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise FileTypeTableError(f"Invalid YAML syntax in {file_path}: {e}") from e
    except OSError as e:
        raise FileTypeTableError(f"Cannot read file type table {file_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FileTypeTableError(f"File type table must contain a YAML object, got {type(data).__name__}")
    return data


def load_file_types(file_path: Optional[Union[str, Path]] = None) -> FileTypeTable:
    """
    Load and validate a file type table.

    Args:
        file_path: Path to a YAML table. If None, the packaged table is used.

    Returns:
        Validated FileTypeTable

    Raises:
        FileTypeTableError: If the table is missing, malformed or inconsistent
    """
    if file_path is None:
        resource = resources.files("findit") / "data" / FILETYPES_RESOURCE
        with resources.as_file(resource) as packaged_path:
            data = _load_yaml_file(packaged_path)
    else:
        data = _load_yaml_file(file_path)

    try:
        table = FileTypeTable.model_validate(data)
    except ValidationError as e:
        raise FileTypeTableError(f"File type table validation failed: {e}") from e

    logger.debug(
        f"Loaded file type table: {len(table.text)} text, {len(table.binary)} binary, "
        f"{len(table.ignore_dirs)} ignored directories"
    )
    return table


@lru_cache(maxsize=None)
def get_file_types() -> FileTypeTable:
    """Get the packaged file type table, loading it on first use."""
    return load_file_types()


def file_extension(file_path: Union[str, Path]) -> Optional[str]:
    """
    Get the extension of a file without its leading dot.

    A dot-file such as ``.bashrc`` has no extension; a name ending in a dot
    has the empty extension.

    Args:
        file_path: Path or file name to inspect

    Returns:
        The extension, or None if the name has none
    """
    name = os.path.basename(str(file_path))
    suffix = os.path.splitext(name)[1]
    if not suffix:
        return None
    return suffix[1:]


def is_interesting(file_path: Union[str, Path], extension_filter: str = "",
                   table: Optional[FileTypeTable] = None) -> bool:
    """
    Decide whether a file should be searched.

    With an extension filter, only files whose extension equals the filter
    qualify. Without one, files lacking an extension qualify and files with an
    extension qualify only if the table marks it as text.

    Args:
        file_path: Path of the candidate file
        extension_filter: Extension to restrict the search to, empty for none
        table: File type table to consult (defaults to the packaged table)

    Returns:
        True if the file should be searched
    """
    extension = file_extension(file_path)
    if extension is None:
        return extension_filter == ""
    if extension_filter:
        return extension == extension_filter
    if table is None:
        table = get_file_types()
    return table.is_text_extension(extension)
