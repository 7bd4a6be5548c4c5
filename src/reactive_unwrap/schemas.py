from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional


class TextUpdate(BaseModel):
    """
    A single text change: replace ``[position, end)`` with ``to_insert``.
    Offsets are character offsets into the original file text.
    """
    model_config = ConfigDict(frozen=True)

    position: int
    end: int
    to_insert: str


class Replacement(BaseModel):
    """
    A text update scoped to one file (path relative to the project root).
    """
    model_config = ConfigDict(frozen=True)

    file_path: str
    update: TextUpdate


class SkippedReference(BaseModel):
    """
    A reference that could not be migrated because no insertion point exists.
    """
    file_path: str
    name: str
    line: int  # 1-indexed
    reason: str


class ReferenceInfo(BaseModel):
    """
    Where a located reference sits and how its unwrap statement would be placed.
    """
    file_path: str
    name: str
    line: int  # 1-indexed
    column: int  # 0-indexed
    pattern: Literal["object", "array"]
    context: Literal["list-declaration", "block-parameter", "bodyless-parameter", "unsupported"]
    reason: Optional[str] = None


class FileMigrationResult(BaseModel):
    """
    Result of migrating all located references of one file.
    """
    file_path: str
    references: int
    replacements: List[Replacement] = Field(default_factory=list)
    skipped: List[SkippedReference] = Field(default_factory=list)
    syntax_valid: bool = True
    errors: List[str] = Field(default_factory=list)
    diff: Optional[str] = None
