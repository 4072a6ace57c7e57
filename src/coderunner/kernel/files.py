"""Source file sets and the helpers that render them into command clauses.

A source file set is an ordered, non-empty sequence of paths. The first path
is the main file; the rest are auxiliary files that a language policy may
include after filtering them by extension.

Paths are never touched on disk: only their string form is inspected. Each
path is kept as the text the caller gave (``./-main.c`` stays ``./-main.c``);
PurePath is only used to find the final component when reading extensions.
"""

import os
from pathlib import PurePath
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

from .errors import InvalidInputError


PathInput = Union[str, bytes, "os.PathLike[str]"]
PathText = Union[str, PurePath]


def _to_path_text(value: Any) -> str:
    """Coerce a single path input to its string form, without normalising it."""
    if isinstance(value, (bytes, os.PathLike)):
        value = os.fspath(value)
    if isinstance(value, bytes):
        # surrogateescape keeps undecodable bytes so path_to_str can degrade them later
        value = os.fsdecode(value)
    if not isinstance(value, str):
        raise InvalidInputError(
            f"File paths must be str, bytes or os.PathLike, got {type(value).__name__}"
        )
    if value == "":
        raise InvalidInputError("File paths must not be empty strings")
    # PurePath("") renders as "."; neither names a file
    if value == ".":
        raise InvalidInputError("File paths must name a file, got '.'")
    return value


def coerce_paths(values: Iterable[Any]) -> Tuple[str, ...]:
    """Coerce an iterable of path inputs to a non-empty tuple of path strings.

    Raises:
        InvalidInputError: if the iterable is empty, is itself a single path,
            or contains a value that is not a path.
    """
    if isinstance(values, (str, bytes, os.PathLike)):
        raise InvalidInputError("Files must be a sequence of paths, not a single path")
    paths = tuple(_to_path_text(value) for value in values)
    if not paths:
        raise InvalidInputError("A source file set must contain at least one file")
    return paths


class SourceFileSet(BaseModel):
    """Ordered, non-empty set of source files.

    ``files[0]`` is the main file; ``files[1:]`` are auxiliary files, kept in
    the order the caller supplied them.
    """
    files: Tuple[str, ...]

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("files", mode="before")
    @classmethod
    def validate_files(cls, v: Any) -> Tuple[str, ...]:
        """Reject empty sets at construction so resolution never sees one."""
        return coerce_paths(v)

    @classmethod
    def from_paths(cls, paths: Iterable[PathInput]) -> "SourceFileSet":
        """Build a file set, raising InvalidInputError (not a pydantic error) on bad input."""
        return cls(files=coerce_paths(paths))

    @property
    def main_file(self) -> str:
        return self.files[0]

    @property
    def auxiliary_files(self) -> Tuple[str, ...]:
        return self.files[1:]

    def parts(self) -> Tuple[str, Tuple[str, ...]]:
        """Split into (main_file, auxiliary_files)."""
        return self.files[0], self.files[1:]

    def __len__(self) -> int:
        return len(self.files)


def extension(path: PathText) -> Optional[str]:
    """Return the extension of the final path component, without the dot.

    ``main.c`` -> ``"c"``, ``archive.tar.gz`` -> ``"gz"``, ``Makefile`` and
    ``.bashrc`` -> ``None``.
    """
    name = PurePath(path).name
    if name in ("", ".", ".."):
        return None
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return None
    return ext


def filter_by_extension(files: Sequence[PathText], ext: str) -> List[PathText]:
    """Keep the files whose extension equals ``ext`` exactly, in their original order.

    Matching is case-sensitive: ``Main.C`` does not match ``"c"``.
    """
    return [file for file in files if extension(file) == ext]


def _replace_surrogates(text: str) -> str:
    return "".join("\ufffd" if "\ud800" <= char <= "\udfff" else char for char in text)


def path_to_str(path: PathText) -> str:
    """Render a path for a command line, exactly as given.

    Conversion is lossy rather than strict. A name that is not valid UTF-8
    (carried as surrogate escapes on POSIX) has each undecodable byte replaced
    with U+FFFD. Any other lone surrogate, which has no byte form at all, is
    replaced with U+FFFD as well.
    """
    text = os.fspath(path)
    try:
        return os.fsencode(text).decode("utf-8", errors="replace")
    except UnicodeEncodeError:
        return _replace_surrogates(text)


def join_files(files: Sequence[PathText]) -> str:
    """Render files as a single space-separated string, preserving order."""
    return " ".join(path_to_str(file) for file in files)


def source_files_clause(files: Sequence[PathText], ext: str) -> str:
    """Space-separated companions of the main file that share ``ext``."""
    return join_files(filter_by_extension(files, ext))
