"""Public API for the coderunner package.

High-level functions for callers that hold a language wire name and a list
of paths (the upload stage, the CLI). The kernel in ``coderunner.kernel``
only ever sees validated ``Language`` values and ``SourceFileSet`` objects.
"""

import os
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from coderunner.codes import ErrorCode
from coderunner.kernel.errors import ResolverError
from coderunner.kernel.files import SourceFileSet
from coderunner.kernel.instructions import RunInstructions
from coderunner.kernel.language import Language
from coderunner.kernel.policy import resolve


class RunRequest(BaseModel):
    """A language wire name plus the submitted files, main file first."""
    language: Language
    files: List[str] = Field(..., min_length=1)

    model_config = ConfigDict(extra="forbid")


class ResolveIssue(BaseModel):
    """A single reason a request could not be resolved."""
    code: str  # ErrorCode value
    message: str
    field: Optional[str] = None  # "language" | "files" | None for whole-request issues


class ResolveResult(BaseModel):
    """Result of resolving a request; never raised, always returned."""
    ok: bool
    instructions: Optional[RunInstructions] = None
    errors: List[ResolveIssue] = Field(default_factory=list)


_FIELD_CODES = {
    "language": ErrorCode.UNKNOWN_LANGUAGE,
    "files": ErrorCode.INVALID_INPUT,
}


def _issues_from_validation_error(error: ValidationError) -> List[ResolveIssue]:
    """Map pydantic errors onto ResolveIssues, keyed by the top-level field."""
    issues = []
    for err in error.errors():
        loc = err.get("loc") or ()
        field = str(loc[0]) if loc else None
        code = _FIELD_CODES.get(field, ErrorCode.INVALID_REQUEST)
        issues.append(ResolveIssue(code=code.value, message=err["msg"], field=field))
    return issues


def _failed(errors: List[ResolveIssue]) -> ResolveResult:
    return ResolveResult(ok=False, instructions=None, errors=errors)


def supported_languages() -> List[str]:
    """Sorted wire names of every supported language."""
    return sorted(language.value for language in Language)


def run_instructions(
    language: Union[str, Language],
    files: Iterable[Union[str, bytes, "os.PathLike[str]"]],
) -> RunInstructions:
    """Resolve instructions for a language name and an ordered list of paths.

    Raises:
        UnknownLanguageError: if ``language`` is not a supported wire name.
        InvalidInputError: if ``files`` is empty or holds something that is not a path.
    """
    return resolve(Language.from_name(language), SourceFileSet.from_paths(files))


def resolve_request(request: Union[RunRequest, Dict[str, Any]]) -> ResolveResult:
    """Resolve a request, reporting invalid input as issues instead of raising.

    Args:
        request: RunRequest, or a dict with ``language`` and ``files`` keys

    Returns:
        ResolveResult with ``instructions`` set when ``ok`` is True
    """
    if not isinstance(request, RunRequest):
        try:
            request = RunRequest.model_validate(request)
        except ValidationError as e:
            return _failed(_issues_from_validation_error(e))

    try:
        file_set = SourceFileSet.from_paths(request.files)
    except ResolverError as e:
        return _failed([ResolveIssue(code=e.code.value, message=str(e), field="files")])

    return ResolveResult(ok=True, instructions=resolve(request.language, file_set), errors=[])
