"""coderunner: deterministic build/run command resolution for multi-language submissions."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("coderunner")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
# Note: the kernel resolver is exported as resolve; the request-level helpers
# live in coderunner.api
from coderunner.api import (
    ResolveIssue,
    ResolveResult,
    RunRequest,
    resolve_request,
    run_instructions,
    supported_languages,
)
from coderunner.codes import ErrorCode
from coderunner.kernel.errors import InvalidInputError, ResolverError, UnknownLanguageError
from coderunner.kernel.files import SourceFileSet
from coderunner.kernel.instructions import RunInstructions
from coderunner.kernel.language import Language
from coderunner.kernel.policy import resolve

__all__ = [
    "__version__",
    "ErrorCode",
    "InvalidInputError",
    "Language",
    "ResolveIssue",
    "ResolveResult",
    "ResolverError",
    "RunInstructions",
    "RunRequest",
    "SourceFileSet",
    "UnknownLanguageError",
    "resolve",
    "resolve_request",
    "run_instructions",
    "supported_languages",
]
