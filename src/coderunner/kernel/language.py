"""Supported languages."""

from enum import Enum
from typing import Dict, Union

from .errors import UnknownLanguageError


class Language(str, Enum):
    """Closed set of languages the resolver has a policy for.

    Values are the snake_case wire names used by the upload stage.
    """
    ASSEMBLY = "assembly"
    ATS = "ats"
    BASH = "bash"
    C = "c"
    CLOJURE = "clojure"
    COBOL = "cobol"
    COFFEE_SCRIPT = "coffee_script"
    CPP = "cpp"
    CRYSTAL = "crystal"
    CSHARP = "csharp"
    D = "d"
    ELIXIR = "elixir"
    ERLANG = "erlang"
    HASKELL = "haskell"
    PYTHON = "python"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_name(cls, name: Union[str, "Language"]) -> "Language":
        """Look up a language by wire name.

        Raises:
            UnknownLanguageError: if ``name`` is not a supported wire name.
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            supported = ", ".join(sorted(language.value for language in cls))
            raise UnknownLanguageError(
                f"Unknown language '{name}' (supported: {supported})"
            ) from None


_DISPLAY_NAMES: Dict[Language, str] = {
    Language.ASSEMBLY: "Assembly",
    Language.ATS: "ATS",
    Language.BASH: "Bash",
    Language.C: "C",
    Language.CLOJURE: "Clojure",
    Language.COBOL: "COBOL",
    Language.COFFEE_SCRIPT: "CoffeeScript",
    Language.CPP: "C++",
    Language.CRYSTAL: "Crystal",
    Language.CSHARP: "C#",
    Language.D: "D",
    Language.ELIXIR: "Elixir",
    Language.ERLANG: "Erlang",
    Language.HASKELL: "Haskell",
    Language.PYTHON: "Python",
}
