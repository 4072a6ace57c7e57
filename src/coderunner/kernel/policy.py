"""Per-language build/run policies and the resolver.

Every language maps to one of a small, closed set of policy shapes:

- ``Interpreted``: no build step, the interpreter runs the main file.
- ``Compiled``: one build command over the main file and its companions,
  then run the produced artifact.
- ``TwoStepBuild``: assemble the main file, then link it; companions are ignored.
- ``PerFileBuild``: one build command per companion file, then run the main
  file with a script runner.

The table must cover ``Language`` exactly; this is checked when the module is
imported, so a language without a policy never reaches a caller.
"""

from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Sequence, Union

from .files import SourceFileSet, filter_by_extension, path_to_str, source_files_clause
from .instructions import RunInstructions
from .language import Language


def _command(*parts: str) -> str:
    """Join the non-empty parts of a command with single spaces."""
    return " ".join(part for part in parts if part)


@dataclass(frozen=True)
class Interpreted:
    """Run the main file with an interpreter; no build step.

    With ``companion_extension`` set, matching auxiliary files are appended
    to the run command after the main file.
    """
    interpreter: str
    companion_extension: Optional[str] = None

    def render(self, main_file: str, auxiliary_files: Sequence[str]) -> RunInstructions:
        companions = ""
        if self.companion_extension is not None:
            companions = source_files_clause(auxiliary_files, self.companion_extension)
        return RunInstructions(
            build_commands=(),
            run_command=_command(self.interpreter, path_to_str(main_file), companions),
        )


@dataclass(frozen=True)
class Compiled:
    """Compile the main file plus companions into a fixed artifact, then run it."""
    compiler: str
    extension: str
    run_command: str = "./a.out"

    def render(self, main_file: str, auxiliary_files: Sequence[str]) -> RunInstructions:
        build = _command(
            self.compiler,
            path_to_str(main_file),
            source_files_clause(auxiliary_files, self.extension),
        )
        return RunInstructions(build_commands=(build,), run_command=self.run_command)


@dataclass(frozen=True)
class TwoStepBuild:
    """Assemble the main file to an object, link the object, run the binary."""
    assembler: str
    linker_command: str
    run_command: str = "./a.out"

    def render(self, main_file: str, auxiliary_files: Sequence[str]) -> RunInstructions:
        return RunInstructions(
            build_commands=(
                _command(self.assembler, path_to_str(main_file)),
                self.linker_command,
            ),
            run_command=self.run_command,
        )


@dataclass(frozen=True)
class PerFileBuild:
    """Compile each matching companion on its own, then run the main file.

    Produces exactly one build command per matching auxiliary file, so the
    build list is empty when there are none.
    """
    compiler: str
    extension: str
    runner: str

    def render(self, main_file: str, auxiliary_files: Sequence[str]) -> RunInstructions:
        return RunInstructions(
            build_commands=tuple(
                _command(self.compiler, path_to_str(file))
                for file in filter_by_extension(auxiliary_files, self.extension)
            ),
            run_command=_command(self.runner, path_to_str(main_file)),
        )


Policy = Union[Interpreted, Compiled, TwoStepBuild, PerFileBuild]


POLICIES: Dict[Language, Policy] = {
    Language.ASSEMBLY: TwoStepBuild(
        assembler="nasm -f elf64 -o a.o",
        linker_command="ld -o a.out a.o",
    ),
    Language.ATS: Compiled(compiler="patscc -o a.out", extension="dats"),
    Language.BASH: Interpreted(interpreter="bash"),
    Language.C: Compiled(compiler="clang -o a.out -lm", extension="c"),
    Language.CLOJURE: Interpreted(interpreter="clj"),
    Language.COBOL: Compiled(compiler="cobc -x -o a.out", extension="cob"),
    Language.COFFEE_SCRIPT: Interpreted(interpreter="coffee"),
    # C++ companions are selected by the "c" extension
    Language.CPP: Compiled(compiler="clang++ -std=c++11 -o a.out", extension="c"),
    Language.CRYSTAL: Interpreted(interpreter="crystal run"),
    Language.CSHARP: Compiled(compiler="mcs -out:a.exe", extension="cs", run_command="mono a.exe"),
    Language.D: Compiled(compiler="dmd -ofa.out", extension="d"),
    # elixirc compiles and evaluates in one step; there is no separate build command
    Language.ELIXIR: Interpreted(interpreter="elixirc", companion_extension="ex"),
    Language.ERLANG: PerFileBuild(compiler="erlc", extension="erl", runner="escript"),
    Language.HASKELL: Interpreted(interpreter="runghc"),
    Language.PYTHON: Interpreted(interpreter="python"),
}


def check_policy_table(table: Mapping[Language, Policy]) -> None:
    """Ensure ``table`` has exactly one policy per Language member.

    Raises:
        RuntimeError: listing the missing and unexpected keys.
    """
    missing = sorted(language.value for language in Language if language not in table)
    unexpected = sorted(str(key) for key in table if not isinstance(key, Language))
    if missing or unexpected:
        raise RuntimeError(
            f"Policy table is not exhaustive: missing={missing}, unexpected={unexpected}"
        )


check_policy_table(POLICIES)


def policy_for(language: Language) -> Policy:
    """Return the policy registered for ``language``."""
    return POLICIES[language]


def resolve(language: Language, file_set: SourceFileSet) -> RunInstructions:
    """Resolve the build and run commands for a submission.

    Pure and total: equal inputs always yield equal instructions, and every
    Language has a policy.
    """
    main_file, auxiliary_files = file_set.parts()
    return POLICIES[language].render(main_file, auxiliary_files)
