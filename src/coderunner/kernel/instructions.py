"""Run instructions: the resolver's output value."""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, field_validator


class RunInstructions(BaseModel):
    """Commands a harness executes to build and run a submission.

    Build commands run in order; the first non-zero exit aborts the run and
    ``run_command`` is not executed. With no build commands the run command
    executes immediately.
    """
    build_commands: Tuple[str, ...] = ()
    run_command: str

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("build_commands")
    @classmethod
    def validate_build_commands(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        for command in v:
            if not command.strip():
                raise ValueError("Build commands must not be empty")
        return v

    @field_validator("run_command")
    @classmethod
    def validate_run_command(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("run_command must not be empty")
        return v

    def steps(self) -> Tuple[str, ...]:
        """All commands in execution order: build commands, then the run command."""
        return self.build_commands + (self.run_command,)

    def to_shell_script(self) -> str:
        """Chain the steps with ``&&`` so a shell stops at the first failing build."""
        return " && ".join(self.steps())
