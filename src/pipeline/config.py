from dataclasses import dataclass
from pathlib import Path

from src.utils.errors import (
    ConfigError,
    MULTIPLE_ACTIONS,
    MULTIPLE_INPUTS,
    MULTIPLE_OUTPUTS,
    NO_ACTION,
    NO_INPUT,
    NO_OUTPUT,
)

ACTIONS = ("encode", "decode")


@dataclass
class RunConfig:
    """
    Configuration for one compress/uncompress run.
    """
    action: str = ""
    input_path: Path | None = None
    output_path: Path | None = None

    def set_action(self, action: str) -> None:
        action = action.lower()
        if action not in ACTIONS:
            raise ValueError(f"Unsupported action: {action}")
        if self.action:
            raise ConfigError(MULTIPLE_ACTIONS)
        self.action = action

    def set_input_path(self, path) -> None:
        if self.input_path is not None:
            raise ConfigError(MULTIPLE_INPUTS)
        self.input_path = Path(path)

    def set_output_path(self, path) -> None:
        if self.output_path is not None:
            raise ConfigError(MULTIPLE_OUTPUTS)
        self.output_path = Path(path)

    def validate(self) -> None:
        if self.input_path is None:
            raise ConfigError(NO_INPUT)
        if self.output_path is None:
            raise ConfigError(NO_OUTPUT)
        if not self.action:
            raise ConfigError(NO_ACTION)
