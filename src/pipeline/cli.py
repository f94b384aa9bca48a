from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from src.pipeline.config import RunConfig
from src.pipeline.runner import run
from src.utils.errors import ConfigError, HuffmanError, PATH_EXPECTED_FORMAT, UNKNOWN_OPTION_FORMAT

PATH_OPTIONS = {"-f": "--file", "--file": "--file", "-o": "--output", "--output": "--output"}
KNOWN_OPTIONS = set(PATH_OPTIONS) | {"-c", "-u"}

# argv entries cannot contain NUL, so this never collides with a real path
_MISSING_VALUE = "\0"


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        raise ConfigError(message)


class _ConfigAction(argparse.Action):
    """Apply each option to the RunConfig as soon as argparse meets it."""

    def __call__(self, parser, namespace, values, option_string=None):
        cfg: RunConfig = namespace.config
        if self.dest == "action":
            cfg.set_action(self.const)
            return
        if values.startswith(_MISSING_VALUE):
            raise ConfigError(PATH_EXPECTED_FORMAT.format(values[len(_MISSING_VALUE):]))
        if self.dest == "input_path":
            cfg.set_input_path(values)
        else:
            cfg.set_output_path(values)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="huffpack",
        description="Compress or uncompress a file with Huffman coding.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-c",
        dest="action",
        action=_ConfigAction,
        nargs=0,
        const="encode",
        help="Compress the input file.",
    )
    parser.add_argument(
        "-u",
        dest="action",
        action=_ConfigAction,
        nargs=0,
        const="decode",
        help="Uncompress the input file.",
    )
    parser.add_argument("-f", "--file", dest="input_path", action=_ConfigAction, help="Input file path.")
    parser.add_argument("-o", "--output", dest="output_path", action=_ConfigAction, help="Output file path.")
    return parser


def _bind_path_values(argv: Sequence[str]) -> List[str]:
    """
    Rewrite `-f <path>` as `--file=<path>` so argparse takes any token as the
    path, including ones starting with '-'.

    A path flag at the end of argv, or followed by another known option, is
    bound to a marker that reports the missing path when argparse reaches it.
    """
    bound: List[str] = []
    idx = 0
    while idx < len(argv):
        arg = argv[idx]
        if arg not in PATH_OPTIONS:
            bound.append(arg)
            idx += 1
            continue
        if idx + 1 == len(argv) or argv[idx + 1] in KNOWN_OPTIONS:
            bound.append(f"{PATH_OPTIONS[arg]}={_MISSING_VALUE}{arg}")
            idx += 1
        else:
            bound.append(f"{PATH_OPTIONS[arg]}={argv[idx + 1]}")
            idx += 2
    return bound


def _parse_args(argv: Sequence[str]) -> RunConfig:
    namespace = argparse.Namespace(config=RunConfig())
    # options are applied in argv order; leftover tokens are reported after them
    args, unknown = _build_parser().parse_known_args(_bind_path_values(argv), namespace=namespace)
    if unknown:
        raise ConfigError(UNKNOWN_OPTION_FORMAT.format(unknown[0]))
    return args.config


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        cfg = _parse_args(argv)
        run(cfg)
    except HuffmanError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
