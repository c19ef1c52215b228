# main.py

"""
Command-line front end for the calculator language.

The front end reads a program, runs it through the interpreter once for the
result and once for the printed form, and shows both. Programs can come from
``-e``, from a file (``-`` for stdin), or from an interactive prompt where every
line is run as a fresh program.

Configuration is read from the environment (a ``.env`` file is honoured) and
overridden by command-line flags:

- EXPRCALC_LOG_LEVEL    logging level name (default WARNING)
- EXPRCALC_HISTORY_FILE prompt history file (default ~/.exprcalc_history)
- EXPRCALC_HTML         print raw HTML markup instead of plain text
"""

import argparse
import logging
import os
import sys
from typing import List, Optional, Tuple

from dotenv import load_dotenv
from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory
from pydantic import BaseModel, ValidationError, field_validator

from .errors import CalculatorError
from .evaluator import OUTPUT_NAME, initial_symbols
from .interpreter import Interpretation, run
from .printer import HTML_STYLE, TEXT_STYLE

logger = logging.getLogger(__name__)

ENV_PREFIX = "EXPRCALC_"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# ---------------------------
# Settings
# ---------------------------

class Settings(BaseModel):
    """Front-end settings assembled from the environment and the command line."""
    log_level: str = "WARNING"
    history_file: str = "~/.exprcalc_history"
    html: bool = False

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('history_file')
    @classmethod
    def expand_history_path(cls, v: str) -> str:
        return os.path.expanduser(v.strip())

    @classmethod
    def load(cls, **overrides) -> "Settings":
        """Build settings from EXPRCALC_* variables, then apply non-None overrides."""
        values = {}
        for name in cls.model_fields:
            env_value = os.getenv(ENV_PREFIX + name.upper())
            if env_value is not None:
                values[name] = env_value
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


# ---------------------------
# Output
# ---------------------------

def format_interpretation(result: Interpretation, html: bool = False) -> str:
    """Render a result as the HTML display line or as plain text lines."""
    if html:
        return result.display()
    return f"{result.printed}{OUTPUT_NAME} = {result.out_text()}"


def run_program(text: str, settings: Settings) -> Tuple[bool, str]:
    """Run one program; returns (ok, output) where output is the error message on failure."""
    style = HTML_STYLE if settings.html else TEXT_STYLE
    try:
        result = run(text, style)
    except CalculatorError as e:
        logger.error(f"Program failed: {e}")
        return False, f"Error: {e}"
    return True, format_interpretation(result, settings.html)


# ---------------------------
# REPL
# ---------------------------

HELP_TEXT = """
Calculator Help
---------------
Each line is a program of assignments separated by ';':
  > x = 2; y = x * 3; out = y + 1
  out = 7

Operators (all right-associative):
  + -        addition, subtraction
  * / ^      multiplication, division, exponentiation
  -x +x      sign
  !x x!      factorial
  ( )        grouping

Constants: pi, e. The value of a program is the variable 'out'.
Variables do not carry over from one line to the next.

Commands:
  :help       show this help
  :exit/:quit leave the calculator (Ctrl-D also works)
"""


class REPL:
    """Read-Eval-Print Loop for the calculator."""

    PROMPT = '> '

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()

    def _process_command(self, line: str) -> Optional[str]:
        """Handle ':' commands. Returns the response, or None if the line is a program."""
        if not line.startswith(':'):
            return None
        cmd = line[1:].strip().lower()
        if cmd in ('exit', 'quit'):
            raise EOFError()
        if cmd == 'help':
            return HELP_TEXT.strip()
        return f"Unknown command: {line}"

    def evaluate_line(self, line: str) -> Tuple[bool, str]:
        """Evaluate a single line (either command or program). Returns (ok, output)."""
        line = line.strip()
        response = self._process_command(line)
        if response is not None:
            return True, response
        return run_program(line, self.settings)

    def repl_loop(self) -> None:
        """Interactive loop with persistent prompt history and constant-name completion."""
        session = PromptSession(history=FileHistory(self.settings.history_file))
        completer = WordCompleter(sorted(initial_symbols()) + [OUTPUT_NAME])
        print("Calculator REPL. Type :help for help. Ctrl-D or :exit to quit.")
        while True:
            try:
                line = session.prompt(self.PROMPT, completer=completer)
            except KeyboardInterrupt:
                print("^C")
                continue
            except EOFError:
                break
            if not line.strip():
                continue
            try:
                _, out = self.evaluate_line(line)
            except EOFError:
                break
            print(out)
        print("Goodbye!")


# ---------------------------
# Main Entry Point
# ---------------------------

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprcalc",
        description="Evaluate and pretty-print calculator programs.",
    )
    parser.add_argument(
        "program",
        nargs="?",
        help="File containing the program ('-' for stdin). Starts a REPL when omitted.",
    )
    parser.add_argument(
        "-e", "--expr",
        type=str,
        help="Program text to run, e.g. 'x = 2; out = x ^ 3'.",
    )
    parser.add_argument(
        "--html",
        action="store_true",
        default=None,
        help="Print HTML markup instead of plain text.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level name (default: WARNING).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    try:
        settings = Settings.load(log_level=args.log_level, html=args.html)
    except ValidationError as e:
        parser.error(f"invalid settings: {e}")
    configure_logging(settings.log_level)

    if args.expr is not None:
        text = args.expr
    elif args.program == "-":
        text = sys.stdin.read()
    elif args.program is not None:
        try:
            with open(args.program, "r", encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            parser.error(f"can't open '{args.program}': {e}")
    else:
        REPL(settings).repl_loop()
        return 0

    logger.info(f"Running program of {len(text)} characters")
    ok, out = run_program(text, settings)
    print(out)
    return 0 if ok else 1


if __name__ == '__main__':
    sys.exit(main())
