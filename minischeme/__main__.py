"""Line-oriented REPL: one expression per line.

    python -m minischeme
"""
import logging
import sys
from typing import TextIO

from minischeme.config import get_log_level, get_prompt
from minischeme.errors import SchemeError
from minischeme.interpreter import Interpreter

logger = logging.getLogger(__name__)


def repl(stdin: TextIO, stdout: TextIO, interpreter: Interpreter | None = None,
         prompt: str = "") -> None:
    """Evaluate each non-blank line of `stdin`, writing results to `stdout`.

    Errors, including nesting too deep for the Python stack, are reported
    as `<ErrorKind>: message` and the loop continues.
    """
    interpreter = interpreter or Interpreter()
    stdout.write(prompt)
    stdout.flush()
    for line in stdin:
        if line.strip():
            try:
                stdout.write(interpreter.run(line) + "\n")
            except (SchemeError, RecursionError) as e:
                logger.debug("failed: %r", line, exc_info=True)
                stdout.write(f"{type(e).__name__}: {e}\n")
        stdout.write(prompt)
        stdout.flush()


def main() -> None:
    logging.basicConfig(level=get_log_level())
    prompt = get_prompt() if sys.stdin.isatty() else ""
    repl(sys.stdin, sys.stdout, prompt=prompt)


if __name__ == "__main__":
    main()
