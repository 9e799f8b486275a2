"""Turn a raw input line into a CommandSpec."""

import logging

from smallsh.errors import ParseValidationError
from smallsh.models import DEFAULT_MAX_ARGS, DEFAULT_MAX_LINE_LENGTH, CommandSpec

log = logging.getLogger(__name__)

INPUT_REDIRECT = "<"
OUTPUT_REDIRECT = ">"
BACKGROUND = "&"
COMMENT_PREFIX = "#"
CONTROL_TOKENS = frozenset({INPUT_REDIRECT, OUTPUT_REDIRECT, BACKGROUND})


def is_blank_or_comment(line: str) -> bool:
    """Return whether a line should be ignored without further action."""
    stripped = line.strip()
    return not stripped or stripped.startswith(COMMENT_PREFIX)


def _redirect_target(tokens: list[str], index: int) -> str:
    """Return the filename following the operator at ``index``."""
    if index + 1 >= len(tokens) or tokens[index + 1] in CONTROL_TOKENS:
        raise ParseValidationError(
            f"missing filename for redirection after '{tokens[index]}'"
        )
    return tokens[index + 1]


def build_command_spec(
    line: str,
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
    max_args: int = DEFAULT_MAX_ARGS,
) -> CommandSpec | None:
    """Parse ``line`` into a CommandSpec, or None for a blank/comment line.

    ``&`` marks the command as background and ends parsing wherever it
    appears; anything after it is discarded. A repeated redirect keeps
    the last filename.
    """
    line = line.rstrip("\n")
    if is_blank_or_comment(line):
        return None
    if len(line) > max_line_length:
        raise ParseValidationError(
            f"command line is too long ({len(line)} characters, limit {max_line_length})"
        )

    tokens = line.split()
    argv: list[str] = []
    input_redirect: str | None = None
    output_redirect: str | None = None
    background = False

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token == INPUT_REDIRECT:
            input_redirect = _redirect_target(tokens, i)
            i += 2
        elif token == OUTPUT_REDIRECT:
            output_redirect = _redirect_target(tokens, i)
            i += 2
        elif token == BACKGROUND:
            background = True
            if i != len(tokens) - 1:
                log.debug("ignoring %d token(s) after '&'", len(tokens) - i - 1)
            break
        else:
            argv.append(token)
            i += 1

    if not argv:
        raise ParseValidationError("missing command name")
    if len(argv) > max_args:
        raise ParseValidationError(f"too many arguments ({len(argv)}, limit {max_args})")

    spec = CommandSpec(
        argv=argv,
        input_redirect=input_redirect,
        output_redirect=output_redirect,
        background=background,
    )
    log.debug("parsed %r -> %s", line, spec)
    return spec
