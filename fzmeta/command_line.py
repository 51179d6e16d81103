"""Parsing of ``--key value`` and ``-flag`` style command lines."""

from __future__ import annotations

from dataclasses import dataclass

from fzmeta.text import is_space

MAX_COMMAND_LINE_ARGS = 16
MAX_RAW_LENGTH = 2047


@dataclass(frozen=True)
class CommandLineArg:
    """One parsed argument; a flag carries its own key as value."""

    key: str
    value: str
    is_flag: bool = False


def strip_quotes(text: str) -> str:
    """Remove one pair of surrounding double quotes, if present."""
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    return text


def strip_leading_dashes(text: str) -> str:
    """Remove every leading '-'."""
    return text.lstrip("-")


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and is_space(text[pos]):
        pos += 1
    return pos


def _read_token(text: str, pos: int) -> tuple[str, int]:
    """Read one token starting at ``pos``; return it and the position after it."""
    pos = _skip_whitespace(text, pos)
    if pos >= len(text):
        return "", pos
    if text[pos] == '"':
        start = pos + 1
        end = text.find('"', start)
        if end < 0:
            return text[start:], len(text)
        return text[start:end], end + 1
    end = pos
    while end < len(text) and not is_space(text[end]):
        end += 1
    return text[pos:end], end


def split_tokens(text: str) -> list[str]:
    """Split ``text`` on whitespace; a double-quoted run forms one token without its quotes."""
    tokens: list[str] = []
    pos = _skip_whitespace(text, 0)
    while pos < len(text):
        token, pos = _read_token(text, pos)
        tokens.append(token)
        pos = _skip_whitespace(text, pos)
    return tokens


def parse_command_line(text: str) -> list[CommandLineArg]:
    """Parse a raw command line into keyed arguments and flags.

    A token starting with '-' is a key; the next token is its value unless
    the line ends or the next token starts with '-', in which case the key
    is a flag. Tokens that are not keys or values are ignored. At most
    ``MAX_COMMAND_LINE_ARGS`` arguments are returned.
    """
    text = text.split("\0", 1)[0][:MAX_RAW_LENGTH]
    args: list[CommandLineArg] = []
    pos = 0
    while pos < len(text) and len(args) < MAX_COMMAND_LINE_ARGS:
        pos = _skip_whitespace(text, pos)
        if pos >= len(text):
            break
        token, pos = _read_token(text, pos)
        if not token:
            break
        if token[0] != "-":
            continue
        key = strip_leading_dashes(token)
        pos = _skip_whitespace(text, pos)
        if pos >= len(text) or text[pos] == "-":
            args.append(CommandLineArg(key, key, True))
        else:
            value, pos = _read_token(text, pos)
            args.append(CommandLineArg(key, strip_quotes(value), False))
    return args