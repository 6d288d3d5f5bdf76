"""
Token shapes and the preprocessing pass.

Every raw token is one of three shapes:
- long option: starts with "--" (e.g., --operation, --operation=sum)
- short option: starts with a single "-" (e.g., -o, -osum, -vx)
- positional: anything else

Preprocessing rewrites the raw tokens into a normalized stream where every option
token is a bare prefix:
- "-xREST" (a short token longer than two characters) becomes "-x" followed by
  one "-c" token per character of REST when "-x" is a registered flag, or by the
  single value token "REST" otherwise.
- "--name=value" becomes "--name" followed by "value"; "--name=" becomes "--name".
- Everything else passes through unchanged.

Negative numbers are option-shaped ("-5" is a short option token) and therefore
cannot be passed as positional values.
"""

SHORT_OPTION_LENGTH = 2


def is_option(token, /):
    return token.startswith("-")


def is_long_option(token, /):
    return token.startswith("--")


def is_short_option(token, /):
    return is_option(token) and not is_long_option(token)


def preprocess(tokens, is_flag, /):
    """
    Normalize raw tokens; `is_flag(prefix)` tells whether a short prefix is a
    registered flag (and so whether the rest of the token is a flag cluster).

    Examples
        >>> preprocess(["-tf", "--name=x", "-ovalue"], {"-t", "-f"}.__contains__)
        ['-t', '-f', '--name', 'x', '-o', 'value']
    """
    result = []
    for token in tokens:
        if is_short_option(token) and len(token) > SHORT_OPTION_LENGTH:
            prefix, rest = token[:SHORT_OPTION_LENGTH], token[SHORT_OPTION_LENGTH:]
            result.append(prefix)
            if is_flag(prefix):
                result.extend("-" + character for character in rest)
            else:
                result.append(rest)
        elif is_long_option(token) and "=" in token:
            prefix, _, value = token.partition("=")
            result.append(prefix)
            if value:
                result.append(value)
        else:
            result.append(token)
    return result


__all__ = (
    "SHORT_OPTION_LENGTH",
    "is_option",
    "is_long_option",
    "is_short_option",
    "preprocess",
)
