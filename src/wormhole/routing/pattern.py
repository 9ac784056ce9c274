"""Path template compiler.

Turns a template such as ``/users/:uname/comments/:id`` into a
``PathMatcher``: one anchored regular expression plus the ordered list of
parameter keys it captures.

Template syntax::

    /users              literal text
    /users/:id          named parameter, one path segment
    /users/:id(\\d+)     named parameter with a custom pattern
    /files/:path*       zero or more segments ("?" optional, "+" one or more)
    /files/(.*)         unnamed group, keyed "0", "1", ...
    /static/*           everything, keyed positionally
    /a\\:b               backslash escapes the next character

Malformed templates raise ``PatternCompileError`` here, at compile time.
Matching never raises.
"""

import re
from dataclasses import dataclass

from wormhole.errors import PatternCompileError

# escaped char | optional prefix, then :name(pattern)? | (pattern), modifier | bare *
_TOKEN_RE = re.compile(
    r"(\\.)"
    r"|([/.])?(?:(?::(\w+)(?:\(((?:\\.|[^\\()])+)\))?|\(((?:\\.|[^\\()])+)\))([+*?])?|(\*))"
)

_DELIMITER = "/"


@dataclass(frozen=True, slots=True)
class MatchOptions:
    """How a compiled template matches request paths.

    Defaults: case-insensitive, trailing slash optional, whole path.
    """

    case_sensitive: bool = False
    strict_slashes: bool = False
    match_to_end: bool = True


@dataclass(frozen=True, slots=True)
class ParamKey:
    """One capture in a compiled template.

    Named:      ``/:id``       (name="id")
    Optional:   ``/:id?``      (optional=True)
    Repeated:   ``/:path+``    (repeat=True, captures across "/")
    Unnamed:    ``/(\\d+)``     (name="0")
    """

    name: str
    prefix: str
    pattern: str
    optional: bool = False
    repeat: bool = False
    partial: bool = False


@dataclass(frozen=True, slots=True)
class PathMatcher:
    """A compiled path template.

    Usage::

        matcher = compile_pattern("/users/:id")
        matcher.matches("/users/42")   # True
        matcher.extract("/users/42")   # [("id", "42")]
    """

    template: str
    options: MatchOptions
    regex: re.Pattern[str]
    keys: tuple[ParamKey, ...]

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(key.name for key in self.keys)

    def matches(self, path: str) -> bool:
        return self.regex.match(path) is not None

    def extract(self, path: str) -> list[tuple[str, str | None]]:
        """Return ``(name, captured)`` pairs in template order.

        Only meaningful after ``matches(path)`` returned True. An optional
        parameter that did not participate in the match yields ``None``.
        """
        m = self.regex.match(path)
        if m is None:
            msg = f"{path!r} does not match {self.template!r}"
            raise ValueError(msg)
        return list(zip(self.param_names, m.groups(), strict=True))


def compile_pattern(template: str, options: MatchOptions | None = None) -> PathMatcher:
    """Compile *template* into a ``PathMatcher``.

    Raises ``PatternCompileError`` if the template is malformed.
    """
    if options is None:
        options = MatchOptions()
    tokens = _parse(template)
    keys = tuple(token for token in tokens if isinstance(token, ParamKey))
    source = _to_regex_source(tokens, options)
    flags = 0 if options.case_sensitive else re.IGNORECASE
    try:
        regex = re.compile(source, flags)
    except re.error as exc:
        raise PatternCompileError(template, str(exc)) from exc
    return PathMatcher(template=template, options=options, regex=regex, keys=keys)


def join_paths(*parts: str) -> str:
    """Join a prefix and a template into one path.

    Unlike ``posixpath.join`` an absolute part never discards what came
    before it::

        join_paths("/parent/:pid", "/child/:cid") -> "/parent/:pid/child/:cid"
        join_paths("", "/")                        -> "/"
        join_paths("/foo", "/")                    -> "/foo/"

    Duplicate slashes collapse, ``.`` segments drop, ``..`` removes the
    segment before it (never climbing above the root of an absolute path),
    and a trailing slash is preserved::

        join_paths("/a/../b", "/c")                -> "/b/c"
    """
    joined = _DELIMITER.join(part for part in parts if part)
    if not joined:
        return _DELIMITER
    leading = joined.startswith(_DELIMITER)
    trailing = joined.endswith(_DELIMITER)
    segments: list[str] = []
    for segment in joined.split(_DELIMITER):
        if not segment or segment == ".":
            continue
        if segment == "..":
            if segments and segments[-1] != "..":
                segments.pop()
            elif not leading:
                segments.append(segment)
            continue
        segments.append(segment)
    result = _DELIMITER.join(segments)
    if leading:
        result = _DELIMITER + result
    if trailing and segments:
        result += _DELIMITER
    return result


def _check_literal(template: str, text: str) -> None:
    if "(" in text or ")" in text:
        raise PatternCompileError(template, "unbalanced, nested or empty parentheses")
    if ":" in text:
        raise PatternCompileError(template, "':' must be followed by a parameter name")
    if "\\" in text:
        raise PatternCompileError(template, "trailing escape character")


def _parse(template: str) -> list[str | ParamKey]:
    tokens: list[str | ParamKey] = []
    literal = ""
    position = 0
    unnamed = 0

    for m in _TOKEN_RE.finditer(template):
        text = template[position : m.start()]
        _check_literal(template, text)
        literal += text
        position = m.end()

        escaped = m.group(1)
        if escaped:
            literal += escaped[1]
            continue

        prefix, name, capture, group, modifier, asterisk = m.group(2, 3, 4, 5, 6, 7)
        next_char = template[position : position + 1]

        if literal:
            tokens.append(literal)
            literal = ""

        if name is None:
            name = str(unnamed)
            unnamed += 1

        custom = capture or group
        if custom:
            pattern = _check_custom_pattern(template, custom)
        elif asterisk:
            pattern = ".*"
        else:
            pattern = f"[^{re.escape(prefix or _DELIMITER)}]+?"

        tokens.append(
            ParamKey(
                name=name,
                prefix=prefix or "",
                pattern=pattern,
                optional=modifier in ("?", "*"),
                repeat=modifier in ("+", "*"),
                partial=prefix is not None and next_char != "" and next_char != prefix,
            )
        )

    tail = template[position:]
    _check_literal(template, tail)
    literal += tail
    if literal:
        tokens.append(literal)
    return tokens


def _check_custom_pattern(template: str, pattern: str) -> str:
    # Parentheses never get this far, the token grammar rejects them
    try:
        re.compile(pattern)
    except re.error as exc:
        raise PatternCompileError(template, f"invalid pattern {pattern!r}: {exc}") from exc
    return pattern


def _to_regex_source(tokens: list[str | ParamKey], options: MatchOptions) -> str:
    route = ""
    for token in tokens:
        if isinstance(token, str):
            route += re.escape(token)
            continue

        prefix = re.escape(token.prefix)
        capture = f"(?:{token.pattern})"
        if token.repeat:
            capture += f"(?:{prefix}{capture})*"
        if token.optional:
            if token.partial:
                capture = f"{prefix}({capture})?"
            else:
                capture = f"(?:{prefix}({capture}))?"
        else:
            capture = f"{prefix}({capture})"
        route += capture

    ends_with_delimiter = route.endswith(_DELIMITER)
    if not options.strict_slashes:
        if ends_with_delimiter:
            route = route[: -len(_DELIMITER)]
        route += rf"(?:{_DELIMITER}(?=\Z))?"

    if options.match_to_end:
        route += r"\Z"
    elif not (options.strict_slashes and ends_with_delimiter):
        route += rf"(?={_DELIMITER}|\Z)"

    return "^" + route
