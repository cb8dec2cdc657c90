"""Case conversion and English pluralization helpers."""

from __future__ import annotations

import re


# Letter runs (any script) or digit runs; letter runs are split on case humps below.
_TOKEN_RE = re.compile(r"[^\W\d_]+|\d+")

# Checked in order; first match wins.
PLURAL_RULES: list[tuple[str, str]] = [
    (r"(quiz)$", r"\1zes"),
    (r"^(ox)$", r"\1en"),
    (r"([m|l])ouse$", r"\1ice"),
    (r"(matr|vert|ind)ix|ex$", r"\1ices"),
    (r"(x|ch|ss|sh)$", r"\1es"),
    (r"([^aeiouy]|qu)y$", r"\1ies"),
    (r"(hive)$", r"\1s"),
    (r"(?:([^f])fe|([lr])f)$", r"\1\2ves"),
    (r"(shea|lea|loa|thie)f$", r"\1ves"),
    (r"sis$", "ses"),
    (r"([ti])um$", r"\1a"),
    (r"(tomat|potat|ech|her|vet)o$", r"\1oes"),
    (r"(bu)s$", r"\1ses"),
    (r"(alias)$", r"\1es"),
    (r"(octop)us$", r"\1i"),
    (r"(ax|test)is$", r"\1es"),
    (r"(us)$", r"\1es"),
    (r"([^s]+)$", r"\1s"),
]

SINGULAR_RULES: list[tuple[str, str]] = [
    (r"(quiz)zes$", r"\1"),
    (r"(matr)ices$", r"\1ix"),
    (r"(vert|ind)ices$", r"\1ex"),
    (r"^(ox)en$", r"\1"),
    (r"(alias)es$", r"\1"),
    (r"(octop|vir)i$", r"\1us"),
    (r"(cris|ax|test)es$", r"\1is"),
    (r"(shoe)s$", r"\1"),
    (r"(o)es$", r"\1"),
    (r"(bus)es$", r"\1"),
    (r"([m|l])ice$", r"\1ouse"),
    (r"(x|ch|ss|sh)es$", r"\1"),
    (r"(m)ovies$", r"\1ovie"),
    (r"(s)eries$", r"\1eries"),
    (r"([^aeiouy]|qu)ies$", r"\1y"),
    (r"([lr])ves$", r"\1f"),
    (r"(tive)s$", r"\1"),
    (r"(hive)s$", r"\1"),
    (r"(li|wi|kni)ves$", r"\1fe"),
    (r"(shea|loa|lea|thie)ves$", r"\1f"),
    (r"(^analy)ses$", r"\1sis"),
    (r"((a)naly|(b)a|(d)iagno|(p)arenthe|(p)rogno|(s)ynop|(t)he)ses$", r"\1\2sis"),
    (r"([ti])a$", r"\1um"),
    (r"(n)ews$", r"\1ews"),
    (r"(h|bl)ouses$", r"\1ouse"),
    (r"(corpse)s$", r"\1"),
    (r"(us)es$", r"\1"),
    (r"s$", ""),
]

IRREGULAR: dict[str, str] = {
    "move": "moves",
    "foot": "feet",
    "goose": "geese",
    "sex": "sexes",
    "child": "children",
    "man": "men",
    "tooth": "teeth",
    "person": "people",
}

UNCOUNTABLE = frozenset(
    {
        "sheep",
        "fish",
        "deer",
        "moose",
        "series",
        "species",
        "money",
        "rice",
        "information",
        "equipment",
    }
)


def words(text: str) -> list[str]:
    """Split into words: ``"XMLHttpRequest"`` -> ``["XML", "Http", "Request"]``."""
    out: list[str] = []
    for token in _TOKEN_RE.findall(text):
        if token.isdigit():
            out.append(token)
        else:
            out.extend(_split_humps(token))
    return out


def _split_humps(token: str) -> list[str]:
    out: list[str] = []
    i, n = 0, len(token)
    while i < n:
        j = i
        while j < n and token[j].isupper():
            j += 1
        if j == n:
            out.append(token[i:])
            break
        # An upper run followed by a lower letter gives its last capital to the next word.
        if j - i > 1:
            out.append(token[i : j - 1])
            i = j - 1
        k = j
        while k < n and not token[k].isupper():
            k += 1
        out.append(token[i:k])
        i = k
    return out


def start_case(text: str) -> str:
    """``"fooBar"`` -> ``"Foo Bar"``."""
    return " ".join(upper_first(word) for word in words(text))


def camel_case(text: str) -> str:
    parts = [word.lower() for word in words(text)]
    if not parts:
        return ""
    return parts[0] + "".join(upper_first(part) for part in parts[1:])


def snake_case(text: str) -> str:
    return "_".join(word.lower() for word in words(text))


def to_lower(text: str) -> str:
    return text.lower()


def upper_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def pluralize(
    word: str,
    startcase: bool = False,
    camelcase: bool = False,
    snakecase: bool = False,
    tolower: bool = False,
    upperfirst: bool = False,
    revert: bool = False,
) -> str:
    """Pluralize ``word``, or singularize it when ``revert`` is set.

    Matching runs against the word with the case options applied; the
    replacement is made on the raw word and the options applied afterwards.
    """

    def apply_options(value: str) -> str:
        if startcase:
            value = start_case(value)
        if camelcase:
            value = camel_case(value)
        if snakecase:
            value = snake_case(value)
        if tolower:
            value = to_lower(value)
        if upperfirst:
            value = upper_first(value)
        return value

    formatted = apply_options(word)
    if formatted.lower() in UNCOUNTABLE:
        return formatted

    for single, plural in IRREGULAR.items():
        source, target = (plural, single) if revert else (single, plural)
        pattern = re.compile(f"{source}$", re.IGNORECASE)
        if pattern.search(formatted):
            return apply_options(pattern.sub(target, word, count=1))

    rules = SINGULAR_RULES if revert else PLURAL_RULES
    for regex, replacement in rules:
        pattern = re.compile(regex, re.IGNORECASE)
        if pattern.search(formatted):
            return apply_options(pattern.sub(replacement, word, count=1))

    return formatted
