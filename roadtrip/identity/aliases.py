"""Alternate spellings of country names.

The three datasets disagree on how a country is written: "Korea, South"
versus "South Korea", "Bosnia-Herzegovina" versus "Bosnia and
Herzegovina", "Germany (Prussia)", "Cote d'Ivoire" versus
"Cote D’Ivoire", "Yemen/North Yemen", etc. The functions here turn one
raw name into the ordered list of candidate spellings used to join it
with the other datasets.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

# "X, Y" where Y does not start with "T" ("Bahamas, The" is handled by
# the generic comma rule instead)
_COMMA_INVERSION = re.compile(r", [A-SU-Z]")
_COMMA_SPLIT = re.compile(r",\s+")
_AND_SPLIT = re.compile(r"\s+and\s+")
_BRACKETS = re.compile(r"^(?P<prefix>[^(]*)\((?P<inner>[^)]*)\)(?P<suffix>.*)$")
_ARTICLE = re.compile(r"\bthe\b")
_DIGITS = re.compile(r"\d+")
_SPACES = re.compile(r"\s+")

TYPOGRAPHIC_APOSTROPHE = "’"


def _unique(names: Iterable[str]) -> List[str]:
    seen = set()
    result = []
    for name in names:
        if name and name not in seen:
            seen.add(name)
            result.append(name)
    return result


def _join(*parts: str) -> str:
    return " ".join(part.strip() for part in parts if part.strip())


def strip_article(name: str) -> str:
    """Drop the lowercase article "the" ("Congo, Republic of the")."""
    return _SPACES.sub(" ", _ARTICLE.sub("", name)).strip()


def strip_distance_marker(segment: str) -> str:
    """Keep the text before the first number ("Greece 212 km" -> "Greece")."""
    return _DIGITS.split(segment, maxsplit=1)[0].strip()


def flip_apostrophe_case(name: str) -> str:
    """Flip the case of the letter before the first apostrophe.

    The apostrophe itself is rewritten in its typographic form, which is
    how the identity dataset spells it.
    """
    index = name.find("'")
    if index <= 0:
        return name
    letter = name[index - 1]
    flipped = letter.lower() if letter.isupper() else letter.upper()
    return name[: index - 1] + flipped + TYPOGRAPHIC_APOSTROPHE + name[index + 1 :]


def bracket_aliases(name: str) -> List[str]:
    """Split "prefix (inner) suffix" into its alternate names.

    Returns ``[name]`` when the name carries no parenthetical segment.
    """
    match = _BRACKETS.match(name)
    if match is None:
        return [name]
    prefix, inner, suffix = match.group("prefix", "inner", "suffix")
    return _unique([_join(prefix, suffix), _join(inner, suffix), name])


def slash_aliases(name: str) -> List[str]:
    """Split "X/Y" into ``[X, Y]``; otherwise ``[name]``."""
    parts = [part.strip() for part in name.split("/")]
    if len(parts) > 1:
        return _unique(parts[:2])
    return [name]


def comma_aliases(name: str) -> List[str]:
    """Generic "X, Y" rule: ``[name, X, "Y X"]``."""
    parts = _COMMA_SPLIT.split(name)
    if len(parts) > 1:
        return _unique([name, parts[0].strip(), _join(parts[1], parts[0])])
    return [name]


def and_aliases(name: str) -> List[str]:
    """"X and Y" rule: ``[name, "X-Y"]``."""
    parts = _AND_SPLIT.split(name)
    if len(parts) > 1:
        return _unique([name, f"{parts[0].strip()}-{parts[1].strip()}"])
    return [name]


def comma_swapped(name: str) -> Optional[str]:
    """"X, Y" -> "Y X", or None."""
    parts = _COMMA_SPLIT.split(name)
    if len(parts) > 1:
        return _join(parts[1], parts[0])
    return None


def hyphen_joined(name: str) -> Optional[str]:
    """"X-Y" -> "X and Y", or None."""
    parts = name.split("-")
    if len(parts) > 1:
        return f"{parts[0].strip()} and {parts[1].strip()}"
    return None


def identity_aliases(name: str) -> List[str]:
    """Aliases for an identity-dataset name: brackets first, then slashes."""
    aliases = bracket_aliases(name)
    if len(aliases) == 1:
        aliases = slash_aliases(name)
    return aliases


def generate_aliases(name: str) -> List[str]:
    """Candidate spellings for a border-dataset name.

    The first matching rule wins:

    1. "Korea, South" -> ["Korea, South", "South Korea"]
    2. "Cote d'Ivoire" -> ["Cote d'Ivoire", "Cote D’Ivoire"]
    3. "Macedonia (Former Yugoslav Republic of)" -> prefix, inner, original
    4. "Bahamas, The" -> ["Bahamas, The", "Bahamas", "The Bahamas"]
    5. "Bosnia and Herzegovina" -> [..., "Bosnia-Herzegovina"]

    Anything else yields ``[name]``.
    """
    if _COMMA_INVERSION.search(name):
        swapped = comma_swapped(name)
        return _unique([name.strip(), swapped or ""])

    if "'" in name:
        return _unique([name, flip_apostrophe_case(name)])

    aliases = bracket_aliases(name)
    if len(aliases) == 1:
        aliases = comma_aliases(name)
        if len(aliases) == 1:
            aliases = and_aliases(name)
    return aliases
