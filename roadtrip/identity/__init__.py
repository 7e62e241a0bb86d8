"""Entity resolution for country names.

This subpackage generates alternate spellings of country names, keeps
the canonical identity table, and resolves names from any of the three
datasets onto canonical ids.
"""

from .aliases import generate_aliases, identity_aliases, strip_article
from .resolver import NAME_OVERRIDES, IdentityResolver
from .table import IdentityTable

__all__ = [
    "generate_aliases",
    "identity_aliases",
    "strip_article",
    "IdentityTable",
    "IdentityResolver",
    "NAME_OVERRIDES",
]
