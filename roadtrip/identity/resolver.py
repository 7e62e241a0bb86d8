"""Resolution of country names to canonical ids.

Exact string joins fail for most entries because the datasets were
written independently, so the resolver is permissive: after an exact
alias match it tries substring, acronym, trimmed and word-level matches,
and finally a fixed table of historically divergent names. Two unrelated
countries sharing a common word can therefore collide; that risk is
accepted as an upstream data-quality issue.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Sequence

from .table import IdentityTable

_OVERRIDE_GROUPS: Dict[str, Sequence[str]] = {
    "RUM": ("Romania", "Rumania"),
    "KYR": ("Kyrgyzstan", "Kyrgyz Republic"),
    "CZR": ("Czech Republic", "Czechia"),
    "ROK": ("Korea, South", "South Korea", "Korea, Republic of", "Republic of Korea"),
    "PRK": (
        "Korea, North",
        "North Korea",
        "Korea, People's Republic of",
        "People's Republic of Korea",
    ),
    "BHM": ("Bahamas, The", "Bahamas", "The Bahamas"),
    "ETM": ("East Timor", "Timor-Leste"),
    "CAP": ("Cabo Verde", "Cape Verde"),
    "SWA": ("Eswatini", "Swaziland"),
}

# Name -> canonical id for pairs that share no substring
NAME_OVERRIDES: Mapping[str, str] = MappingProxyType(
    {name: state_id for state_id, names in _OVERRIDE_GROUPS.items() for name in names}
)


def uppercase_letters(text: str) -> str:
    """Acronym of ``text``: its uppercase letters, in order."""
    return "".join(ch for ch in text if ch.isupper())


@dataclass
class IdentityResolver:
    """Looks up, or infers, the canonical id of a country name.

    Attributes:
        table: Identity table searched (and enriched with acronyms)
        overrides: Fixed name -> id table tried last
    """

    table: IdentityTable
    overrides: Mapping[str, str] = field(default_factory=lambda: NAME_OVERRIDES)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def resolve(self, name: str, aliases: Iterable[str]) -> Optional[str]:
        """Resolve ``name`` through its generated ``aliases``.

        Returns:
            The canonical id, or None when nothing matches.
        """
        for alias in aliases:
            if not alias:
                continue
            state_id = (
                self._exact(alias)
                or self._heuristic(alias)
                or self.overrides.get(alias)
            )
            if state_id is not None:
                self._logger.debug(
                    "Name resolved",
                    extra={"name": name, "alias": alias, "state_id": state_id},
                )
                return state_id

        self._logger.debug("Name not resolved", extra={"name": name})
        return None

    def _exact(self, alias: str) -> Optional[str]:
        return self.table.lookup(alias)

    def _heuristic(self, alias: str) -> Optional[str]:
        trimmed = alias[:-1]
        words = alias.split(" ")

        for state_id, known in list(self.table.items()):
            for registered in list(known):
                if alias in registered or registered in alias:
                    return state_id

                acronym = uppercase_letters(registered)
                if acronym == alias:
                    return state_id
                if acronym and acronym[:-1] == alias:
                    self.table.register_alias(state_id, acronym)
                    return state_id

                if trimmed and f"{trimmed} " in f"{registered} ":
                    return state_id

            if trimmed and trimmed in known:
                return state_id

            if any(word in known for word in words):
                return state_id

        return None
