"""Canonical country identities and their known aliases.

The table is an append-only multimap from canonical id to an ordered,
duplicate-free list of surface forms. Every component that discovers a
new spelling goes through ``register`` / ``register_alias``; nothing
else mutates the alias lists, so they only ever grow.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

from ..domain.models import CanonicalCountry, IdentityRecord
from .aliases import comma_swapped, hyphen_joined, identity_aliases, strip_article


@dataclass
class IdentityTable:
    """Canonical id -> aliases, plus every raw border-file name seen.

    Attributes:
        current_end_date: End date marking an identity record as current
    """

    current_end_date: str = "2020-12-31"

    _aliases: Dict[str, List[str]] = field(default_factory=dict, repr=False)
    _surface_forms: Dict[str, List[str]] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_records(
        cls, records: Iterable[IdentityRecord], current_end_date: str = "2020-12-31"
    ) -> IdentityTable:
        """Build a table from identity records and run the cleanup sweeps."""
        table = cls(current_end_date=current_end_date)
        table.bootstrap(records)
        return table

    def bootstrap(self, records: Iterable[IdentityRecord]) -> int:
        """Register every currently valid identity record.

        Returns:
            Number of records kept.
        """
        kept = 0
        for record in records:
            if record.end_date != self.current_end_date:
                continue
            self.register(record.state_id, identity_aliases(record.name))
            kept += 1

        self._comma_sweep()
        self._hyphen_sweep()

        self._logger.info(
            "Identity table bootstrapped",
            extra={"records": kept, "identities": len(self._aliases)},
        )
        return kept

    def _comma_sweep(self) -> None:
        for state_id, aliases in self._aliases.items():
            swapped = comma_swapped(aliases[0])
            if swapped:
                self.register_alias(state_id, swapped)

    def _hyphen_sweep(self) -> None:
        for state_id, aliases in self._aliases.items():
            joined = hyphen_joined(aliases[0])
            if joined:
                self.register_alias(state_id, joined)

    def register(self, state_id: str, aliases: Iterable[str]) -> None:
        """Union ``aliases`` into the entry for ``state_id``.

        An id seen for the first time becomes a provisional identity whose
        display name is the first alias given.
        """
        for alias in aliases:
            self.register_alias(state_id, alias)

    def register_alias(self, state_id: str, alias: str) -> bool:
        """Append one alias to ``state_id``.

        Returns:
            True if the alias was new for this id.
        """
        if not alias:
            return False
        known = self._aliases.get(state_id)
        if known is None:
            self._aliases[state_id] = [alias]
            self._logger.debug(
                "Identity registered", extra={"state_id": state_id, "alias": alias}
            )
            return True
        if alias in known:
            return False
        known.append(alias)
        return True

    def record_surface_forms(self, name: str, aliases: Iterable[str]) -> None:
        """Remember a raw border-file name and its aliases, resolved or not."""
        self._surface_forms[name] = list(aliases)

    def __contains__(self, state_id: object) -> bool:
        return state_id in self._aliases

    def __iter__(self) -> Iterator[str]:
        return iter(self._aliases)

    def __len__(self) -> int:
        return len(self._aliases)

    def items(self) -> Iterator[tuple[str, List[str]]]:
        """Iterate over (id, live alias list) pairs in registration order."""
        return iter(self._aliases.items())

    def aliases(self, state_id: str) -> tuple[str, ...]:
        return tuple(self._aliases.get(state_id, ()))

    def get(self, state_id: str) -> Optional[CanonicalCountry]:
        aliases = self._aliases.get(state_id)
        if not aliases:
            return None
        return CanonicalCountry(id=state_id, aliases=tuple(aliases))

    def display_name(self, state_id: str) -> str:
        """First alias of ``state_id``, or "Unknown Country"."""
        aliases = self._aliases.get(state_id)
        return aliases[0] if aliases else "Unknown Country"

    def lookup(self, name: str) -> Optional[str]:
        """Exact alias match; the first id registered with ``name`` wins."""
        for state_id, aliases in self._aliases.items():
            if name in aliases:
                return state_id
        return None

    def is_known_name(self, name: str) -> bool:
        """Check a user-entered name against aliases and border-file names."""
        name = strip_article(name)
        if self.lookup(name) is not None:
            return True
        return any(name in aliases for aliases in self._surface_forms.values())

    def snapshot(self) -> Dict[str, tuple[str, ...]]:
        """Immutable copy of the alias multimap."""
        return {state_id: tuple(aliases) for state_id, aliases in self._aliases.items()}
