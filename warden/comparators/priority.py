"""
Warden Network Priority
========================

Orders saved networks for a periodic-scan shortlist. Networks are ranked
by selection status first (enabled, then temporarily disabled, then
permanently disabled); networks with equal status are ordered by a
caller-supplied tie-break strategy.

A tie-break is any ``(a, b) -> int`` callable with :func:`cmp`
semantics: negative when ``a`` should come first. Two strategies are
supplied, :func:`by_last_connected` (recency) and
:func:`by_association_count` (frequency).
"""

from __future__ import annotations

import functools
from typing import Callable, Iterable

from warden.core.models import SelectionStatus, WifiConfiguration

TieBreak = Callable[[WifiConfiguration, WifiConfiguration], int]

_STATUS_SCORES: dict[SelectionStatus, int] = {
    SelectionStatus.ENABLED: 3,
    SelectionStatus.TEMPORARILY_DISABLED: 2,
    SelectionStatus.PERMANENTLY_DISABLED: 1,
}


def network_status_score(config: WifiConfiguration) -> int:
    """Status tier of *config*; higher ranks first."""
    return _STATUS_SCORES[config.selection_status]


def by_last_connected(a: WifiConfiguration, b: WifiConfiguration) -> int:
    """Most recently connected network first."""
    return b.last_connected - a.last_connected


def by_association_count(a: WifiConfiguration, b: WifiConfiguration) -> int:
    """Most frequently associated network first."""
    return b.num_association - a.num_association


TIE_BREAKS: dict[str, TieBreak] = {
    "recency": by_last_connected,
    "frequency": by_association_count,
}


class NetworkStatusComparator:
    """Status-first comparator parameterized by a tie-break strategy.

    Usage::

        comparator = NetworkStatusComparator(by_last_connected)
        ordered = sorted(configs, key=comparator.sort_key())
    """

    def __init__(self, tie_break: TieBreak) -> None:
        self._tie_break = tie_break

    @property
    def tie_break(self) -> TieBreak:
        return self._tie_break

    def compare(self, a: WifiConfiguration, b: WifiConfiguration) -> int:
        """Negative when *a* ranks before *b*, positive after, 0 for a tie."""
        score_a = network_status_score(a)
        score_b = network_status_score(b)
        if score_a != score_b:
            return score_b - score_a
        return self._tie_break(a, b)

    def sort_key(self) -> Callable[[WifiConfiguration], object]:
        return functools.cmp_to_key(self.compare)


def sort_networks(
    configs: Iterable[WifiConfiguration],
    tie_break: TieBreak = by_last_connected,
) -> list[WifiConfiguration]:
    """Return a new list of *configs* in ranking order.

    The sort is stable: networks the comparator considers equal keep
    their input order.
    """
    comparator = NetworkStatusComparator(tie_break)
    return sorted(configs, key=comparator.sort_key())
