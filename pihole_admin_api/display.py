"""
Console presenters for Pi-hole statistics.

These helpers only format records that the API client already returned;
they do not make requests.
"""

import sys
from typing import List, Mapping, Optional, TextIO, Tuple, TypeVar

from .models.summary import PiholeSummary
from .models.stats import PiholeTopItems, PiholeTopClients

N = TypeVar("N", int, float)


def sorted_by_frequency(mapping: Mapping[str, N]) -> List[Tuple[str, N]]:
    """
    Order a ``name -> frequency`` mapping for display.

    Entries are sorted by descending frequency. The sort is stable, so names
    sharing a frequency all appear, in the mapping's iteration order.

    Args:
        mapping: Frequency mapping, e.g. ``PiholeTopItems.blocked``.

    Returns:
        List of ``(name, frequency)`` pairs.
    """
    return sorted(mapping.items(), key=lambda item: item[1], reverse=True)


def _show_ranking(
    title: str, mapping: Mapping[str, int], stream: Optional[TextIO]
) -> None:
    out = stream if stream is not None else sys.stdout
    print(f"=== {title}:", file=out)
    for name, frequency in sorted_by_frequency(mapping):
        print(f"- {name} : {frequency}", file=out)


def show_summary(summary: PiholeSummary, stream: Optional[TextIO] = None) -> None:
    """Print the headline 24h figures of a summary."""
    out = stream if stream is not None else sys.stdout
    print("=== 24h Summary:", file=out)
    print(f"- Blocked Domains: {summary.ads_blocked_today}", file=out)
    print(f"- Blocked Percentage: {summary.ads_percentage_today}", file=out)
    print(f"- Queries: {summary.dns_queries_today}", file=out)
    print(f"- Clients Ever Seen: {summary.clients_ever_seen}", file=out)


def show_top_blocked(top_items: PiholeTopItems, stream: Optional[TextIO] = None) -> None:
    """Print the top blocked domains, most frequent first."""
    _show_ranking("Blocked domains over last 24h", top_items.blocked, stream)


def show_top_queries(top_items: PiholeTopItems, stream: Optional[TextIO] = None) -> None:
    """Print the top queried domains, most frequent first."""
    _show_ranking("Queries over last 24h", top_items.queries, stream)


def show_top_clients(top_clients: PiholeTopClients, stream: Optional[TextIO] = None) -> None:
    _show_ranking("Clients over last 24h", top_clients.clients, stream)
