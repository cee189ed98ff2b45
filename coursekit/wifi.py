"""Wi-Fi scan records: parsing, tabulating, sorting and a linked list of networks."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable, Iterator, MutableSequence, Optional, Sequence, Union

_RULE_WIDTH = 87
_INT = r"[+-]?\d+"
_FLOAT = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_LINE = re.compile(
    rf"\s*(\S+)\s+({_INT})[\s\S]\s*({_INT})\s*({_FLOAT})\s*({_FLOAT})\s*({_FLOAT})"
)

PathLike = Union[str, Path]


@dataclass
class Wifi:
    """One scanned network."""

    ssid: str
    signal_strength: int
    channel: int
    bandwidth: float
    freq: float
    max_rate: float


def parse_wifi_line(line: str) -> Wifi:
    """Parse ``SSID strength<c> channel bandwidth freq max_rate``.

    One character directly after the strength is skipped. Raises ValueError
    when the line does not hold all six fields.
    """
    match = _LINE.match(line)
    if match is None:
        raise ValueError(f"malformed network line: {line!r}")
    ssid, strength, channel, bandwidth, freq, rate = match.groups()
    return Wifi(ssid, int(strength), int(channel), float(bandwidth), float(freq), float(rate))


def read_wifi_file(path: PathLike) -> list[Wifi]:
    """Read networks from ``path``, skipping the header line and blank lines."""
    with open(path, encoding="utf-8") as infile:
        next(infile, None)
        return [parse_wifi_line(line) for line in infile if line.strip()]


def count_lines(path: PathLike) -> int:
    """Count newline characters in ``path``."""
    with open(path, "rb") as infile:
        return sum(chunk.count(b"\n") for chunk in iter(lambda: infile.read(65536), b""))


def format_wifi_table(networks: Iterable[Wifi]) -> str:
    """Render networks as a fixed-width table framed by rules."""
    parts = [
        "=" * _RULE_WIDTH + "\n",
        f"{'SSID':<20}{'Strength':<15}{'Channel':<10}"
        f"{'Bandwidth':<15}{'Frequency':<15}{'Max rate':<15}\n",
        "-" * _RULE_WIDTH + "\n",
    ]
    parts.extend(
        f"{w.ssid:<20}{w.signal_strength:<15d}{w.channel:<10d}"
        f"{w.bandwidth:<15.3f}{w.freq:<15.3f}{w.max_rate:<15.3f}\n"
        for w in networks
    )
    parts.append("=" * _RULE_WIDTH + "\n\n\n")
    return "".join(parts)


def _partition(networks: MutableSequence[Wifi], low: int, high: int) -> int:
    pivot = networks[high].signal_strength
    i = low - 1
    for j in range(low, high):
        if networks[j].signal_strength < pivot:
            i += 1
            networks[i], networks[j] = networks[j], networks[i]
    networks[i + 1], networks[high] = networks[high], networks[i + 1]
    return i + 1


def _quick_sort(networks: MutableSequence[Wifi], low: int, high: int) -> None:
    if low >= high:
        return
    pivot_index = _partition(networks, low, high)
    _quick_sort(networks, low, pivot_index - 1)
    _quick_sort(networks, pivot_index + 1, high)


def sort_by_strength(networks: MutableSequence[Wifi]) -> None:
    """Quick-sort ``networks`` in place by ascending signal strength."""
    _quick_sort(networks, 0, len(networks) - 1)


@dataclass
class _Link:
    wifi: Wifi
    next: Optional["_Link"] = None


class WifiList:
    """Singly linked list of networks in insertion order."""

    def __init__(self, networks: Iterable[Wifi] = ()) -> None:
        self._head: Optional[_Link] = None
        self._tail: Optional[_Link] = None
        self._size = 0
        for wifi in networks:
            self.append(wifi)

    def append(self, wifi: Wifi) -> None:
        """Add a copy of ``wifi`` at the end of the list."""
        link = _Link(replace(wifi))
        if self._tail is None:
            self._head = link
        else:
            self._tail.next = link
        self._tail = link
        self._size += 1

    def search_ssid(self, ssid: str) -> Optional[Wifi]:
        """Return the first network named ``ssid``, or None."""
        return next((wifi for wifi in self if wifi.ssid == ssid), None)

    def __iter__(self) -> Iterator[Wifi]:
        link = self._head
        while link is not None:
            yield link.wifi
            link = link.next

    def __len__(self) -> int:
        return self._size


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load scan files, show them, optionally search an SSID, then show them sorted."""
    parser = argparse.ArgumentParser(prog="wifi-scan", description=main.__doc__)
    parser.add_argument("files", nargs="*", default=["data.txt"])
    parser.add_argument("--search", metavar="SSID")
    args = parser.parse_args(argv)

    networks: list[Wifi] = []
    for path in args.files:
        try:
            networks.extend(read_wifi_file(path))
        except OSError:
            print("Cannot open the file")
            return 1
        print(format_wifi_table(networks), end="")

    if args.search is not None:
        found = WifiList(networks).search_ssid(args.search)
        if found is None:
            print("No match found. ")
        else:
            print(f"{found.ssid} is found")

    sort_by_strength(networks)
    print(format_wifi_table(networks), end="")
    return 0