"""Stock totals computed from the entry and issue files of a project."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .entries import ENTRY_SUFFIX
from .project import Project, ProjectError

ISSUE_SUFFIX = "_cikis.txt"
STOCK_SUFFIX = "_stok.txt"
STOCK_HEADER = "Ürün Adı,Toplam Giriş,Toplam Çıkış,Stok"
MISSING_PROJECT = (
    "Proje adı veya yolu ayarlanmamış! Lütfen proje bilgilerini kontrol edin."
)

_INT_PATTERN = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class StockRow:
    """One product's received and issued totals and what is left."""

    name: str
    total_in: int
    total_out: int
    stock: int

    def cells(self) -> tuple[str, str, str, str]:
        """The row as the texts shown in a table."""
        return (self.name, str(self.total_in), str(self.total_out), str(self.stock))


def to_int(text: object) -> int:
    """Parse a decimal 32-bit integer; anything unparsable counts as 0."""
    value = str(text).strip()
    if not _INT_PATTERN.fullmatch(value):
        return 0
    number = int(value)
    return number if _INT_MIN <= number <= _INT_MAX else 0


def _require(project: Project | None) -> Project:
    if project is None:
        raise ProjectError(MISSING_PROJECT)
    return project


def read_totals(path: str | Path) -> dict[str, int]:
    """Sum the quantity column per product name, sorted by name.

    A missing or unreadable file gives no totals.
    """
    totals: dict[str, int] = {}
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError:
        return totals
    for line in lines:
        parts = line.split(",")
        if len(parts) >= 2:
            name = parts[0].strip()
            totals[name] = totals.get(name, 0) + to_int(parts[1])
    return dict(sorted(totals.items()))


def compute_stock(project: Project | None) -> list[StockRow]:
    """Work out the stock of every product seen in the entry or issue file."""
    project = _require(project)
    received = read_totals(project.file_path(ENTRY_SUFFIX))
    issued = read_totals(project.file_path(ISSUE_SUFFIX))
    names = list(received) + [name for name in issued if name not in received]
    rows = []
    for name in names:
        total_in = received.get(name, 0)
        total_out = issued.get(name, 0)
        rows.append(StockRow(name, total_in, total_out, max(0, total_in - total_out)))
    return rows


def write_stock(project: Project | None, rows: Iterable[StockRow]) -> Path:
    """Write the stock file with its header line and return its path."""
    project = _require(project)
    path = project.file_path(STOCK_SUFFIX)
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(STOCK_HEADER + "\n")
            for row in rows:
                handle.write(",".join(row.cells()) + "\n")
    except OSError as exc:
        raise ProjectError(f"Stok dosyası açılamadı: {exc}") from exc
    return path


def refresh_stock(project: Project | None) -> list[StockRow]:
    """Recompute the stock and store it; nothing is written when it is empty."""
    rows = compute_stock(project)
    if rows:
        write_stock(project, rows)
    return rows


def clear_stock(project: Project | None) -> Path:
    """Empty the stock file and return its path."""
    project = _require(project)
    path = project.file_path(STOCK_SUFFIX)
    try:
        path.write_bytes(b"")
    except OSError:
        pass
    return path


def filter_rows(rows: Iterable[StockRow], text: str) -> list[StockRow]:
    """Rows whose product name contains ``text``, ignoring case."""
    needle = text.casefold()
    return [row for row in rows if needle in row.name.casefold()]


def render_html(rows: Iterable[StockRow]) -> str:
    """The stock report as an HTML table."""
    parts = [
        "<h2>Stok Durumu Raporu</h2>",
        "<table border='1' cellspacing='0' cellpadding='4'>",
        "<tr><th>Ürün Adı</th><th>Toplam Giriş</th>"
        "<th>Toplam Çıkış</th><th>Stok</th></tr>",
    ]
    for row in rows:
        cells = "".join(f"<td>{cell}</td>" for cell in row.cells())
        parts.append(f"<tr>{cells}</tr>")
    parts.append("</table>")
    return "".join(parts)