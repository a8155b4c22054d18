"""Handover reports listing the issued materials a recipient has taken."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .project import Project, ProjectError
from .stock import ISSUE_SUFFIX

HANDOVER_SUFFIX = "_tutanak.txt"


@dataclass(frozen=True)
class IssuedItem:
    """One line of the issue file, optionally picked for a handover."""

    name: str
    quantity: str
    selected: bool = False


def load_issued_items(project: Project | None) -> list[IssuedItem]:
    """Read the project's issue file as unselected items, in file order."""
    if project is None:
        raise ProjectError("Proje bilgileri eksik!")
    path = project.file_path(ISSUE_SUFFIX)
    if not path.exists():
        raise ProjectError(f"Çıkış dosyası bulunamadı: {path}")
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        raise ProjectError(f"Çıkış dosyası açılamadı:\n{path}\n{exc}") from exc
    items = []
    for line in lines:
        fields = line.split(",")
        if len(fields) >= 2:
            items.append(IssuedItem(fields[0].strip(), fields[1].strip()))
    return items


@dataclass
class Handover:
    """A handover report: who received the materials, when, and which ones."""

    recipient: str
    date: str
    items: list[IssuedItem] = field(default_factory=list)

    def selected_items(self) -> list[IssuedItem]:
        """The items picked for this handover."""
        return [item for item in self.items if item.selected]

    def lines(self) -> list[str]:
        """The report as lines of text."""
        return [
            f"Teslim Alan: {self.recipient}",
            f"Tarih: {self.date}",
            "Teslim Edilen Malzemeler:",
            *(f"- {item.name} ({item.quantity})" for item in self.selected_items()),
        ]

    def render(self) -> str:
        """The report as one text, each line ending in a newline."""
        return "".join(line + "\n" for line in self.lines())

    def save(self, project: Project | None) -> Path:
        """Write the report next to the project's files and return its path."""
        if project is None:
            raise ProjectError("Proje yolu veya adı eksik!")
        path = project.directory / f"{self.recipient.strip()}{HANDOVER_SUFFIX}"
        try:
            with open(path, "w", encoding="utf-8", newline="\n") as handle:
                handle.write(self.render())
        except OSError as exc:
            raise ProjectError("Tutanak dosyası oluşturulamadı!") from exc
        return path