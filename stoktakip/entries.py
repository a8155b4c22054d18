"""The log of materials received into stock."""

from __future__ import annotations

from pathlib import Path

from .project import Project, ProjectError, ValidationError

ENTRY_SUFFIX = "_giris.txt"


class EntryLog:
    """Records received materials in the project's entry file."""

    def __init__(self, project: Project | None) -> None:
        if project is None:
            raise ProjectError("Proje bilgileri ayarlanmamış!")
        self.project = project

    @property
    def path(self) -> Path:
        """Path of the entry file."""
        return self.project.file_path(ENTRY_SUFFIX)

    def product_names(self) -> list[str]:
        """Distinct product names from the entry file, in first-seen order."""
        try:
            with open(self.path, encoding="utf-8") as handle:
                lines = handle.read().splitlines()
        except OSError:
            return []
        names = (line.split(",", 1)[0].strip() for line in lines)
        return list(dict.fromkeys(name for name in names if name))

    def suggest(self, text: str) -> list[str]:
        """Known product names starting with ``text``, ignoring case."""
        if not text:
            return []
        prefix = text.casefold()
        return [
            name for name in self.product_names()
            if name.casefold().startswith(prefix)
        ]

    def record(
        self, name: str, quantity: str, unit: str, date: str
    ) -> tuple[str, str, str, str]:
        """Append one received material and return the stored fields."""
        fields = tuple(str(value).strip() for value in (name, quantity, unit, date))
        if not all(fields):
            raise ValidationError("Lütfen tüm alanları doldurun!")
        try:
            with open(self.path, "a", encoding="utf-8", newline="\n") as handle:
                handle.write(",".join(fields) + "\n")
        except OSError as exc:
            raise ProjectError(f"Dosya açılamadı: {exc}") from exc
        return fields  # type: ignore[return-value]