"""The log of materials issued out of stock."""

from __future__ import annotations

from pathlib import Path

from .project import Project, ProjectError, ValidationError
from .stock import ISSUE_SUFFIX, MISSING_PROJECT, STOCK_SUFFIX, to_int

DEFAULT_UNIT = "adet"


class IssueLog:
    """Records issued materials against the project's stock file."""

    def __init__(self, project: Project | None) -> None:
        if project is None:
            raise ProjectError(MISSING_PROJECT)
        self.project = project
        self.stock: dict[str, int] = {}
        try:
            self.load_stock()
        except ProjectError:
            # The log can be opened before any stock has been computed.
            pass

    @property
    def issue_path(self) -> Path:
        """Path of the issue file."""
        return self.project.file_path(ISSUE_SUFFIX)

    @property
    def stock_path(self) -> Path:
        """Path of the stock file."""
        return self.project.file_path(STOCK_SUFFIX)

    def load_stock(self) -> dict[str, int]:
        """Read current stock amounts from the stock file, skipping its header."""
        self.stock = {}
        try:
            with open(self.stock_path, encoding="utf-8") as handle:
                lines = handle.read().splitlines()
        except OSError as exc:
            raise ProjectError(
                f"Stok dosyası bulunamadı: {self.stock_path}\n{exc}"
            ) from exc
        loaded: dict[str, int] = {}
        for line in lines[1:]:
            parts = line.strip().split(",")
            if len(parts) >= 4:
                loaded[parts[0].strip()] = to_int(parts[3])
        self.stock = dict(sorted(loaded.items()))
        return dict(self.stock)

    def product_names(self) -> list[str]:
        """Names of the products in stock, sorted."""
        return list(self.stock)

    def suggest(self, text: str) -> list[str]:
        """Products in stock whose name contains ``text``, ignoring case."""
        if not text:
            return []
        needle = text.casefold()
        return [name for name in self.stock if needle in name.casefold()]

    def record(self, name: str, quantity: object, date: str) -> tuple[str, int, str]:
        """Issue ``quantity`` of a product and return the stored fields."""
        self.load_stock()
        product = str(name).strip()
        amount = to_int(quantity)
        day = str(date).strip()
        if not product or amount <= 0 or not day:
            raise ValidationError("Lütfen tüm alanları doldurun.")
        if product not in self.stock:
            raise ValidationError("Stokta böyle bir ürün yok.")
        if self.stock[product] < amount:
            raise ValidationError("Yeterli stok yok.")

        self.stock[product] -= amount
        try:
            with open(self.issue_path, "a", encoding="utf-8", newline="\n") as handle:
                handle.write(f"{product},{amount},{day}\n")
            with open(self.stock_path, "w", encoding="utf-8", newline="\n") as handle:
                handle.writelines(
                    f"{item},{left}\n" for item, left in self.stock.items()
                )
        except OSError as exc:
            raise ProjectError(f"Dosya açılamadı: {exc}") from exc
        return product, amount, day