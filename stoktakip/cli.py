"""Command line for keeping a project's stock records."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import Sequence

from .entries import EntryLog
from .handover import Handover, load_issued_items
from .issues import IssueLog
from .project import ProjectError, ValidationError, create_project, load_project, save_project
from .stock import STOCK_HEADER, clear_stock, filter_rows, refresh_stock, render_html


def _new(args: argparse.Namespace) -> str:
    project = create_project(args.path)
    return f"Proje başarıyla oluşturuldu: {project.directory}"


def _save(args: argparse.Namespace) -> str:
    target = save_project(load_project(args.project), args.target)
    return f"Proje başarıyla kaydedildi: {target}"


def _entry(args: argparse.Namespace) -> str:
    EntryLog(load_project(args.project)).record(
        args.name, args.quantity, args.unit, args.date
    )
    return "Veriler başarıyla kaydedildi!"


def _issue(args: argparse.Namespace) -> str:
    IssueLog(load_project(args.project)).record(args.name, args.quantity, args.date)
    return "Malzeme çıkışı kaydedildi."


def _stock(args: argparse.Namespace) -> str:
    rows = refresh_stock(load_project(args.project))
    if not rows:
        return "Stok bilgisi bulunamadı. Lütfen giriş ve çıkış dosyalarını kontrol edin."
    if args.filter:
        rows = filter_rows(rows, args.filter)
    if args.html:
        return render_html(rows)
    return "\n".join([STOCK_HEADER, *(",".join(row.cells()) for row in rows)])


def _clear(args: argparse.Namespace) -> str:
    clear_stock(load_project(args.project))
    return "Stok bilgileri temizlendi."


def _handover(args: argparse.Namespace) -> str:
    project = load_project(args.project)
    items = load_issued_items(project)
    chosen = set(range(1, len(items) + 1)) if args.all else set(args.item)
    for number in chosen:
        if not 1 <= number <= len(items):
            raise ValidationError(f"Geçersiz malzeme numarası: {number}")
    items = [
        replace(item, selected=True) if number in chosen else item
        for number, item in enumerate(items, start=1)
    ]
    handover = Handover(args.recipient, args.date, items)
    path = handover.save(project)
    message = f"Tutanak başarıyla kaydedildi:\n{path}"
    if args.show:
        message = handover.render() + message
    return message


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stoktakip", description="Malzeme stok takibi")
    commands = parser.add_subparsers(dest="command", required=True)

    new = commands.add_parser("yeni", help="yeni proje oluştur")
    new.add_argument("path")
    new.set_defaults(handler=_new)

    save = commands.add_parser("kaydet", help="projeyi kaydet")
    save.add_argument("project")
    save.add_argument("target")
    save.set_defaults(handler=_save)

    entry = commands.add_parser("giris", help="malzeme girişi")
    entry.add_argument("project")
    entry.add_argument("name")
    entry.add_argument("quantity")
    entry.add_argument("unit")
    entry.add_argument("date")
    entry.set_defaults(handler=_entry)

    issue = commands.add_parser("cikis", help="malzeme çıkışı")
    issue.add_argument("project")
    issue.add_argument("name")
    issue.add_argument("quantity")
    issue.add_argument("date")
    issue.set_defaults(handler=_issue)

    stock = commands.add_parser("stok", help="stok durumu")
    stock.add_argument("project")
    stock.add_argument("--filter", default="")
    stock.add_argument("--html", action="store_true")
    stock.set_defaults(handler=_stock)

    clear = commands.add_parser("temizle", help="stok dosyasını temizle")
    clear.add_argument("project")
    clear.set_defaults(handler=_clear)

    handover = commands.add_parser("tutanak", help="teslim tutanağı oluştur")
    handover.add_argument("project")
    handover.add_argument("recipient")
    handover.add_argument("date")
    handover.add_argument("--item", type=int, action="append", default=[])
    handover.add_argument("--all", action="store_true")
    handover.add_argument("--show", action="store_true")
    handover.set_defaults(handler=_handover)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command; return 0 on success and 1 when it fails."""
    args = _build_parser().parse_args(argv)
    try:
        message = args.handler(args)
    except ProjectError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())