# stoktakip

Keeps the material records of a project in plain text files that live in the
same directory as the project's `.proje` file. A project is named by the base
name of that file (cut at the first dot), and its data files are:

- `<name>_giris.txt`: material entries, one `name,quantity,unit,date` per line
- `<name>_cikis.txt`: material issues, one `name,quantity,date` per line
- `<name>_stok.txt`: stock table computed from entries and issues, with the
  header `Ürün Adı,Toplam Giriş,Toplam Çıkış,Stok`
- `<recipient>_tutanak.txt`: handover reports listing issued materials

Messages and file contents are in Turkish.

## Installation

```
pip install .
```

## Command line

```
stoktakip --help
```

Every command except `yeni` takes the path of a `.proje` file as its first
argument; the file itself does not have to exist, only its directory and name
are used. On success the command prints a message and exits with 0; when it
fails it prints the error to standard error and exits with 1.

| Command | What it does |
| --- | --- |
| `stoktakip yeni PATH` | Creates a project file (`.proje` is appended if missing) holding the project's name, creation time and directory. |
| `stoktakip kaydet PROJECT TARGET` | Writes the project's directory to another `.proje` file. |
| `stoktakip giris PROJECT NAME QUANTITY UNIT DATE` | Appends an entry; all four fields must be non-empty. |
| `stoktakip cikis PROJECT NAME QUANTITY DATE` | Issues a positive quantity of a product present in the stock file, if enough is left. |
| `stoktakip stok PROJECT [--filter TEXT] [--html]` | Recomputes the stock, writes the stock file and prints the table as CSV or, with `--html`, as an HTML report. `--filter` keeps products whose name contains the text, ignoring case. |
| `stoktakip temizle PROJECT` | Empties the stock file. |
| `stoktakip tutanak PROJECT RECIPIENT DATE [--item N]... [--all] [--show]` | Writes a handover report for the issued items chosen by their 1-based position in the issue file (`--item`, repeatable) or all of them (`--all`); `--show` also prints the report. |

Example:

```
stoktakip yeni depo/santiye
stoktakip giris depo/santiye.proje Cement 10 bag 2024-05-01
stoktakip stok depo/santiye.proje
stoktakip cikis depo/santiye.proje Cement 4 2024-05-02
stoktakip stok depo/santiye.proje --filter cem
stoktakip tutanak depo/santiye.proje Ahmet 2024-05-02 --all --show
```

An issue reads the stock file as written by `stok`, and afterwards rewrites it
as plain `name,remaining` lines. Run `stok` again before the next issue, or the
product will not be found in stock.

Stock is never negative: a product whose issues exceed its entries shows 0.
Quantities that are not whole numbers within the 32-bit range count as 0.

## Library use

```python
from datetime import datetime
from stoktakip.project import create_project
from stoktakip.entries import EntryLog
from stoktakip.issues import IssueLog
from stoktakip.stock import refresh_stock, filter_rows, render_html
from stoktakip.handover import Handover, load_issued_items

project = create_project("depo/santiye.proje", datetime.now())

EntryLog(project).record("Cement", "10", "bag", "2024-05-01")
refresh_stock(project)

IssueLog(project).record("Cement", 4, "2024-05-02")
rows = refresh_stock(project)
for row in filter_rows(rows, "cem"):
    print(row.name, row.total_in, row.total_out, row.stock)
html = render_html(rows)

items = [item for item in load_issued_items(project)]
handover = Handover("Ahmet", "2024-05-02", items)
print(handover.render())
handover.save(project)
```

- `stoktakip.project`: `Project` (directory and name, with `file_path(suffix)`),
  `create_project`, `load_project`, `save_project`.
- `stoktakip.entries.EntryLog`: `record`, `product_names` (distinct names in
  the entry file, first seen first) and `suggest` (names starting with a text,
  ignoring case).
- `stoktakip.issues.IssueLog`: `load_stock`, `record`, `product_names` and
  `suggest` (names containing a text, ignoring case).
- `stoktakip.stock`: `StockRow`, `to_int`, `read_totals`, `compute_stock`,
  `write_stock`, `refresh_stock`, `clear_stock`, `filter_rows`, `render_html`.
- `stoktakip.handover`: `IssuedItem` (with a `selected` flag), `Handover`
  (`lines`, `render`, `save`) and `load_issued_items`.

Invalid input raises `stoktakip.project.ValidationError`; missing or unreadable
project files raise `stoktakip.project.ProjectError`, of which
`ValidationError` is a kind.

## What it does not do

There is no graphical interface and no printing: the stock report is produced
as HTML text and the handover report as plain text, and sending either to a
printer is left to the user.

## Tests

```
pip install .[test]
pytest
```