import pytest

from stoktakip.cli import main


@pytest.fixture
def project_file(tmp_path):
    assert main(["yeni", str(tmp_path / "depo")]) == 0
    return str(tmp_path / "depo.proje")


def test_new_creates_project_file(tmp_path, capsys):
    assert main(["yeni", str(tmp_path / "depo")]) == 0
    text = (tmp_path / "depo.proje").read_text(encoding="utf-8")
    assert text.startswith("Proje Adı: depo\n")
    assert "Proje başarıyla oluşturuldu" in capsys.readouterr().out


def test_save_writes_project_path(project_file, tmp_path):
    assert main(["kaydet", project_file, str(tmp_path / "yedek")]) == 0
    text = (tmp_path / "yedek.proje").read_text(encoding="utf-8")
    assert text == f"Proje Yolu: {tmp_path}\n"


def test_entry_issue_and_stock_flow(project_file, tmp_path, capsys):
    assert main(["giris", project_file, "vida", "10", "kutu", "2024-01-01"]) == 0
    assert main(["stok", project_file]) == 0
    out = capsys.readouterr().out
    assert "Ürün Adı,Toplam Giriş,Toplam Çıkış,Stok" in out
    assert "vida,10,0,10" in out

    assert main(["cikis", project_file, "vida", "3", "2024-01-02"]) == 0
    assert (tmp_path / "depo_cikis.txt").read_text(encoding="utf-8") == "vida,3,2024-01-02\n"
    assert main(["stok", project_file]) == 0
    assert "vida,10,3,7" in capsys.readouterr().out


def test_issue_more_than_stock_fails(project_file, capsys):
    main(["giris", project_file, "vida", "2", "kutu", "2024-01-01"])
    main(["stok", project_file])
    capsys.readouterr()
    assert main(["cikis", project_file, "vida", "50", "2024-01-02"]) == 1
    assert "Yeterli stok yok." in capsys.readouterr().err


def test_entry_with_blank_field_fails(project_file, capsys):
    assert main(["giris", project_file, "vida", " ", "kutu", "2024-01-01"]) == 1
    assert "Lütfen tüm alanları doldurun!" in capsys.readouterr().err


def test_stock_without_data(project_file, capsys):
    assert main(["stok", project_file]) == 0
    assert "Stok bilgisi bulunamadı" in capsys.readouterr().out


def test_stock_filter_and_html(project_file, capsys):
    main(["giris", project_file, "vida", "4", "kutu", "2024-01-01"])
    main(["giris", project_file, "somun", "6", "kutu", "2024-01-01"])
    capsys.readouterr()
    assert main(["stok", project_file, "--filter", "VID", "--html"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("<h2>Stok Durumu Raporu</h2>")
    assert "<td>vida</td>" in out
    assert "somun" not in out


def test_clear_empties_stock_file(project_file, tmp_path, capsys):
    main(["giris", project_file, "vida", "4", "kutu", "2024-01-01"])
    main(["stok", project_file])
    assert main(["temizle", project_file]) == 0
    assert (tmp_path / "depo_stok.txt").read_bytes() == b""
    assert "Stok bilgileri temizlendi." in capsys.readouterr().out


def test_handover_saves_selected_items(project_file, tmp_path):
    (tmp_path / "depo_cikis.txt").write_text(
        "vida,3,2024-01-02\nsomun,5,2024-01-03\n", encoding="utf-8"
    )
    assert main(["tutanak", project_file, "Ali", "2024-01-05", "--item", "2"]) == 0
    text = (tmp_path / "Ali_tutanak.txt").read_text(encoding="utf-8")
    assert "- somun (5)" in text
    assert "vida" not in text


def test_handover_bad_item_number(project_file, tmp_path, capsys):
    (tmp_path / "depo_cikis.txt").write_text("vida,3,2024-01-02\n", encoding="utf-8")
    assert main(["tutanak", project_file, "Ali", "2024-01-05", "--item", "9"]) == 1
    assert "9" in capsys.readouterr().err
    assert not (tmp_path / "Ali_tutanak.txt").exists()


def test_handover_without_issue_file(project_file, capsys):
    assert main(["tutanak", project_file, "Ali", "2024-01-05", "--all"]) == 1
    assert "Çıkış dosyası bulunamadı" in capsys.readouterr().err