from datetime import datetime
from pathlib import Path

import pytest

from stoktakip.project import (
    Project,
    ProjectError,
    ValidationError,
    create_project,
    load_project,
    save_project,
)


def test_file_path_joins_name_and_suffix(tmp_path):
    project = Project(tmp_path, "depo")
    assert project.file_path("_giris.txt") == tmp_path / "depo_giris.txt"


def test_project_rejects_empty_name(tmp_path):
    with pytest.raises(ValidationError):
        Project(tmp_path, "")


def test_create_project_appends_suffix_and_writes_header(tmp_path):
    when = datetime(2024, 1, 2, 3, 4, 5)
    project = create_project(tmp_path / "depo", when)
    assert project.name == "depo"
    assert project.directory == tmp_path
    lines = (tmp_path / "depo.proje").read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Proje Adı: depo"
    assert lines[1] == "Oluşturma Tarihi: 2024-01-02 03:04:05"
    assert lines[2] == f"Proje Yolu: {tmp_path}"


def test_create_project_keeps_existing_suffix(tmp_path):
    create_project(tmp_path / "depo.proje", datetime(2024, 1, 1))
    assert sorted(p.name for p in tmp_path.iterdir()) == ["depo.proje"]


def test_create_project_empty_path_is_rejected():
    with pytest.raises(ValidationError):
        create_project("")


def test_create_project_unwritable_directory(tmp_path):
    with pytest.raises(ProjectError):
        create_project(tmp_path / "missing" / "depo", datetime(2024, 1, 1))


def test_load_project_uses_base_name_before_first_dot(tmp_path):
    project = load_project(tmp_path / "ana.depo.proje")
    assert project.name == "ana"
    assert project.directory == tmp_path


def test_load_project_round_trips_created_project(tmp_path):
    created = create_project(tmp_path / "depo", datetime(2024, 1, 1))
    assert load_project(tmp_path / "depo.proje") == created


def test_load_project_empty_path_is_rejected():
    with pytest.raises(ValidationError):
        load_project("")


def test_save_project_writes_directory(tmp_path):
    project = Project(tmp_path, "depo")
    target = save_project(project, tmp_path / "kopya")
    assert target == tmp_path / "kopya.proje"
    assert target.read_text(encoding="utf-8") == f"Proje Yolu: {tmp_path}\n"


def test_save_project_without_project_is_rejected(tmp_path):
    with pytest.raises(ValidationError):
        save_project(None, tmp_path / "kopya")


def test_save_project_empty_path_is_rejected(tmp_path):
    with pytest.raises(ValidationError):
        save_project(Project(tmp_path, "depo"), "")


def test_directory_is_normalised(tmp_path):
    project = Project(Path(str(tmp_path) + "/sub/.."), "depo")
    assert project.directory == tmp_path