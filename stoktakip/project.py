"""Project files and the paths of the data files that belong to a project."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

PROJECT_SUFFIX = ".proje"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class ProjectError(Exception):
    """A project file or one of its data files could not be read or written."""


class ValidationError(ProjectError):
    """Input given by the user is missing or not acceptable."""


@dataclass(frozen=True)
class Project:
    """A project: the directory its files live in and its name."""

    directory: Path
    name: str

    def __post_init__(self) -> None:
        if not str(self.directory):
            raise ValidationError("Proje yolu boş olamaz!")
        if not self.name:
            raise ValidationError("Proje adı boş olamaz!")
        object.__setattr__(
            self, "directory", Path(os.path.normpath(str(self.directory)))
        )

    def file_path(self, suffix: str) -> Path:
        """Return the path of the project's data file ending in ``suffix``."""
        return self.directory / f"{self.name}{suffix}"


def _base_name(file_path: str | os.PathLike[str]) -> str:
    """File name without directory, cut at the first dot."""
    return Path(file_path).name.split(".", 1)[0]


def _project_for(file_path: str | os.PathLike[str]) -> Project:
    absolute = Path(os.path.abspath(os.fspath(file_path)))
    return Project(absolute.parent, _base_name(absolute))


def _with_suffix(file_path: str | os.PathLike[str]) -> str:
    text = os.fspath(file_path)
    return text if text.endswith(PROJECT_SUFFIX) else text + PROJECT_SUFFIX


def create_project(
    file_path: str | os.PathLike[str], now: datetime | None = None
) -> Project:
    """Create a new project file and return the project it describes."""
    if not os.fspath(file_path):
        raise ValidationError("Bir proje adı girilmedi!")
    target = _with_suffix(file_path)
    project = _project_for(target)
    stamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    try:
        with open(target, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(f"Proje Adı: {project.name}\n")
            handle.write(f"Oluşturma Tarihi: {stamp}\n")
            handle.write(f"Proje Yolu: {project.directory}\n")
    except OSError as exc:
        raise ProjectError(f"Proje dosyası oluşturulamadı: {exc}") from exc
    return project


def load_project(file_path: str | os.PathLike[str]) -> Project:
    """Return the project that a chosen project file belongs to."""
    if not os.fspath(file_path):
        raise ValidationError("Bir proje seçilmedi!")
    return _project_for(file_path)


def save_project(
    project: Project | None, file_path: str | os.PathLike[str]
) -> Path:
    """Write the project's directory to a project file and return its path."""
    if project is None:
        raise ValidationError(
            "Kayıt için bir proje yüklenmedi veya oluşturulmadı!"
        )
    if not os.fspath(file_path):
        raise ValidationError("Bir dosya adı girilmedi!")
    target = Path(_with_suffix(file_path))
    try:
        with open(target, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(f"Proje Yolu: {project.directory}\n")
    except OSError as exc:
        raise ProjectError(f"Dosya açılamadı: {exc}") from exc
    return target