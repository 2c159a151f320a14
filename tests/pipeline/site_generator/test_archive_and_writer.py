"""Tests for ZIP packaging and writing exported files to disk."""

import io
import zipfile

import pytest

from src.exceptions import DataValidationError, ExportError
from src.pipeline.site_generator.archive import archive_filename, to_archive, validate_relative_path
from src.pipeline.site_generator.exporter import ExportedFile, export_website
from src.pipeline.site_generator.file_writer import write_files
from src.pipeline.site_generator.models import Website


def test_archive_contains_exactly_the_exported_paths(website, build_date):
    files = export_website(website, build_date=build_date)
    data = to_archive(files)
    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        assert archive.namelist() == [f.path for f in files]
        assert archive.read("robots.txt").decode("utf-8") == files[-2].content
        assert all(info.compress_type == zipfile.ZIP_DEFLATED for info in archive.infolist())


def test_archive_keeps_utf8_content():
    data = to_archive([ExportedFile("a/b.html", "<p>Café ✓</p>")])
    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        assert archive.read("a/b.html").decode("utf-8") == "<p>Café ✓</p>"


@pytest.mark.parametrize("path", ["", "/etc/passwd", "../up.html", "a/../../b", "a\\b.html", "C:/x.html"])
def test_unsafe_paths_are_rejected(path):
    with pytest.raises(DataValidationError):
        validate_relative_path(path)
    with pytest.raises(DataValidationError):
        to_archive([ExportedFile(path, "x")])


def test_archive_filename_is_url_safe():
    assert archive_filename(Website(id="w", name="Dry Fast Restoration")) == "dry-fast-restoration-website.zip"
    assert archive_filename(Website(id="w", name="!!!")) == "site-website.zip"


def test_write_files_keeps_relative_layout(tmp_path, website, build_date):
    files = export_website(website, build_date=build_date)
    written = write_files(files, tmp_path / "site")
    assert written[0] == tmp_path / "site" / "index.html"
    assert (tmp_path / "site" / "services" / "water-extraction.html").is_file()
    assert (tmp_path / "site" / "blog" / "leak-signs.html").read_text(encoding="utf-8") == files[7].content
    assert len(written) == len(files)


def test_write_files_wraps_os_errors(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(ExportError) as exc:
        write_files([ExportedFile("nested/page.html", "x")], blocker)
    assert exc.value.context["path"].endswith("page.html")
    assert isinstance(exc.value.__cause__, OSError)


def test_write_files_rejects_escaping_paths(tmp_path):
    with pytest.raises(DataValidationError):
        write_files([ExportedFile("../outside.html", "x")], tmp_path)
    assert not (tmp_path.parent / "outside.html").exists()
