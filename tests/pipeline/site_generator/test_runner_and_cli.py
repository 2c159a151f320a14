"""Tests for the headless runner and the command-line entry point."""

import datetime as dt
import io
import json
import zipfile

import pytest
from rich.console import Console

from src.exceptions import ConfigurationError, DataValidationError
from src.pipeline.content_writer import ContentWriterConfig
from src.pipeline.site_generator import cli, runner


@pytest.fixture
def website_json(tmp_path, website_data):
    path = tmp_path / "website.json"
    path.write_text(json.dumps(website_data), encoding="utf-8")
    return path


@pytest.fixture
def no_ai_config(monkeypatch):
    def _missing(cls):
        raise ConfigurationError("No API key configured")

    monkeypatch.setattr(ContentWriterConfig, "from_env", classmethod(_missing))


def test_load_website_reports_invalid_json(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(DataValidationError) as exc:
        runner.load_website(bad)
    assert exc.value.context["path"] == str(bad)


def test_build_site_writes_directory_and_archive(tmp_path, website_json):
    result = runner.build_site(
        website_json,
        output_dir=tmp_path / "out",
        zip_path=tmp_path,
        build_date=dt.date(2024, 6, 1),
    )
    assert (tmp_path / "out" / "index.html").is_file()
    assert len(result.written) == len(result.files)
    assert result.archive_path == tmp_path / "dry-fast-restoration-website.zip"
    with zipfile.ZipFile(io.BytesIO(result.archive_path.read_bytes())) as archive:
        assert "sitemap.xml" in archive.namelist()


def test_build_site_zip_only_writes_no_directory(tmp_path, website_json):
    result = runner.build_site(website_json, zip_path=tmp_path / "dist" / "site.zip")
    assert result.written == []
    assert result.archive_path.is_file()
    assert not (tmp_path / "dist" / "index.html").exists()


def test_build_site_overrides_base_url_and_injects_editor(tmp_path, website_json):
    result = runner.build_site(
        website_json,
        output_dir=tmp_path / "out",
        base_url="https://preview.test/",
        editable_preview=True,
    )
    index = (tmp_path / "out" / "index.html").read_text(encoding="utf-8")
    assert '<link rel="canonical" href="https://preview.test">' in index
    assert "element-selected" in index
    assert result.website.base_url == "https://preview.test"


def test_build_site_with_ai_falls_back_to_template_copy(tmp_path, website_json, no_ai_config):
    runner.build_site(website_json, output_dir=tmp_path / "out", with_ai=True)
    service = (tmp_path / "out" / "services" / "water-extraction.html").read_text(encoding="utf-8")
    location = (tmp_path / "out" / "locations" / "reno.html").read_text(encoding="utf-8")
    assert "<h2>Professional Water Extraction Services</h2>" in service
    assert 'class="custom-content"' in location


def test_run_from_config_reports_failures(tmp_path, website_json):
    assert runner.run_from_config(website_json, output_dir=tmp_path / "ok") is True
    assert runner.run_from_config(tmp_path / "missing.json", output_dir=tmp_path / "no") is False
    bad = tmp_path / "bad.json"
    bad.write_text("[]", encoding="utf-8")
    assert runner.run_from_config(bad, output_dir=tmp_path / "bad") is False


def test_parse_arguments_defaults_and_flags():
    args = cli.parse_arguments(["site.json", "--build-date", "2024-06-01", "--editable-preview"])
    assert args.website_json.name == "site.json"
    assert args.build_date == dt.date(2024, 6, 1)
    assert args.editable_preview is True
    assert args.with_ai is False
    assert args.output is None and args.zip is None


def test_parse_arguments_rejects_bad_dates():
    with pytest.raises(SystemExit):
        cli.parse_arguments(["site.json", "--build-date", "June"])


def test_main_prints_summary_and_returns_zero(tmp_path, website_json, monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda *a, **k: None)
    console = Console(file=io.StringIO(), width=200)
    code = cli.main([str(website_json), "--output", str(tmp_path / "out"), "--zip", str(tmp_path)], console=console)
    output = console.file.getvalue()
    assert code == 0
    assert "services/water-extraction.html" in output
    assert "Wrote 14 files to" in output
    assert "Archive:" in output


def test_main_returns_one_on_failure(tmp_path, monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda *a, **k: None)
    bad = tmp_path / "bad.json"
    bad.write_text("{", encoding="utf-8")
    console = Console(file=io.StringIO())
    assert cli.main([str(bad), "--output", str(tmp_path / "out")], console=console) == 1
    assert not (tmp_path / "out").exists()
