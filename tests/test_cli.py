# File: tests/test_cli.py
"""CLI tests (`site_checker/cli.py`) using click.testing.CliRunner.
Cover the `check`, `generate` and `config` commands, `--version` and error handling.
"""
import json
import types
import logging

import pytest
import site_checker.cli as cli_module
from click.testing import CliRunner
from site_checker import __version__
from site_checker.aggregator import aggregate_results
from site_checker.cli import cli
from site_checker.crawler.models import PageRecord
from site_checker.engine import SiteUnreachableError


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logging.getLogger("SiteChecker").handlers.clear()


@pytest.fixture()
def captured():
    return {}


@pytest.fixture(autouse=True)
def patch_start_check(monkeypatch, captured):
    """Replace start_check with a canned report; remember the config it got."""
    report = aggregate_results(
        {
            "/": PageRecord(
                path="https://example.com/",
                title="Home",
                errors=["SEO: Missing meta description tag"],
                warnings=["Performance: Page load time could be improved (3000ms)"],
                loading_time=3000.0,
            )
        },
        robots_txt_found=False,
    )

    async def fake_check(cfg, observer=None):
        captured["config"] = cfg
        return report

    monkeypatch.setattr(cli_module, "start_check", fake_check)
    return report


@pytest.fixture(autouse=True)
def patch_start_generate(monkeypatch, captured):
    async def fake_generate(cfg, observer=None):
        captured["config"] = cfg
        return "<urlset/>"

    monkeypatch.setattr(cli_module, "start_generate", fake_generate)


def test_version_option():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert f"SiteChecker, version {__version__}" in result.output


def test_check_writes_json_report(tmp_path, captured):
    out = tmp_path / "reports" / "pages.json"
    result = CliRunner().invoke(cli, ["check", "example.com", "--output", str(out)])

    assert result.exit_code == 0, result.output
    assert f"JSON report: {out}" in result.output
    assert "robots.txt not found" in result.output
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["global"]["errors"] == ["SEO: Missing meta description tag"]
    assert data["/"]["title"] == "Home"
    assert captured["config"].base_url == "https://example.com"


def test_check_flags_flow_into_options(tmp_path, captured):
    out = tmp_path / "pages.json"
    result = CliRunner().invoke(
        cli,
        ["check", "https://example.com/", "-m", "3", "--no-accessibility", "--social-media",
         "--max-depth", "2", "--output", str(out)],
    )

    assert result.exit_code == 0, result.output
    cfg = captured["config"]
    assert cfg.max_concurrency == 3
    assert cfg.max_depth == 2
    assert cfg.options.seo is True
    assert cfg.options.accessibility is False
    assert cfg.options.social_media is True


def test_config_file_options_apply_when_flags_are_omitted(tmp_path, captured):
    cfg_file = tmp_path / "site.yaml"
    cfg_file.write_text("max_concurrency: 4\noptions:\n  accessibility: false\n", encoding="utf-8")
    out = tmp_path / "pages.json"

    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "check", "example.com", "--output", str(out)])

    assert result.exit_code == 0, result.output
    assert captured["config"].max_concurrency == 4
    assert captured["config"].options.accessibility is False


def test_verbose_lists_page_findings(tmp_path):
    result = CliRunner().invoke(cli, ["check", "example.com", "-v", "--output", str(tmp_path / "p.json")])
    assert result.exit_code == 0, result.output
    assert "https://example.com/" in result.output
    assert "  - Performance: Page load time could be improved (3000ms)" in result.output


def test_check_unreachable_site(monkeypatch, tmp_path):
    async def unreachable(cfg, observer=None):
        raise SiteUnreachableError("URL not reachable: https://nowhere.invalid")

    monkeypatch.setattr(cli_module, "start_check", unreachable)
    out = tmp_path / "pages.json"
    result = CliRunner().invoke(cli, ["check", "nowhere.invalid", "--output", str(out)])

    assert result.exit_code == 1
    assert "URL not reachable" in result.output
    assert not out.exists()


def test_generate_writes_sitemap(tmp_path, captured):
    out = tmp_path / "public" / "sitemap.xml"
    result = CliRunner().invoke(cli, ["generate", "example.com", "-o", str(out), "-m", "5"])

    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8") == "<urlset/>"
    assert f"Sitemap: {out}" in result.output
    assert captured["config"].max_concurrency == 5


def test_show_config(tmp_path):
    cfg_file = tmp_path / "site.json"
    cfg_file.write_text(json.dumps({"base_url": "https://example.com/", "max_pages": 50}), encoding="utf-8")

    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "config"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["base_url"] == "https://example.com"
    assert data["max_pages"] == 50
    assert data["options"]["social_media"] is False


def test_invalid_config_file(tmp_path):
    cfg_file = tmp_path / "broken.yaml"
    cfg_file.write_text("- not\n- a mapping\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "config", "example.com"])

    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_invalid_url(tmp_path):
    result = CliRunner().invoke(cli, ["check", "http://", "--output", str(tmp_path / "p.json")])
    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_cli_submodule_is_importable_as_module():
    assert isinstance(cli_module, types.ModuleType)
    assert cli_module.cli is cli
    assert not hasattr(cli, "start_check")


def test_check_runs_patched_crawl(tmp_path, captured):
    result = CliRunner().invoke(cli, ["check", "example.com", "--output", str(tmp_path / "p.json")])
    assert result.exit_code == 0, result.output
    assert "URL not reachable" not in result.output
    assert captured["config"].base_url == "https://example.com"


def test_show_config_without_url(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(cli, ["config"])
    assert result.exit_code == 1
    assert "no URL given; pass URL or set base_url in the config file" in result.output


def test_show_config_url_from_file(tmp_path):
    cfg_file = tmp_path / "site.yaml"
    cfg_file.write_text("base_url: example.org\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["base_url"] == "https://example.org"
