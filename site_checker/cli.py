# === FILE: site_checker/cli.py ===
#!/usr/bin/env python3
"""
Command line entry point for SiteChecker.

Commands:
  check URL      Crawl a site, run the checks and write pages.json
  generate URL   Crawl a site and write sitemap.xml
  config [URL]   Show the effective configuration (URL may come from --config)

Group options:
  --config PATH       YAML/JSON file with defaults (default: configs/default.yaml if present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stdout only when omitted)

Additionally:
  --version           Show the SiteChecker version

Example:
  site-checker check example.com --max 10 --social-media --output reports/pages.json
"""
import sys
import asyncio
from pathlib import Path

import click
from click.core import ParameterSource
from pydantic import ValidationError

from site_checker import __version__
from site_checker.aggregator import CheckReport
from site_checker.config import load_config
from site_checker.crawler.crawler import LoggingObserver
from site_checker.engine import SiteCheckerError, start_check, start_generate
from site_checker.logger import init_logging, set_level
from site_checker.report.json_report import render_json
from site_checker.report.sitemap import write_sitemap

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _missing_base_url(error: ValidationError) -> bool:
    return any(err['loc'] == ('base_url',) and err['type'] == 'missing' for err in error.errors())


def _build_config(ctx, **overrides):
    try:
        return load_config(ctx.obj['config_path'], **overrides)
    except ValidationError as e:
        if _missing_base_url(e):
            print_error('Configuration error: no URL given; pass URL or set base_url in the config file')
        print_error(f'Configuration error: {e}')
    except (FileNotFoundError, ValueError, TypeError) as e:
        print_error(f'Configuration error: {e}')


def _explicit(ctx, **params):
    """Keep only the parameters actually given on the command line."""
    return {
        name: value for name, value in params.items()
        if ctx.get_parameter_source(name) is not ParameterSource.DEFAULT
    }


def _print_options(cfg):
    click.secho('With options', fg='blue', bold=True)
    for key, value in cfg.model_dump(exclude={'base_url'}).items():
        if isinstance(value, dict):
            for sub_key, sub_value in value.items():
                click.echo(f'  - {sub_key}: {sub_value}')
        elif value is not None:
            click.echo(f'  - {key}: {value}')
    click.echo()


def print_summary(report: CheckReport, verbose: bool = False):
    if verbose:
        for page in report.pages.values():
            if not page.errors and not page.warnings:
                continue
            click.secho(page.path, bold=True)
            for issue in page.errors:
                click.secho(f'  - {issue}', fg='red')
            for issue in page.warnings:
                click.secho(f'  - {issue}', fg='yellow')
        click.echo()

    if not report.robots_txt_found:
        click.secho('robots.txt not found', fg='red', bold=True)
        click.echo()
    if not report.sitemap_xml_found:
        click.secho('sitemap.xml not found', fg='red', bold=True)
        click.echo()

    click.secho('Global errors', fg='blue', bold=True)
    for issue in report.errors:
        click.echo(f'  - {issue}')
    click.echo()

    click.echo(
        click.style('Fetched', fg='blue', bold=True)
        + f' {len(report.pages)} pages '
        + click.style('in', fg='blue', bold=True)
        + f' {round(report.elapsed_ms)} ms'
    )
    click.echo()
    click.echo(click.style('Total errors', fg='red', bold=True) + f' {report.total_errors}')
    click.echo(click.style('Total warnings', fg='yellow', bold=True) + f' {report.total_warnings}')


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', message='SiteChecker, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='YAML/JSON file with default settings.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (stdout only when omitted)'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file):
    """SiteChecker: crawl a site for SEO and accessibility issues."""
    init_logging(level=log_level, log_file=str(log_file) if log_file else None)
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


@cli.command('check', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option('--max', '-m', 'max_concurrency', type=int, default=None,
              help='Max concurrent requests  [default: 15]')
@click.option('--seo/--no-seo', 'seo', default=True, show_default=True, help='Check SEO errors')
@click.option('--accessibility/--no-accessibility', 'accessibility', default=True, show_default=True,
              help='Check accessibility errors')
@click.option('--social-media/--no-social-media', 'social_media', default=False, show_default=True,
              help='Check social media tags')
@click.option('--verbose', '-v', 'verbose', is_flag=True, default=False, help='Verbose output')
@click.option('--output', '-o', 'report_path', default=None,
              type=click.Path(writable=True, dir_okay=False, path_type=Path),
              help='Path of the JSON report  [default: pages.json]')
@click.option('--max-depth', 'max_depth', type=int, default=None, help='Stop following links past this depth')
@click.option('--max-pages', 'max_pages', type=int, default=None, help='Stop after this many pages')
@click.pass_context
def check(ctx, url, max_concurrency, seo, accessibility, social_media, verbose, report_path,
          max_depth, max_pages):
    """Check every page of the site at URL."""
    cfg = _build_config(
        ctx,
        base_url=url,
        max_concurrency=max_concurrency,
        max_depth=max_depth,
        max_pages=max_pages,
        report_path=report_path,
        options=_explicit(
            ctx,
            seo=seo,
            accessibility=accessibility,
            social_media=social_media,
            verbose=verbose,
        ),
    )
    if cfg.options.verbose:
        set_level('DEBUG')

    click.echo(click.style('Parsing', fg='blue', bold=True) + f' {cfg.base_url}')
    _print_options(cfg)

    try:
        report = asyncio.run(start_check(cfg, LoggingObserver()))
    except SiteCheckerError as e:
        print_error(str(e))

    click.echo()
    print_summary(report, verbose=cfg.options.verbose)

    try:
        saved = render_json(report, cfg.report_path)
    except OSError as e:
        print_error(f'Could not save JSON report: {e}')
    click.echo(f'JSON report: {saved}')


@cli.command('generate', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option('--max', '-m', 'max_concurrency', type=int, default=None,
              help='Max concurrent requests  [default: 15]')
@click.option('--output', '-o', 'sitemap_path', default=None,
              type=click.Path(writable=True, dir_okay=False, path_type=Path),
              help='Path of the output sitemap.xml  [default: sitemap.xml]')
@click.option('--max-depth', 'max_depth', type=int, default=None, help='Stop following links past this depth')
@click.option('--max-pages', 'max_pages', type=int, default=None, help='Stop after this many pages')
@click.pass_context
def generate(ctx, url, max_concurrency, sitemap_path, max_depth, max_pages):
    """Generate sitemap.xml for the site at URL."""
    cfg = _build_config(
        ctx,
        base_url=url,
        max_concurrency=max_concurrency,
        max_depth=max_depth,
        max_pages=max_pages,
        sitemap_path=sitemap_path,
    )
    _print_options(cfg)

    try:
        xml = asyncio.run(start_generate(cfg, LoggingObserver()))
    except SiteCheckerError as e:
        print_error(str(e))

    try:
        saved = write_sitemap(xml, cfg.sitemap_path)
    except OSError as e:
        print_error(f'Could not save sitemap: {e}')
    click.echo(f'Sitemap: {saved}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.argument('url', required=False, default=None)
@click.pass_context
def show_config(ctx, url):
    """Show the effective configuration as JSON.

    URL may be omitted when the config file sets base_url.
    """
    cfg = _build_config(ctx, base_url=url)
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
