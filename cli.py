# cli.py

"""
Entry point for running SiteChecker from a source checkout.

Examples:
    python cli.py check example.com --max 10
    python cli.py generate example.com --output public/sitemap.xml
"""
from site_checker.cli import cli


if __name__ == '__main__':
    cli()
