# site_checker/__init__.py
"""
SiteChecker: async SEO/accessibility checker and sitemap generator.

The command line lives in :mod:`site_checker.cli` (``site-checker`` entry point).
"""
__version__ = "0.1.0"

__all__ = ["__version__"]
