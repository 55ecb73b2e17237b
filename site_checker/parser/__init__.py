"""site_checker.parser: document parsing helpers."""
