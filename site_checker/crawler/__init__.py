"""site_checker.crawler: crawl engine, page workers and their collaborators."""
