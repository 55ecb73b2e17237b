# File: tests/test_link_extractor.py
from site_checker.crawler.link_extractor import extract_links
from site_checker.parser.html_parser import parse_document

BASE = "https://example.com"

HTML = """
<a href="/about">About</a>
<a href="/blog/post?page=2#comments">Post</a>
<a href="contact">Contact</a>
<a href="https://example.com/about">About again</a>
<a href="https://example.com:8443/admin">Other port</a>
<a href="http://example.com/plain">Other scheme</a>
<a href="https://elsewhere.org/">External</a>
<a href="mailto:team@example.com">Mail</a>
<a href="javascript:void(0)">JS</a>
<a>No href</a>
"""


def test_same_origin_links_in_document_order():
    links = extract_links(parse_document(HTML), BASE)
    assert links == ["/about", "/blog/post", "/contact"]


def test_known_paths_are_excluded():
    links = extract_links(parse_document(HTML), BASE, known={"/about"})
    assert links == ["/blog/post", "/contact"]


def test_extraction_is_idempotent():
    document = parse_document(HTML)
    known = {"/contact"}
    first = extract_links(document, BASE, known=known)
    second = extract_links(document, BASE, known=known)
    assert first == second == ["/about", "/blog/post"]


def test_explicit_default_port_matches_origin():
    links = extract_links(parse_document('<a href="https://example.com:443/x">x</a>'), BASE)
    assert links == ["/x"]


def test_empty_href_points_to_root():
    assert extract_links(parse_document('<a href="">home</a>'), BASE) == ["/"]
