"""RSS feed for the changelog."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from .changelog import ChangelogContext
from .link import generate_absolute

ATOM_NS = "http://www.w3.org/2005/Atom"
CONTENT_NS = "http://purl.org/rss/1.0/modules/content/"
_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'


def _text(parent: ET.Element, tag: str, value: str) -> ET.Element:
    element = ET.SubElement(parent, tag)
    element.text = value
    return element


def _category(parent: ET.Element, name: str, domain: str | None) -> None:
    attrs = {"domain": domain} if domain is not None else {}
    ET.SubElement(parent, "category", attrs).text = name


def generate_rss_feed(
    context: ChangelogContext,
    project_name: str,
    repository: str | None = None,
    path_prefix: str | None = None,
) -> str:
    """Render the changelog releases as an RSS 2.0 document."""
    category_name = f"{project_name} Changelog"

    rss = ET.Element(
        "rss", {"version": "2.0", "xmlns:atom": ATOM_NS, "xmlns:content": CONTENT_NS}
    )
    channel = ET.SubElement(rss, "channel")
    _text(channel, "title", category_name)
    _text(channel, "link", generate_absolute(path_prefix, "changelog"))
    _text(channel, "description", f"Changelog information for {project_name}")
    _category(channel, category_name, repository)
    ET.SubElement(
        channel,
        "atom:link",
        {"href": generate_absolute(path_prefix, "changelog.rss"), "rel": "self"},
    )

    for release in context.releases:
        link = generate_absolute(path_prefix, f"changelog/{release.version_tag}")
        item = ET.SubElement(channel, "item")
        title = release.name if release.name is not None else release.version_tag
        _text(item, "title", title)
        _text(item, "link", link)
        _category(item, category_name, repository)
        guid = ET.SubElement(item, "guid", {"isPermaLink": "true"})
        guid.text = link
        _text(item, "content:encoded", release.body)

    return _DECLARATION + ET.tostring(rss, encoding="unicode")