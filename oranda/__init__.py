"""Building blocks for project landing pages: markdown, links, themes, changelog, funding and workspace index."""

__version__ = "0.6.5"