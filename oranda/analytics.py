"""Analytics provider snippets for the page layout."""

from __future__ import annotations

from dataclasses import dataclass

GOOGLE_SCRIPT_URL = "https://www.googletagmanager.com/gtag/js"
PLAUSIBLE_SCRIPT_URL = "https://plausible.io/js/script.js"
FATHOM_SCRIPT_URL = "https://cdn.usefathom.com/script.js"


@dataclass(frozen=True)
class Google:
    tracking_id: str

    def snippet(self) -> str:
        script_url = f"{GOOGLE_SCRIPT_URL}?id={self.tracking_id}"
        return f'<script async="true" src="{script_url}"></script>'

    def get_script(self) -> str:
        """Return the inline gtag bootstrap script."""
        return (
            "window.dataLayer = window.dataLayer || []; function gtag(){dataLayer.push("
            "arguments);} gtag('js', new Date());"
            f"gtag('config', '{self.tracking_id}');"
        )


@dataclass(frozen=True)
class Fathom:
    site: str

    def snippet(self) -> str:
        return (
            f'<script defer="true" src="{FATHOM_SCRIPT_URL}" '
            f'data-site="{self.site}"></script>'
        )


@dataclass(frozen=True)
class Plausible:
    domain: str
    script_url: str | None = None

    def snippet(self) -> str:
        script_url = self.script_url if self.script_url is not None else PLAUSIBLE_SCRIPT_URL
        return (
            f'<script defer="true" data-domain="{self.domain}" '
            f'src="{script_url}"></script>'
        )


@dataclass(frozen=True)
class Umami:
    website: str
    script_url: str

    def snippet(self) -> str:
        return (
            f'<script async="true" defer="true" src="{self.script_url}" '
            f'data-website-id="{self.website}"></script>'
        )


Provider = Google | Fathom | Plausible | Umami


@dataclass(frozen=True)
class Analytics:
    """Analytics markup to place in the page head."""

    snippet: str | None = None
    google_script: str | None = None

    @classmethod
    def from_provider(cls, provider: Provider | None) -> Analytics:
        if provider is None:
            return cls()
        if isinstance(provider, Google):
            return cls(snippet=provider.snippet(), google_script=provider.get_script())
        return cls(snippet=provider.snippet())