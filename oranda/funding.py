"""Funding page context built from funding sources."""

from __future__ import annotations

import enum
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

FundingContent = str | Sequence[str]


class FundingType(enum.Enum):
    """Funding platforms understood in a FUNDING.yml file."""

    GITHUB = "github"
    PATREON = "patreon"
    OPEN_COLLECTIVE = "open_collective"
    KO_FI = "ko_fi"
    TIDELIFT = "tidelift"
    COMMUNITY_BRIDGE = "community_bridge"
    ISSUEHUNT = "issuehunt"
    LIBERAPAY = "liberapay"
    CUSTOM = "custom"


@dataclass(frozen=True)
class FundingMethod:
    title: str
    link: str
    icon: str | None = None


@dataclass
class FundingContext:
    preferred_funding: list[FundingMethod] | None
    funding: list[FundingMethod] = field(default_factory=list)
    docs_content: str | None = None


# Platforms that accept exactly one account name: (title, link template, icon).
_SINGLE = {
    FundingType.PATREON: ("Patreon", "https://patreon.com/{}", "patreon"),
    FundingType.OPEN_COLLECTIVE: (
        "OpenCollective",
        "https://opencollective.com/{}",
        "opencollective",
    ),
    FundingType.KO_FI: ("Ko-fi", "https://ko-fi.com/{}", "kofi"),
    FundingType.TIDELIFT: (
        "Tidelift",
        "https://tidelift.com/subscription/pkg/{}",
        "patreon",
    ),
    FundingType.COMMUNITY_BRIDGE: (
        "CommunityBridge",
        "https://crowdfunding.lfx.linuxfoundation.org/projects/{}",
        None,
    ),
    FundingType.ISSUEHUNT: ("IssueHunt", "https://issuehunt.com/r/{}", None),
    FundingType.LIBERAPAY: ("Liberapay", "https://liberapay.com/{}", "liberapay"),
}


def _one_or_multiple(content: FundingContent) -> list[str]:
    return [content] if isinstance(content, str) else list(content)


def to_funding_methods(
    ftype: FundingType | str, content: FundingContent
) -> list[FundingMethod]:
    """Turn one funding source into the links to show for it."""
    ftype = FundingType(ftype)
    if ftype is FundingType.GITHUB:
        return [
            FundingMethod("GitHub", f"https://github.com/sponsors/{item}", "github")
            for item in _one_or_multiple(content)
        ]
    if ftype is FundingType.CUSTOM:
        return [FundingMethod(item, item, None) for item in _one_or_multiple(content)]
    if not isinstance(content, str):
        return []
    title, template, icon = _SINGLE[ftype]
    return [FundingMethod(title, template.format(content), icon)]


def build_context(
    content: Mapping[FundingType, FundingContent],
    preferred_funding: FundingType | None = None,
    docs_content: str | None = None,
) -> FundingContext:
    """Build the funding page context, lifting out the preferred source."""
    remaining = dict(content)
    preferred = None
    if preferred_funding is not None and preferred_funding in remaining:
        preferred = to_funding_methods(preferred_funding, remaining.pop(preferred_funding))
    return FundingContext(
        preferred_funding=preferred,
        funding=[
            method
            for ftype, value in remaining.items()
            for method in to_funding_methods(ftype, value)
        ],
        docs_content=docs_content,
    )