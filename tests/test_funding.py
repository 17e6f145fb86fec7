from oranda.funding import (
    FundingMethod,
    FundingType,
    build_context,
    to_funding_methods,
)


def test_github_single():
    methods = to_funding_methods(FundingType.GITHUB, "ghost")
    assert methods == [
        FundingMethod("GitHub", "https://github.com/sponsors/ghost", "github")
    ]


def test_github_multiple():
    methods = to_funding_methods(FundingType.GITHUB, ["a", "b"])
    assert [m.link for m in methods] == [
        "https://github.com/sponsors/a",
        "https://github.com/sponsors/b",
    ]


def test_patreon_single():
    methods = to_funding_methods(FundingType.PATREON, "someone")
    assert methods == [FundingMethod("Patreon", "https://patreon.com/someone", "patreon")]


def test_single_only_platform_ignores_lists():
    assert to_funding_methods(FundingType.PATREON, ["a", "b"]) == []
    assert to_funding_methods(FundingType.LIBERAPAY, ["a"]) == []


def test_accepts_string_type():
    assert to_funding_methods("ko_fi", "me") == [
        FundingMethod("Ko-fi", "https://ko-fi.com/me", "kofi")
    ]


def test_custom_title_is_link():
    methods = to_funding_methods(FundingType.CUSTOM, ["https://example.com/donate"])
    assert methods == [
        FundingMethod("https://example.com/donate", "https://example.com/donate", None)
    ]


def test_community_bridge_has_no_icon():
    (method,) = to_funding_methods(FundingType.COMMUNITY_BRIDGE, "proj")
    assert method.icon is None
    assert method.link == "https://crowdfunding.lfx.linuxfoundation.org/projects/proj"


def test_context_lifts_preferred():
    content = {FundingType.GITHUB: "ghost", FundingType.LIBERAPAY: "ghost"}
    ctx = build_context(content, FundingType.LIBERAPAY, "docs")
    assert ctx.preferred_funding == to_funding_methods(FundingType.LIBERAPAY, "ghost")
    assert ctx.funding == to_funding_methods(FundingType.GITHUB, "ghost")
    assert ctx.docs_content == "docs"
    assert FundingType.LIBERAPAY in content


def test_context_missing_preferred():
    content = {FundingType.GITHUB: "ghost", FundingType.PATREON: "ghost"}
    ctx = build_context(content, FundingType.KO_FI)
    assert ctx.preferred_funding is None
    assert len(ctx.funding) == 2
    assert [m.title for m in ctx.funding] == ["GitHub", "Patreon"]


def test_context_without_preference():
    ctx = build_context({FundingType.CUSTOM: ["x", "y"]})
    assert ctx.preferred_funding is None
    assert [m.link for m in ctx.funding] == ["x", "y"]