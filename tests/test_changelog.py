import pytest
import semver

from oranda.changelog import (
    ChangelogContext,
    ChangelogRelease,
    WorkspaceKind,
    empty_context,
    parse_version,
)
from oranda.errors import PackageVersionParse
from oranda.link import build_os_script_path


def test_parse_version_strips_v():
    assert parse_version("v1.2.3", WorkspaceKind.RUST) == semver.Version(1, 2, 3)
    assert parse_version("1.2.3", WorkspaceKind.RUST) == semver.Version(1, 2, 3)


def test_parse_version_prerelease():
    version = parse_version("v0.6.0-prerelease.1", WorkspaceKind.RUST)
    assert version.prerelease == "prerelease.1"
    assert (version.major, version.minor, version.patch) == (0, 6, 0)


def test_parse_version_javascript_accepts_kind_string():
    assert parse_version("v2.0.0", "javascript") == semver.Version(2, 0, 0)


def test_parse_version_javascript_is_lenient():
    assert parse_version(" =3.1.4 ", WorkspaceKind.JAVASCRIPT) == semver.Version(3, 1, 4)


@pytest.mark.parametrize("kind", list(WorkspaceKind))
def test_parse_version_error(kind):
    with pytest.raises(PackageVersionParse) as info:
        parse_version("vnot-a-version", kind)
    assert info.value.version == "not-a-version"


def test_parse_version_unknown_kind():
    with pytest.raises(ValueError):
        parse_version("1.0.0", "python")


def test_empty_context():
    context = empty_context(True, "axo")
    assert context.releases == []
    assert context.has_prereleases is False
    assert context.has_rss_feed is True
    assert context.os_script == build_os_script_path("axo")


def test_empty_context_without_prefix():
    context = empty_context(False, None)
    assert context.os_script == "/artifacts.js"
    assert context.has_rss_feed is False


def test_changelog_release_defaults():
    release = ChangelogRelease(is_prerelease=False, version_tag="v0.2.0")
    context = ChangelogContext(releases=[release])
    assert context.releases[0].body == ""
    assert context.releases[0].name is None