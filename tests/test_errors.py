import pytest

from oranda.errors import (
    BuildNotFound,
    ChangelogParseFailed,
    DistDirCreationError,
    MdbookBuildRecursive,
    OrandaError,
    PackageVersionParse,
    PathDoesNotExist,
    PathdiffError,
    PreferredFundingNotFound,
    UnknownRepoStyle,
)


def test_path_does_not_exist_message_and_help():
    err = PathDoesNotExist("docs/missing.md")
    assert str(err) == "Specified path `docs/missing.md` was not found on your filesystem!"
    assert err.help().startswith("Make sure you specify your path relative")
    assert err.path == "docs/missing.md"


def test_build_not_found_help():
    err = BuildNotFound("public")
    assert str(err) == "Could not find a build in public"
    assert err.help() == "Did you remember to run `oranda build`?"


def test_package_version_parse_has_no_help():
    err = PackageVersionParse("1.x")
    assert str(err) == "Failed to parse package version 1.x"
    assert err.help() is None


def test_preferred_funding_uses_given_help():
    err = PreferredFundingNotFound("github", "try patreon")
    assert err.help() == "try patreon"
    assert "'github'" in str(err)


def test_dist_dir_error_chains_cause():
    cause = PermissionError("denied")
    err = DistDirCreationError("public", cause)
    assert err.__cause__ is cause
    assert "`public`" in str(err)


def test_changelog_parse_failed_fields():
    err = ChangelogParseFailed("axo", "0.1.0")
    assert str(err) == "Unable to parse changelog for axo version 0.1.0"
    assert "header" in err.help()


def test_recursive_and_pathdiff_messages():
    rec = MdbookBuildRecursive("./src", "./src/book")
    assert "./src/book" in str(rec) and "infinite recursion" in rec.help()
    diff = PathdiffError("/root", "/other")
    assert str(diff) == "Unable to create a path to /other from root path /root."


def test_errors_are_catchable_as_base():
    err = UnknownRepoStyle("not a url")
    assert err.help() == "oranda only supports URLs you can also use with Git."
    assert "not a url" in str(err)
    with pytest.raises(OrandaError) as info:
        raise err
    assert info.value.help() == "oranda only supports URLs you can also use with Git."