"""Errors raised while building an oranda site."""

from __future__ import annotations


class OrandaError(Exception):
    """Base class for every error oranda reports."""

    help_text: str | None = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def help(self) -> str | None:
        """Return a hint on how to fix the problem, if there is one."""
        return self.help_text


class DistDirCreationError(OrandaError):
    """The output directory could not be created."""

    def __init__(self, dist_path: str, details: BaseException | None = None) -> None:
        super().__init__(
            f"Failed to create a directory, `{dist_path}` to build your project in."
        )
        self.dist_path = dist_path
        self.details = details
        if details is not None:
            self.__cause__ = details


class PathdiffError(OrandaError):
    """A path could not be expressed relative to the workspace root."""

    help_text = (
        "It can help to have your workspace members in a subdirectory under your "
        "workspace root."
    )

    def __init__(self, root_path: str, path: str) -> None:
        super().__init__(
            f"Unable to create a path to {path} from root path {root_path}."
        )
        self.root_path = root_path
        self.path = path


class PathDoesNotExist(OrandaError):
    """A configured path was not found on disk."""

    help_text = (
        "Make sure you specify your path relative to the oranda.json/manifest "
        "file/README file of your project!"
    )

    def __init__(self, path: str) -> None:
        super().__init__(f"Specified path `{path}` was not found on your filesystem!")
        self.path = path


class PackageVersionParse(OrandaError):
    """A release tag could not be parsed as a package version."""

    def __init__(self, version: str) -> None:
        super().__init__(f"Failed to parse package version {version}")
        self.version = version


class ChangelogParseFailed(OrandaError):
    """The changelog file did not contain a usable entry for a version."""

    help_text = "Make sure that your changelog file lists the version in a header!"

    def __init__(
        self, name: str, version: str, details: BaseException | None = None
    ) -> None:
        super().__init__(f"Unable to parse changelog for {name} version {version}")
        self.name = name
        self.version = version
        self.details = details
        if details is not None:
            self.__cause__ = details


class MdbookBuildRecursive(OrandaError):
    """The book's output directory lies inside its source directory."""

    help_text = (
        "Make sure that your book source does not contain your book output "
        "directory, as that will lead to infinite recursion. Change either the "
        "`src` setting or the `build_dir` setting in your book.toml."
    )

    def __init__(self, src_path: str, dest_path: str) -> None:
        super().__init__(
            f"Can't build mdbook because book output directory {dest_path} is "
            f"under book source directory {src_path}"
        )
        self.src_path = src_path
        self.dest_path = dest_path


class UnknownRepoStyle(OrandaError):
    """A repository URL could not be understood."""

    help_text = "oranda only supports URLs you can also use with Git."

    def __init__(self, url: str) -> None:
        super().__init__(f"Your repository URL {url} couldn't be parsed.")
        self.url = url


class BuildNotFound(OrandaError):
    """No built site was found where one was expected."""

    help_text = "Did you remember to run `oranda build`?"

    def __init__(self, dist_dir: str) -> None:
        super().__init__(f"Could not find a build in {dist_dir}")
        self.dist_dir = dist_dir


class PreferredFundingNotFound(OrandaError):
    """The preferred funding source is not among the configured ones."""

    def __init__(self, preferred: str, help: str) -> None:
        super().__init__(
            f"Your preferred_funding '{preferred}' didn't match any of the sources "
            "we found"
        )
        self.preferred = preferred
        self.help_text = help