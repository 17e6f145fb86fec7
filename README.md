# oranda

Building blocks for generating a landing page for a software project:
Markdown rendered as sanitized HTML with highlighted code, site links that
honour a path prefix, themes, analytics snippets, a funding page context, a
changelog context with an RSS feed, theme selection for an mdbook, a workspace
index context, and helpers that write rendered pages into an output directory.

## Modules

- `oranda.markdown`: `to_html(markdown, syntax_theme)` renders CommonMark
  (with tables and strikethrough, raw HTML allowed) and passes the result
  through `sanitize_html(html)`, which keeps only an allow-list of tags,
  attributes and URL schemes and adds `rel="noopener noreferrer"` to links.
  Fenced code blocks are highlighted by `oranda.highlight`.
- `oranda.highlight`: `syntax_highlight(lang, code, syntax_theme)` returns a
  `<pre>` block with inline styles, using Pygments. `resolve_language(lang)`
  maps `text` to `txt` and `shell` to `sh`. Unknown languages are shown as
  plain text with a warning. Only `SyntaxTheme.MaterialTheme` is available;
  other syntax themes raise `OrandaError`.
- `oranda.link`: `generate_relative(path_prefix, file_name)`,
  `generate_absolute(path_prefix, file_name)` (against
  `http://127.0.0.1:7979`) and `build_os_script_path(path_prefix)`. Each path
  segment is form-encoded; a trailing `/` on the file name is kept.
- `oranda.themes`: `OrandaTheme` (with `parse(name)` accepting the
  `axo_light`/`axo_dark` aliases, and `as_css_classes()`) and `SyntaxTheme`
  (with `parse(name)`).
- `oranda.analytics`: `Google`, `Fathom`, `Plausible` and `Umami` providers,
  each with `snippet()`; `Google.get_script()` gives the gtag bootstrap, and
  `Analytics.from_provider(provider)` collects what goes into the page head.
- `oranda.funding`: `FundingType`, `FundingMethod`, `FundingContext`,
  `to_funding_methods(ftype, content)` and
  `build_context(content, preferred_funding, docs_content)`, which moves the
  preferred source out of the general list.
- `oranda.changelog`: `ChangelogRelease`, `ChangelogContext`,
  `WorkspaceKind`, `parse_version(version_str, kind)` (a leading `v` is
  dropped; failures raise `PackageVersionParse`) and
  `empty_context(has_rss_feed, path_prefix)`.
- `oranda.rss`: `generate_rss_feed(context, project_name, repository,
  path_prefix)` returns an RSS 2.0 document as a string.
- `oranda.mdbook`: `AxomdbookTheme` (`from_oranda_theme`, `is_dark`,
  `twin_theme`, `css_class`, `display_name`), `custom_theme`,
  `custom_theme_dir`, `homogenize_path`, `theme_buttons` and
  `check_build_dirs`, which raises `MdbookBuildRecursive` when the book's
  output directory lies inside its source directory.
- `oranda.page`: `Page` (`contents`, `filename`, `filename_for(source)`,
  `output_path(dist)`) and `render_markdown_file(source, syntax_theme, cwd)`.
  Every HTML page other than `index.html` gets a "pretty" path:
  `artifacts.html` is written as `artifacts/index.html`.
- `oranda.site`: `clean_dist_dir`, `copy_static`, `write_pages`,
  `planned_components`, `print_plan` and `changelog_page_names`.
- `oranda.workspace_index`: `WorkspaceIndexMember`,
  `WorkspaceIndexContext.build(members, preferred_members, docs_content)` and
  `find_logo_path(logo_url, slug, path_prefix, root_path)`.
- `oranda.paths`: `determine_path(root_path, member_path, path)` resolves a
  path relative to a workspace root, returning `None` if it does not exist.
- `oranda.formatter`: `OrandaFormatter`, `OutputFormat`,
  `configure_logging(verbose, stream)` and the `workspace_page(prefix)`
  context manager, which prefixes log lines with a workspace member name.
- `oranda.errors`: `OrandaError` and its subclasses; `help()` returns a hint
  where there is one.

## Examples

```python
from oranda.link import generate_relative

generate_relative("axo", "artifacts.js")   # "/axo/artifacts.js"
generate_relative(None, "changelog/")      # "/changelog/"
```

```python
from oranda.themes import OrandaTheme

OrandaTheme.parse("axo_dark").as_css_classes()   # "dark axo"
```

```python
from oranda.markdown import to_html
from oranda.themes import SyntaxTheme

html = to_html("# Hello\n\n```rust\nfn main() {}\n```\n", SyntaxTheme.MaterialTheme)
```

```python
from oranda.analytics import Analytics, Plausible

analytics = Analytics.from_provider(Plausible(domain="example.com"))
print(analytics.snippet)
```

```python
from oranda.page import Page
from oranda.site import clean_dist_dir, write_pages

dist = clean_dist_dir("public")
write_pages([Page(contents="<h1>Hi</h1>", filename="index.html")], dist)
```

```python
from oranda.errors import OrandaError, PathDoesNotExist

try:
    raise PathDoesNotExist(path="docs/missing.md")
except OrandaError as err:
    print(err)
    print(err.help())
```

## What this package does not do

There is no command line program, no development server, and no reading of
project configuration files. Full page layouts and templates are not
included: a `Page` holds whatever contents it is given. Release data is not
fetched from any hosting service, there is no artifacts/downloads page, and
the site stylesheet is neither built nor downloaded. For mdbook, the package
chooses the theme and checks the directories, but it does not run the book
build or write the theme's files.