"""Markdown rendering to sanitised HTML."""

from __future__ import annotations

from html import escape
from html.parser import HTMLParser

from markdown_it import MarkdownIt

from .errors import OrandaError
from .highlight import syntax_highlight
from .themes import SyntaxTheme

_ALLOWED_TAGS = frozenset(
    """a abbr acronym area article aside b bdi bdo blockquote br caption center
    cite code col colgroup data dd del details dfn div dl dt em figcaption figure
    footer h1 h2 h3 h4 h5 h6 header hgroup hr i img ins kbd li map mark nav ol p
    pre q rp rt rtc ruby s samp small span strike strong sub summary sup table
    tbody td th thead time tr tt u ul var wbr""".split()
)
_VOID_TAGS = frozenset({"area", "br", "col", "hr", "img", "wbr"})
_CLEAN_CONTENT_TAGS = frozenset({"script", "style"})
_GENERIC_ATTRIBUTES = frozenset({"lang", "title", "style", "class", "id"})
_TABLE_CELL = frozenset({"align", "char", "charoff"})
_TAG_ATTRIBUTES = {
    "a": frozenset({"href", "hreflang"}),
    "bdo": frozenset({"dir"}),
    "blockquote": frozenset({"cite"}),
    "col": frozenset({"align", "char", "charoff", "span"}),
    "colgroup": frozenset({"align", "char", "charoff", "span"}),
    "del": frozenset({"cite", "datetime"}),
    "hr": frozenset({"align", "size", "width"}),
    "img": frozenset({"align", "alt", "height", "src", "width"}),
    "ins": frozenset({"cite", "datetime"}),
    "ol": frozenset({"start"}),
    "q": frozenset({"cite"}),
    "table": frozenset({"align", "char", "charoff", "summary"}),
    "tbody": _TABLE_CELL,
    "tfoot": _TABLE_CELL,
    "thead": _TABLE_CELL,
    "tr": _TABLE_CELL,
    "td": _TABLE_CELL | {"colspan", "headers", "rowspan"},
    "th": _TABLE_CELL | {"abbr", "colspan", "headers", "rowspan", "scope"},
    "ul": frozenset({"type"}),
}
_URL_ATTRIBUTES = frozenset({"href", "src", "cite"})
_URL_SCHEMES = frozenset(
    """bitcoin ftp ftps geo http https im irc ircs magnet mailto mms mx news nntp
    openpgp4fpr sip sms smsto ssh tel url webcal wtai xmpp""".split()
)
_LINK_REL = "noopener noreferrer"


def _url_allowed(value: str) -> bool:
    value = value.strip()
    head = value
    for stop in "/?#":
        head = head.split(stop, 1)[0]
    if ":" not in head:
        return True
    return head.split(":", 1)[0].lower() in _URL_SCHEMES


class _Sanitizer(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.parts: list[str] = []
        self.open_tags: list[str] = []
        self.skip_depth = 0

    def handle_starttag(self, tag, attrs):
        if tag in _CLEAN_CONTENT_TAGS:
            self.skip_depth += 1
            return
        if self.skip_depth or tag not in _ALLOWED_TAGS:
            return
        allowed = _GENERIC_ATTRIBUTES | _TAG_ATTRIBUTES.get(tag, frozenset())
        rendered = []
        for name, value in attrs:
            if name not in allowed:
                continue
            value = value or ""
            if name in _URL_ATTRIBUTES and not _url_allowed(value):
                continue
            rendered.append(f' {name}="{escape(value, quote=True)}"')
        if tag == "a":
            rendered.append(f' rel="{_LINK_REL}"')
        self.parts.append(f"<{tag}{''.join(rendered)}>")
        if tag not in _VOID_TAGS:
            self.open_tags.append(tag)

    def handle_endtag(self, tag):
        if tag in _CLEAN_CONTENT_TAGS:
            self.skip_depth = max(0, self.skip_depth - 1)
            return
        if self.skip_depth or tag in _VOID_TAGS or tag not in self.open_tags:
            return
        while self.open_tags:
            current = self.open_tags.pop()
            self.parts.append(f"</{current}>")
            if current == tag:
                break

    def handle_data(self, data):
        if not self.skip_depth:
            self.parts.append(escape(data, quote=False))

    def result(self) -> str:
        self.close()
        self.parts.extend(f"</{tag}>" for tag in reversed(self.open_tags))
        self.open_tags.clear()
        return "".join(self.parts)


def sanitize_html(html: str) -> str:
    """Strip disallowed tags, attributes and URLs from ``html``."""
    sanitizer = _Sanitizer()
    sanitizer.feed(html)
    return sanitizer.result()


def _render_del_open(self, tokens, idx, options, env):
    return "<del>"


def _render_del_close(self, tokens, idx, options, env):
    return "</del>"


def _make_parser(syntax_theme: SyntaxTheme) -> MarkdownIt:
    def highlight_code(code: str, lang: str, attrs: str) -> str:
        try:
            return syntax_highlight(lang or None, code, syntax_theme)
        except OrandaError:
            return ""

    md = MarkdownIt("commonmark", {"html": True, "highlight": highlight_code})
    md.enable(["table", "strikethrough"])
    md.add_render_rule("s_open", _render_del_open)
    md.add_render_rule("s_close", _render_del_close)
    return md


def to_html(markdown: str, syntax_theme: SyntaxTheme = SyntaxTheme.MaterialTheme) -> str:
    """Render markdown to sanitised HTML with highlighted code blocks."""
    unsafe_html = _make_parser(syntax_theme).render(markdown)
    return sanitize_html(unsafe_html)