"""Utility functions shared by the Streamlit and HTMX front ends."""

import re
import unicodedata

from bs4 import BeautifulSoup

from src.chains.seo_generator import ToolMode

MODE_LABELS = {
    ToolMode.ARTICLE: "Viết bài SEO",
    ToolMode.CLUSTER: "Keyword Cluster",
}

# Tags an article or cluster payload is expected to contain
ALLOWED_TAGS = {
    "article", "section", "header", "footer", "div", "span", "p", "br", "hr",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "ul", "ol", "li", "dl", "dt", "dd",
    "table", "caption", "thead", "tbody", "tfoot", "tr", "th", "td", "colgroup", "col",
    "a", "strong", "b", "em", "i", "u", "mark", "small", "sub", "sup",
    "blockquote", "q", "cite", "code", "pre", "abbr",
}

# Dropped together with their content; any other unknown tag is unwrapped
DROPPED_TAGS = [
    "script",
    "style",
    "template",
    "svg",
    "math",
    "iframe",
    "frame",
    "frameset",
    "object",
    "embed",
    "applet",
    "form",
    "input",
    "button",
    "select",
    "textarea",
    "link",
    "meta",
    "base",
    "noscript",
    "head",
    "title",
]

ALLOWED_ATTRIBUTES = {"href", "title", "target", "rel", "colspan", "rowspan", "scope", "class"}
UNSAFE_URL_SCHEMES = ("javascript:", "vbscript:", "data:")


def format_mode_label(mode: ToolMode | str) -> str:
    """Convert a tool mode to its Vietnamese label.

    Unknown values are returned unchanged.
    """
    try:
        return MODE_LABELS[ToolMode(mode)]
    except ValueError:
        return str(mode)


def sanitize_html(html: str) -> str:
    """Strip scripting from model output before it is rendered as a preview.

    Generated content is untrusted markup. Only the structural tags in
    ``ALLOWED_TAGS`` survive: scripting containers such as ``svg`` and
    ``math`` are removed with their content, other unknown tags are replaced
    by their text, and attributes are reduced to ``ALLOWED_ATTRIBUTES`` with
    script URLs dropped from ``href``.

    Args:
        html: Raw generated HTML.

    Returns:
        HTML that is safe to inject into the preview pane.
    """
    soup = BeautifulSoup(html, "html.parser")
    for bad in soup(DROPPED_TAGS):
        bad.decompose()

    for tag in soup.find_all(True):
        if tag.name.lower() not in ALLOWED_TAGS:
            tag.unwrap()
            continue
        for attr in list(tag.attrs):
            name = attr.lower()
            if name not in ALLOWED_ATTRIBUTES:
                del tag.attrs[attr]
            elif name == "href":
                value = str(tag.attrs[attr]).strip().lower()
                # Browsers ignore embedded whitespace/control chars in schemes
                value = re.sub(r"[\s\x00-\x1f]+", "", value)
                if value.startswith(UNSAFE_URL_SCHEMES):
                    del tag.attrs[attr]

    return str(soup)


def split_meta_description(content: str) -> tuple[str, str]:
    """Split an article payload into its HTML body and trailing meta description.

    The article template asks for a plain-text description after ``</article>``.

    Returns:
        (html, meta_description). The description is "" when none follows.
    """
    marker = "</article>"
    index = content.lower().rfind(marker)
    if index == -1:
        return content, ""
    end = index + len(marker)
    return content[:end], " ".join(content[end:].split())


def build_download_filename(mode: ToolMode | str, keyword: str) -> str:
    """Build an ASCII file name for downloading a result.

    >>> build_download_filename("cluster", "Máy lọc nước ion kiềm")
    'cluster-may-loc-nuoc-ion-kiem.html'
    """
    text = keyword.replace("đ", "d").replace("Đ", "D")
    text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
    prefix = ToolMode(mode).value
    return f"{prefix}-{slug}.html" if slug else f"{prefix}.html"
