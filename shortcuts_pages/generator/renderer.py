"""Render tip prose, code samples, and example outputs into HTML fragments."""

from __future__ import annotations

import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

FENCE_INFO_PATTERN = re.compile(
    r"^([ ]{0,3})([`~]{3,})([A-Za-z0-9_+#.-]+)?[^\r\n]*$", re.MULTILINE
)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')


class HtmlContentRenderer:
    """Render catalog content with consistent code styling."""

    def __init__(
        self,
        pygments_style: str = "monokai",
        link_extension: Extension | None = None,
        *,
        default_language: str = "r",
    ) -> None:
        """Initialize a renderer with a pygments style and optional link extension.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        link_extension : Extension, optional
            Markdown extension used when rewriting links; pass ``None`` to skip
            link rewriting.
        default_language : str, optional
            Lexer used for code samples that carry no language of their own.
        """
        self.pygments_style = pygments_style
        self.default_language = default_language
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        self._link_extension = link_extension

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render tip prose into HTML using the configured extensions."""
        normalized, languages = self._normalize_fences(text)
        if not normalized.strip():
            return ""
        extensions: list[Extension | str] = [
            "fenced_code",
            "codehilite",
            "tables",
            "sane_lists",
        ]
        if self._link_extension:
            extensions.append(self._link_extension)
        md = Markdown(
            extensions=extensions,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        html = md.convert(normalized)
        return self._label_blocks(html, languages)

    def code_block(self, code: str, language: str | None = None) -> str:
        """Render one code sample into highlighted HTML.

        Parameters
        ----------
        code : str
            Opaque snippet to highlight; it is never evaluated.
        language : str, optional
            Pygments lexer name; defaults to the renderer's default language
            and falls back to ``"text"`` when the lexer lookup fails.

        Returns
        -------
        str
            HTML containing the highlighted block with ``data-language``
            metadata applied.
        """
        lang = language or self.default_language
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            lexer = get_lexer_by_name("text")
        html = highlight(code, lexer, self._formatter)
        return self._label_blocks(html, [lang])

    @staticmethod
    def output_block(output: str) -> str:
        """Render an example output as preformatted, escaped text."""
        return f'<pre class="example-output"><code>{escape(output)}</code></pre>'

    @staticmethod
    def _label_blocks(html: str, languages: list[str]) -> str:
        """Attach ``data-language`` to highlighted blocks in document order."""
        if not languages:
            return html
        lang_iter = iter(languages)

        def _repl(_match: re.Match[str]) -> str:
            lang = escape(next(lang_iter, "text"), quote=True)
            return f'<div class="codehilite" data-language="{lang}">'

        return CODEHILITE_OPEN_TAG.sub(_repl, html, len(languages))

    @staticmethod
    def _normalize_fences(text: str) -> tuple[str, list[str]]:
        """Dedent fence markers, drop fence extras, and list block languages.

        Only opening fences are labelled. A block closes on a bare fence of
        the same character that is at least as long as its opener; other
        fence-like lines inside it pass through untouched.
        """
        languages: list[str] = []
        opener: str | None = None

        def _repl(match: re.Match[str]) -> str:
            nonlocal opener
            _indent, fence, language = match.groups()
            if opener is not None:
                closes = (
                    fence[0] == opener[0]
                    and len(fence) >= len(opener)
                    and set(fence) == {fence[0]}
                    and match.group(0).strip() == fence
                )
                if not closes:
                    return match.group(0)
                opener = None
                return fence
            opener = fence
            lang = language or "text"
            languages.append(lang)
            return f"{fence}{lang}"

        return FENCE_INFO_PATTERN.sub(_repl, text), languages


__all__ = ["HtmlContentRenderer"]
