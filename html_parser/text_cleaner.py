"""
html_parser/text_cleaner.py — markup fragment → plain prose with inline math.

What we remove:
  - footnote markers (<sup class="reference">) and "citation needed" notes
  - math elements without a TeX annotation
  - images, <style>/<script> blocks, every remaining tag of a known element

What we keep:
  - TeX from <annotation encoding="application/x-tex"> as " $...$ "
  - inner text of inline technical spans (class "texhtml")

Formulas are parked behind placeholders while tags are stripped and
entities decoded, so "<" or "&" inside $...$ survive untouched; only the
final whitespace collapse applies to them. $...$ spans already in the input
are parked the same way, so cleaned text passes through unchanged.

Public API:
  decode_entities(text)     -> str
  normalize_math(html)      -> str
  clean_html_text(html)     -> str
"""

from __future__ import annotations

import html as _html
import re
from typing import Callable

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

# <math ...> ... <annotation encoding="application/x-tex">TEX</annotation> ... </math>
# Every gap is bounded by </math>, so an annotation-less <math> never borrows
# the annotation of the next formula.
_NOT_MATH_END = r"(?:(?!</math>)[\s\S])*?"
_MATH_TEX_RE = re.compile(
    r"<math\b[^>]*>" + _NOT_MATH_END
    + r'<annotation\b[^>]*encoding="application/x-tex"[^>]*>(' + _NOT_MATH_END + r")</annotation>"
    + _NOT_MATH_END + r"</math>",
    re.IGNORECASE,
)
_MATH_ANY_RE = re.compile(r"<math\b[^>]*>[\s\S]*?</math>", re.IGNORECASE)

_REFERENCE_RE = re.compile(
    r'<sup\b[^>]*class="[^"]*\breference\b[^"]*"[^>]*>[\s\S]*?</sup>', re.IGNORECASE
)
_NOPRINT_RE = re.compile(
    r'<sup\b[^>]*class="[^"]*\bnoprint\b[^"]*"[^>]*>[\s\S]*?</sup>', re.IGNORECASE
)
_TEXHTML_RE = re.compile(
    r'<span\b[^>]*class="[^"]*\btexhtml\b[^"]*"[^>]*>([\s\S]*?)</span>', re.IGNORECASE
)
_IMG_RE   = re.compile(r"<img\b[^>]*>", re.IGNORECASE)
_NOISE_RE = re.compile(r"<(style|script)\b[^>]*>[\s\S]*?</\1>", re.IGNORECASE)

# Elements that occur in rendered article markup. Anything else shaped like
# "<name ...>" is prose ("x<y and y>z") and stays.
_ELEMENTS = (
    "a abbr annotation audio b bdi bdo big blockquote br caption cite code col "
    "colgroup dd del dfn div dl dt em figcaption figure font h1 h2 h3 h4 h5 h6 "
    "hr i img input ins kbd label li link mark math menclose meta mfrac mi mn "
    "mo mover mpadded mphantom mroot mrow ms mspace msqrt mstyle msub msubsup "
    "msup mtable mtd mtext mtr munder munderover noscript ol p pre q rp rt "
    "ruby s samp section semantics small source span strike strong style sub "
    "sup table tbody td tfoot th thead time tr tt u ul var video wbr"
).split()

# Tag = "<" + known element + (name="value")* + "/"? + ">"
_TAG_RE = re.compile(
    r"</?(?:" + "|".join(sorted(_ELEMENTS, key=len, reverse=True)) + r")"
    + r"""(?:\s+[\w:-]+\s*=\s*(?:"[^"]*"|'[^']*'|[^\s"'=<>`]+))*\s*/?>"""
    + r"|<!--[\s\S]*?-->",
    re.IGNORECASE,
)
_WS_RE = re.compile(r"\s+")

# $...$ already present in the input: opens before a non-space, closes after
# one, and is not glued to a word or digit ("US$5 and US$7" is not math).
_DOLLAR_MATH_RE = re.compile(r"(?<![\\$\w])\$(?![\s$])((?:\\.|[^$\\])+?)(?<!\s)\$(?![\w$])")

_PLACEHOLDER    = "\ue000{}\ue001"   # private-use code points
_PLACEHOLDER_RE = re.compile("\ue000(\\d+)\ue001")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def decode_entities(text: str) -> str:
    """Decodes named, decimal (&#39;) and hex (&#x27;) character references."""
    return _html.unescape(text)


def normalize_math(html: str) -> str:
    """
    Replaces every <math> carrying a TeX annotation with " $TEX$ ".

    Math without an annotation is left as is (clean_html_text drops it);
    malformed math simply does not match and passes through.
    """
    return _replace_math(html, lambda tex: f" ${tex}$ ")


def clean_html_text(html: str) -> str:
    """
    Produces plain text from a markup fragment, preserving inline math.

    Order:
      1. math with TeX annotation → $TEX$
      2. footnote markers and "citation needed" notes removed
      3. remaining math removed
      4. technical spans unwrapped
      5. images removed
      6. all other tags removed (style/script with their content)
      7. entities decoded
      8. whitespace collapsed, trimmed

    Steps 2-7 repeat until the text stops changing, so markup that only
    appears after decoding (double-escaped entities) is handled in one call.
    $...$ spans already present in the input are kept verbatim. Idempotent
    on its own output.
    """
    formulas: list[str] = []

    def park(tex: str) -> str:
        formulas.append(tex)
        return _PLACEHOLDER.format(len(formulas) - 1)

    def park_existing(m: re.Match[str]) -> str:
        if _TAG_RE.search(m.group(1)):
            return m.group(0)
        return park(m.group(1))

    text = _DOLLAR_MATH_RE.sub(park_existing, html)
    text = _replace_math(text, lambda tex: f" {park(tex)} ")

    while True:
        cleaned = decode_entities(_strip_markup(text))
        if cleaned == text:
            break
        text = cleaned

    text = _PLACEHOLDER_RE.sub(lambda m: f"${formulas[int(m.group(1))]}$", text)
    return _WS_RE.sub(" ", text).strip()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _strip_markup(text: str) -> str:
    text = _REFERENCE_RE.sub("", text)
    text = _NOPRINT_RE.sub("", text)
    text = _MATH_ANY_RE.sub("", text)
    text = _TEXHTML_RE.sub(r"\1", text)
    text = _IMG_RE.sub("", text)
    text = _NOISE_RE.sub("", text)
    return _TAG_RE.sub("", text)


def _replace_math(html: str, render: Callable[[str], str]) -> str:
    return _MATH_TEX_RE.sub(lambda m: render(decode_entities(m.group(1)).strip()), html)
