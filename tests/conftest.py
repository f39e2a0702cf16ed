"""
Shared fixtures: a page in the shape of MediaWiki parse output and a small
misconception collection.
"""

from pathlib import Path

import pytest

from data_model import Misconception, MisconceptionCollection, SourceDocument, SourcePage

PAGE_MARKUP = """<div class="mw-content-ltr mw-parser-output" lang="en" dir="ltr">
<p>This list corrects <b>erroneous beliefs</b>.</p>
<ul><li>Lead bullet that should never be extracted at all</li></ul>
<div class="mw-heading mw-heading2"><h2 id="Ancient_history">Ancient <i>history</i></h2></div>
<ul>
<li>Medieval Europeans did not believe the Earth was flat.<sup id="cite_ref-1" class="reference"><a href="#cite_note-1">[1]</a></sup></li>
<li>Main article: Myth of the flat Earth</li>
<li>Roman vomitoriums were passageways, not rooms for vomiting.
<ul><li>a. The word comes from the Latin vomere.</li><li>Nested detail that is long enough too</li></ul>
</li>
</ul>
<div class="mw-heading mw-heading3"><h3 id="Egypt">Egypt</h3></div>
<ul><li>The pyramids were not built by slaves but by paid laborers.</li></ul>
<div class="mw-heading mw-heading2"><h2 id="Physics">Physics</h2></div>
<ul><li>Mass and energy are related by <math xmlns="http://www.w3.org/1998/Math/MathML"><semantics><mrow><mi>E</mi></mrow><annotation encoding="application/x-tex">{\\displaystyle E=mc^{2}}</annotation></semantics></math> in every frame.</li></ul>
<div class="mw-heading mw-heading2"><h2 id="See_also">See also</h2></div>
<ul><li>List of common misconceptions about history</li></ul>
<div class="mw-heading mw-heading3"><h3 id="Related">Related</h3></div>
<ul><li>Related link text that must never be attributed</li></ul>
<div class="mw-heading mw-heading2"><h2 id="References">References</h2></div>
<ol class="references"><li id="cite_note-1">Reference one is a long citation text</li></ol>
</div>"""


@pytest.fixture
def page_markup() -> str:
    return PAGE_MARKUP


@pytest.fixture
def history_page() -> SourcePage:
    return SourcePage(title="List_of_common_misconceptions_about_history", category="History")


@pytest.fixture
def history_document(history_page) -> SourceDocument:
    return SourceDocument(
        page=history_page,
        markup=PAGE_MARKUP,
        source_url="https://en.wikipedia.org/wiki/List_of_common_misconceptions_about_history",
        headings=["Ancient_history", "Egypt", "Physics", "See_also", "Related", "References"],
    )


def make_misconception(text: str, category: str = "History", section: str = "General",
                       subsection: str | None = None, id: str | None = None) -> Misconception:
    return Misconception(
        id=id or text.lower().replace(" ", "")[:20],
        text=text,
        section=section,
        subsection=subsection,
        category=category,
        source="https://en.wikipedia.org/wiki/Example",
    )


@pytest.fixture
def small_collection() -> MisconceptionCollection:
    return MisconceptionCollection(
        misconceptions=[
            make_misconception("Bulls are not enraged by red.", id="bulls-1"),
            make_misconception("Goldfish remember for months.", id="goldfish-2", subsection="Animals"),
            make_misconception("Bats are not blind at all.", id="bats-3"),
        ],
        generated_at="2024-01-01T00:00:00.000Z",
    )


@pytest.fixture
def saved_collection(tmp_path: Path, small_collection) -> Path:
    from motd._store import save_collection

    path = tmp_path / "misconceptions.json"
    save_collection(small_collection, path)
    return path
