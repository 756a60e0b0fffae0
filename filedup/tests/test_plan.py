from __future__ import annotations

from filedup.family.classifier import Classification, ClassifiedMember
from filedup.family.plan import render, render_text
from filedup.family.resolver import NoAction, RemoveExactDuplicatesOnly, ReplaceOriginal

RULE = "-" * 30


def test_exact_duplicates_are_removed_with_reason() -> None:
    classification = Classification(
        original="doc.pdf",
        digest="aa",
        members=(
            ClassifiedMember("doc (1).pdf", "aa", True),
            ClassifiedMember("doc (2).pdf", "aa", True),
        ),
    )

    lines = render(classification, RemoveExactDuplicatesOnly(("doc (1).pdf", "doc (2).pdf")))

    assert lines == [
        f"# {RULE} doc.pdf aa",
        "# doc (1).pdf aa",
        'rm "doc (1).pdf" # doc.pdf',
        "# doc (2).pdf aa",
        'rm "doc (2).pdf" # doc.pdf',
    ]


def test_replacement_ends_with_rename() -> None:
    classification = Classification(
        original="doc.pdf",
        digest="aa",
        members=(
            ClassifiedMember("doc (1).pdf", "bb", False),
            ClassifiedMember("doc (2).pdf", "aa", True),
            ClassifiedMember("doc (3).pdf", "cc", False),
        ),
    )
    decision = ReplaceOriginal(
        original="doc.pdf",
        exact=("doc (2).pdf",),
        discarded=("doc (1).pdf",),
        survivor="doc (3).pdf",
    )

    text = render_text(classification, decision)

    assert text == "\n".join([
        f"# {RULE} doc.pdf aa",
        "# doc (1).pdf bb",
        "# doc (2).pdf aa",
        'rm "doc (2).pdf" # doc.pdf',
        "# doc (3).pdf cc",
        'rm "doc.pdf"',
        'rm "doc (1).pdf"',
        'mv "doc (3).pdf" "doc.pdf"',
    ])


def test_empty_family_renders_nothing() -> None:
    classification = Classification(original="doc.pdf", digest="aa", members=())

    assert render(classification, NoAction()) == []
    assert render_text(classification, NoAction()) == ""
