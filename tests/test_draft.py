import json

import pytest

from draft import DraftDocument, load_draft, parse_frontmatter


def test_from_record_accepts_storage_aliases() -> None:
    draft = DraftDocument.from_record({
        "title": "Hello",
        "content": "Body",
        "seo_title": "Hello | Blog",
        "seo_description": "A description",
        "primary_keyword": "hello",
        "featured_image_url": "https://example.com/a.png",
        "status": "draft",
    })

    assert draft.meta_title == "Hello | Blog"
    assert draft.meta_description == "A description"
    assert draft.featured_image_url == "https://example.com/a.png"


def test_canonical_name_wins_over_alias() -> None:
    assert DraftDocument.from_record(
        {"description": "alias", "meta_description": "canonical"}
    ).meta_description == "canonical"
    assert DraftDocument.from_record(
        {"meta_description": "canonical", "description": "alias"}
    ).meta_description == "canonical"


def test_from_record_coerces_and_skips_none() -> None:
    draft = DraftDocument.from_record({"title": 2026, "excerpt": None, "keyword": "kw"})

    assert draft.title == "2026"
    assert draft.excerpt is None
    assert draft.primary_keyword == "kw"
    assert draft.content == ""


def test_parse_frontmatter() -> None:
    fm, body = parse_frontmatter("---\ntitle: Hi\nkeyword: greet\n---\nBody text\n")

    assert fm == {"title": "Hi", "keyword": "greet"}
    assert body == "Body text\n"


@pytest.mark.parametrize("text", [
    "---\ntitle: [unclosed\n---\nBody\n",
    "---\n- just\n- a list\n---\nBody\n",
])
def test_bad_frontmatter_degrades_to_empty(text) -> None:
    fm, body = parse_frontmatter(text)

    assert fm == {}
    assert body == "Body\n"


def test_no_frontmatter_keeps_whole_text() -> None:
    assert parse_frontmatter("Just a body") == ({}, "Just a body")


def test_load_markdown_draft(tmp_path) -> None:
    path = tmp_path / "post.md"
    path.write_text(
        "---\n"
        "title: Write Engaging Blog Posts Today\n"
        "description: Learn to write engaging blog posts.\n"
        "keyword: write engaging blog posts\n"
        "featured_image: /img/post.png\n"
        "content: ignored\n"
        "---\n"
        "## Intro\n\nwrite engaging blog posts every day\n",
        encoding="utf-8",
    )

    draft = load_draft(path)

    assert draft.title == "Write Engaging Blog Posts Today"
    assert draft.meta_description == "Learn to write engaging blog posts."
    assert draft.primary_keyword == "write engaging blog posts"
    assert draft.featured_image_url == "/img/post.png"
    assert draft.content.startswith("## Intro")


def test_load_json_draft(tmp_path) -> None:
    path = tmp_path / "post.json"
    path.write_text(json.dumps({"title": "T", "content": "C", "seo_description": "D"}))

    assert load_draft(path) == DraftDocument(title="T", content="C", meta_description="D")


def test_load_json_non_object_raises(tmp_path) -> None:
    path = tmp_path / "post.json"
    path.write_text("[1, 2]")

    with pytest.raises(ValueError):
        load_draft(path)


def test_load_missing_file_raises(tmp_path) -> None:
    with pytest.raises(OSError):
        load_draft(tmp_path / "missing.md")


def test_false_image_stays_absent(tmp_path) -> None:
    path = tmp_path / "post.md"
    path.write_text(
        "---\ntitle: No image here\nkeyword: image\nfeatured_image: false\n---\nBody\n",
        encoding="utf-8",
    )

    draft = load_draft(path)

    assert draft.featured_image_url is None


def test_boolean_values_are_skipped() -> None:
    draft = DraftDocument.from_record({"featured_image_url": True, "meta_description": False})

    assert draft.featured_image_url is None
    assert draft.meta_description is None


def test_load_markdown_with_byte_order_mark(tmp_path) -> None:
    path = tmp_path / "post.md"
    path.write_text("\ufeff---\ntitle: Hello\nkeyword: greet\n---\nBody\n", encoding="utf-8")

    draft = load_draft(path)

    assert draft.title == "Hello"
    assert draft.primary_keyword == "greet"
    assert draft.content == "Body\n"
