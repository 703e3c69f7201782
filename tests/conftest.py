"""
Shared fixtures for the scorer test suite.
"""

import pytest

from draft import DraftDocument

KEYWORD = "write engaging blog posts"
TITLE = "Write Engaging Blog Posts Today"
IMAGE_URL = "https://cdn.example.com/images/write-engaging-blog-posts.png"


def make_body(blocks: int = 12, filler_per_block: int = 96, prefix: str = "") -> str:
    """Keyword once per block followed by filler, so density is 1 / (4 + filler) per block."""
    block = " ".join([KEYWORD] + ["lorem"] * filler_per_block)
    return prefix + "\n\n".join([block] * blocks)


def make_meta_description(length: int = 140) -> str:
    text = ("Learn how to " + KEYWORD + " that keep readers scrolling, sharing and "
            "coming back for more of your best writing every single week of the year.")
    return text[:length]


@pytest.fixture
def keyword():
    return KEYWORD


@pytest.fixture
def body_1200():
    return make_body()


@pytest.fixture
def empty_draft():
    return DraftDocument(title="", content="")


@pytest.fixture
def perfect_draft():
    return DraftDocument(
        title=TITLE,
        content=make_body(prefix="## Table of Contents\n\n- Intro\n- Tips\n\n"),
        excerpt="How to write posts people finish.",
        meta_title=TITLE,
        meta_description=make_meta_description(),
        primary_keyword=KEYWORD,
        featured_image_url=IMAGE_URL,
    )
