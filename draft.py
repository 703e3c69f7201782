"""
Draft documents: the read-only snapshot of a blog post that gets scored.
"""

import json
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

# Stored blog-post rows and frontmatter headers use a few other names
FIELD_ALIASES = {
    "seo_title": "meta_title",
    "seo_description": "meta_description",
    "description": "meta_description",
    "keyword": "primary_keyword",
    "featured_image": "featured_image_url",
    "body": "content",
}


@dataclass(frozen=True)
class DraftDocument:
    title: str = ""
    content: str = ""
    excerpt: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    primary_keyword: Optional[str] = None
    featured_image_url: Optional[str] = None

    @classmethod
    def from_record(cls, record: Mapping) -> "DraftDocument":
        """Build a draft from a blog-post row or a frontmatter mapping.

        Canonical field names win over their aliases when both are present.
        Unknown keys are ignored. None and booleans (YAML `featured_image: false`)
        stay absent, so the checks that need them fail.
        """
        fields = {}
        for key, value in record.items():
            name = FIELD_ALIASES.get(key, key)
            if name not in _FIELD_NAMES or value is None or isinstance(value, bool):
                continue
            if name in fields and key != name:
                continue
            fields[name] = value if isinstance(value, str) else str(value)
        return cls(**fields)


_FIELD_NAMES = set(DraftDocument.__dataclass_fields__)


def parse_frontmatter(text: str) -> tuple[dict, str]:
    frontmatter = {}
    body = text
    fm_match = re.match(r'^---\s*\n(.*?)\n---\s*\n(.*)$', text, re.DOTALL)
    if fm_match:
        try:
            frontmatter = yaml.safe_load(fm_match.group(1)) or {}
        except yaml.YAMLError as exc:
            logger.debug("Ignoring malformed frontmatter: %s", exc)
            frontmatter = {}
        if not isinstance(frontmatter, dict):
            frontmatter = {}
        body = fm_match.group(2)
    return frontmatter, body


def load_draft(path) -> DraftDocument:
    """Load a draft from a .json record or a markdown file with YAML frontmatter."""
    path = Path(path)
    text = path.read_text(encoding="utf-8-sig")

    if path.suffix.lower() == ".json":
        record = json.loads(text)
        if not isinstance(record, dict):
            raise ValueError(f"{path}: expected a JSON object, got {type(record).__name__}")
        return DraftDocument.from_record(record)

    frontmatter, body = parse_frontmatter(text)
    frontmatter = {k: v for k, v in frontmatter.items() if FIELD_ALIASES.get(k, k) != "content"}
    frontmatter["content"] = body
    logger.debug("Loaded %s with frontmatter keys: %s", path, ", ".join(sorted(map(str, frontmatter))))
    return DraftDocument.from_record(frontmatter)
