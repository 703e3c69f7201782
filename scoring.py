"""
SEO Scoring Engine for blog draft evaluation.

Every check is evaluated once into a Check record; section scores are the sum
of the points of passed checks, so the numbers and the checklist shown to the
author always agree.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from config import AI_FEEDBACK, KEYWORD_PLACEHOLDER, SCORE_BANDS, SCORING
from draft import DraftDocument

logger = logging.getLogger(__name__)

_NON_SLUG_CHARS = re.compile(r'[^a-z0-9]+')
_WHITESPACE_RUN = re.compile(r'\s+')
_LIST_LINE = re.compile(r'^[ \t]*[-*] ', re.MULTILINE)

SECTION_NAMES = {
    "title": "Page Title",
    "meta_description": "Meta Description",
    "content": "Content",
    "ai_discoverability": "AI Discoverability",
}


@dataclass(frozen=True)
class Check:
    id: str
    section: str
    label: str
    passed: bool
    points: int
    proxy: bool = False

    @property
    def earned(self) -> int:
        return self.points if self.passed else 0

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "label": self.label,
            "passed": self.passed,
            "points": self.points,
            "proxy": self.proxy,
        }


@dataclass(frozen=True)
class ScoreBand:
    name: str
    feedback: str


@dataclass(frozen=True)
class SectionScore:
    section: str
    score: int
    max_score: int
    percentage: float
    checks: tuple[Check, ...] = field(default_factory=tuple)

    @property
    def name(self) -> str:
        return SECTION_NAMES.get(self.section, self.section)

    @property
    def failing(self) -> list[Check]:
        return [c for c in self.checks if not c.passed]

    def to_dict(self) -> dict:
        return {
            "section": self.section,
            "name": self.name,
            "score": self.score,
            "max_score": self.max_score,
            "percentage": round(self.percentage, 1),
            "band": grade(self.percentage).name,
            "checks": [c.to_dict() for c in self.checks],
        }


@dataclass(frozen=True)
class ScoreReport:
    title_score: int
    meta_description_score: int
    content_score: int
    ai_discoverability_score: int
    overall_score: int
    sections: tuple[SectionScore, ...] = field(default_factory=tuple)
    slug: str = ""
    word_count: int = 0
    keyword_density: float = 0.0

    @property
    def checklist(self) -> tuple[Check, ...]:
        return tuple(c for s in self.sections for c in s.checks)

    @property
    def ai_discoverability_percentage(self) -> int:
        return self.ai_discoverability_score * SCORING["ai_discoverability"]["display_multiplier"]

    @property
    def overall_band(self) -> ScoreBand:
        return grade(self.overall_score)

    @property
    def feedback(self) -> str:
        return self.overall_band.feedback

    @property
    def ai_feedback(self) -> str:
        ai_max = sum(SCORING["ai_discoverability"]["points"].values())
        if self.ai_discoverability_score >= ai_max:
            return AI_FEEDBACK["perfect"]
        return AI_FEEDBACK["default"]

    def section(self, name: str) -> SectionScore:
        for s in self.sections:
            if s.section == name:
                return s
        raise KeyError(f"Unknown section: {name}")

    def to_dict(self) -> dict:
        return {
            "overall_score": self.overall_score,
            "overall_band": self.overall_band.name,
            "feedback": self.feedback,
            "title_score": self.title_score,
            "meta_description_score": self.meta_description_score,
            "content_score": self.content_score,
            "ai_discoverability_score": self.ai_discoverability_score,
            "ai_discoverability_percentage": self.ai_discoverability_percentage,
            "ai_feedback": self.ai_feedback,
            "slug": self.slug,
            "word_count": self.word_count,
            "keyword_density": round(self.keyword_density, 2),
            "sections": [s.to_dict() for s in self.sections],
        }

    def summary(self) -> str:
        lines = [
            f"═══ SEO SCORE — OVERALL: {self.overall_score}/100 ({self.overall_band.name}) ═══",
            f"  {self.feedback}",
            "",
        ]
        for s in self.sections:
            bar_len = min(20, int(s.percentage / 5))
            bar = "█" * bar_len + "░" * (20 - bar_len)
            lines.append(f"  {s.name:<22} {bar} {s.score}/{s.max_score} ({s.percentage:.0f}%)")
        lines.append("")
        lines.append(f"  Slug: {self.slug or '-'}  |  Words: {self.word_count}  |  Keyword density: {self.keyword_density:.2f}%")
        lines.append("")
        worst = sorted(self.sections, key=lambda x: x.percentage)[:3]
        lines.append("  TOP IMPROVEMENT AREAS:")
        for s in worst:
            if s.failing:
                lines.append(f"    → {s.name}: {s.failing[0].label}")
        return "\n".join(lines)


# ── Text primitives ──────────────────────────────────────────────────


def word_count(text: Optional[str]) -> int:
    if not text:
        return 0
    return len(text.split())


def contains_ci(haystack: Optional[str], needle: Optional[str]) -> bool:
    if not needle:
        return False
    return needle.lower() in (haystack or "").lower()


def starts_with_ci(haystack: Optional[str], needle: Optional[str]) -> bool:
    if not needle:
        return False
    return (haystack or "").lower().find(needle.lower()) == 0


def slugify(title: Optional[str]) -> str:
    slug = _NON_SLUG_CHARS.sub('-', (title or "").lower())
    return slug.strip('-')


def keyword_occurrences(content: Optional[str], keyword: Optional[str]) -> int:
    """Count literal, non-overlapping, case-insensitive keyword matches.

    The keyword is user text, so it is always escaped before it reaches the
    regex engine.
    """
    if not keyword or not content:
        return 0
    return len(re.findall(re.escape(keyword.lower()), content.lower()))


def keyword_density(content: Optional[str], keyword: Optional[str]) -> float:
    """Keyword occurrences as a percentage of the content's word count."""
    total_words = word_count(content)
    if not keyword or total_words == 0:
        return 0.0
    return keyword_occurrences(content, keyword) / total_words * 100


def _shown_keyword(keyword: str) -> str:
    return keyword.lower() if keyword else KEYWORD_PLACEHOLDER


def _tally(section: str, checks: tuple[Check, ...], scale: Optional[int] = None) -> SectionScore:
    score = sum(c.earned for c in checks)
    max_score = sum(c.points for c in checks)
    if scale is not None:
        percentage = float(score * scale)
    else:
        percentage = (score / max_score) * 100 if max_score > 0 else 0.0
    return SectionScore(section=section, score=score, max_score=max_score,
                        percentage=percentage, checks=checks)


# ── Sub-scorers ──────────────────────────────────────────────────────


def score_title(title: Optional[str], keyword: Optional[str]) -> SectionScore:
    cfg = SCORING["title"]
    pts = cfg["points"]
    title = title or ""
    keyword = keyword or ""
    shown = _shown_keyword(keyword)
    length = len(title)

    checks = (
        Check("title.present", "title", "You've entered a Page Title",
              length > 0, pts["present"]),
        Check("title.keyword", "title", f'The Keyword "{shown}" is used in the Page Title',
              contains_ci(title, keyword), pts["keyword"]),
        Check("title.keyword_leads", "title",
              f'The Keyword "{shown}" is used toward the beginning of the Page Title',
              starts_with_ci(title, keyword), pts["keyword_leads"]),
        Check("title.length", "title",
              f"The Page Title is {cfg['length_min']}-{cfg['length_max']} characters long "
              f"({length} of {cfg['length_max']} characters used)",
              cfg["length_min"] <= length <= cfg["length_max"], pts["length"]),
    )
    return _tally("title", checks)


def score_meta_description(meta_description: Optional[str], keyword: Optional[str]) -> SectionScore:
    cfg = SCORING["meta_description"]
    pts = cfg["points"]
    desc = meta_description or ""
    keyword = keyword or ""
    shown = _shown_keyword(keyword)
    length = len(desc)

    checks = (
        Check("meta_description.present", "meta_description", "You've entered a Meta Description",
              length > 0, pts["present"]),
        Check("meta_description.keyword", "meta_description",
              f'The Keyword "{shown}" is used in the Meta Description',
              contains_ci(desc, keyword), pts["keyword"]),
        Check("meta_description.length", "meta_description",
              f"The Meta Description is {cfg['length_min']}-{cfg['length_max']} characters long "
              f"({length} of {cfg['length_max']} characters used)",
              cfg["length_min"] <= length <= cfg["length_max"], pts["length"]),
    )
    return _tally("meta_description", checks)


def score_content(title: Optional[str], content: Optional[str], keyword: Optional[str],
                  featured_image_url: Optional[str]) -> SectionScore:
    cfg = SCORING["content"]
    per_check = cfg["points_per_check"]
    title = title or ""
    content = content or ""
    keyword = keyword or ""
    shown = _shown_keyword(keyword)

    words = word_count(content)
    density = keyword_density(content, keyword)
    occurrences = keyword_occurrences(content, keyword)
    slug_fragment = _WHITESPACE_RUN.sub('-', keyword.lower())
    has_image = bool(featured_image_url)

    checks = (
        Check("content.keyword_in_slug", "content", f'Keyword "{shown}" is used in the Slug',
              bool(keyword) and slug_fragment in slugify(title), per_check),
        Check("content.title_present", "content", "You've added a Post Title (H1)",
              len(title) > 0, per_check),
        Check("content.keyword_in_title", "content", f'Keyword "{shown}" is used in the Post Title (H1)',
              contains_ci(title, keyword), per_check),
        Check("content.present", "content", "You've added text to the post",
              len(content) > 0, per_check),
        Check("content.word_count", "content",
              f"Your text contains at least {cfg['min_words']} words (You have {words} words)",
              words >= cfg["min_words"], per_check),
        Check("content.keyword_in_intro", "content",
              f'The Keyword "{shown}" is used in the first paragraph of the text',
              contains_ci(content[:cfg["intro_chars"]], keyword), per_check),
        Check("content.keyword_density", "content",
              f"Your keyword density is {density:.2f}% (target {cfg['density_min']}-{cfg['density_max']}%), "
              f'the Keyword "{shown}" is used {occurrences} times',
              cfg["density_min"] <= density <= cfg["density_max"], per_check),
        # Proxy: filename is not visible here, an image plus a keyword stands in for it
        Check("content.keyword_in_image_filename", "content",
              f'You\'ve used the Keyword "{shown}" in the file name of an image',
              has_image and bool(keyword), per_check, proxy=True),
        Check("content.image_present", "content", "You've added an image",
              has_image, per_check),
        # Proxy: same condition as the filename check, alt text is not visible either
        Check("content.keyword_in_image_alt", "content",
              f'You\'ve used the Keyword "{shown}" in the Alternate Text (alt tag) of an image',
              has_image and bool(keyword), per_check, proxy=True),
    )
    return _tally("content", checks)


def score_ai_discoverability(content: Optional[str], words: int) -> SectionScore:
    cfg = SCORING["ai_discoverability"]
    pts = cfg["points"]
    content = content or ""

    has_h2 = any(marker in content for marker in cfg["h2_markers"])
    has_toc = cfg["toc_phrase"] in content.lower()
    has_structure = (any(marker in content for marker in cfg["structured_markers"])
                     or _LIST_LINE.search(content) is not None)

    checks = (
        Check("ai_discoverability.h2", "ai_discoverability",
              "You have an H2 and properly nested headings.",
              has_h2, pts["h2"]),
        Check("ai_discoverability.table_of_contents", "ai_discoverability",
              "You have included a Table of Contents.",
              has_toc, pts["table_of_contents"]),
        Check("ai_discoverability.structured_content", "ai_discoverability",
              "You have used structured content (list or table).",
              has_structure, pts["structured_content"]),
        Check("ai_discoverability.word_count", "ai_discoverability",
              f"Your text contains at least {cfg['min_words']} words for AI summaries (You have {words} words)",
              words >= cfg["min_words"], pts["word_count"]),
        # Proxy: FAQ structure is never detected, the entry stays a standing reminder
        Check("ai_discoverability.faq", "ai_discoverability",
              "Add FAQs to help surface your post in AI and voice results.",
              False, 0, proxy=True),
    )
    return _tally("ai_discoverability", checks, scale=cfg["display_multiplier"])


# ── Aggregation ──────────────────────────────────────────────────────


def grade(percentage: float) -> ScoreBand:
    for floor, name, feedback in SCORE_BANDS:
        if percentage >= floor:
            return ScoreBand(name=name, feedback=feedback)
    _, name, feedback = SCORE_BANDS[-1]
    return ScoreBand(name=name, feedback=feedback)


def aggregate(title_score: int, meta_description_score: int, content_score: int) -> int:
    # A sum of integers over 3 never ends in .5, so round() needs no tie rule
    return round((title_score + meta_description_score + content_score) / 3)


def compute_score_report(draft: DraftDocument) -> ScoreReport:
    words = word_count(draft.content)
    title = score_title(draft.title, draft.primary_keyword)
    meta = score_meta_description(draft.meta_description, draft.primary_keyword)
    content = score_content(draft.title, draft.content, draft.primary_keyword, draft.featured_image_url)
    ai = score_ai_discoverability(draft.content, words)

    report = ScoreReport(
        title_score=title.score,
        meta_description_score=meta.score,
        content_score=content.score,
        ai_discoverability_score=ai.score,
        overall_score=aggregate(title.score, meta.score, content.score),
        sections=(title, meta, content, ai),
        slug=slugify(draft.title),
        word_count=words,
        keyword_density=keyword_density(draft.content, draft.primary_keyword),
    )
    logger.debug(
        "Scored draft %r: title=%d meta=%d content=%d ai=%d overall=%d",
        report.slug, report.title_score, report.meta_description_score,
        report.content_score, report.ai_discoverability_score, report.overall_score,
    )
    return report
