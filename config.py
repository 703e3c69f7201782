"""
Configuration for the blog draft SEO scorer
"""

SCORING = {
    "title": {
        "points": {
            "present": 25,
            "keyword": 25,
            "keyword_leads": 25,
            "length": 25,
        },
        "length_min": 30,
        "length_max": 60,
    },
    "meta_description": {
        # 33/33/34 so the section still tops out at 100
        "points": {
            "present": 33,
            "keyword": 33,
            "length": 34,
        },
        "length_min": 120,
        "length_max": 160,
    },
    "content": {
        "points_per_check": 10,
        "min_words": 1000,
        "intro_chars": 200,
        "density_min": 0.5,
        "density_max": 2.5,
    },
    "ai_discoverability": {
        "points": {
            "h2": 1,
            "table_of_contents": 1,
            "structured_content": 1,
            "word_count": 1,
        },
        "min_words": 1000,
        "h2_markers": ["<h2", "## "],
        "toc_phrase": "table of contents",
        "structured_markers": ["<li>", "<table"],
        "display_multiplier": 20,
    },
}

SCORE_BANDS = [
    (80, "excellent", "Excellent! Your content passed all important SEO checks."),
    (70, "good", "Great job! You're doing well."),
    (50, "fair", "Keep optimizing to improve your SEO score."),
    (0, "poor", "Keep optimizing to improve your SEO score."),
]

AI_FEEDBACK = {
    "perfect": "Excellent! You're optimized for AI visibility.",
    "default": "Keep optimizing to improve your AI visibility score.",
}

KEYWORD_PLACEHOLDER = "write engaging blog posts"

OUTPUT = {
    "dir": "output",
    "json_indent": 2,
}
