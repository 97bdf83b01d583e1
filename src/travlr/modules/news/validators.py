"""Business rules for news articles."""


def validate_summary(summary: str, content: str) -> list[dict[str, str]]:
    """The summary must be an excerpt, not a copy of the content."""
    if summary and content and summary.strip() == content.strip():
        return [
            {
                "field": "summary",
                "message": "Summary should be a brief excerpt, not the full content",
            }
        ]
    return []
