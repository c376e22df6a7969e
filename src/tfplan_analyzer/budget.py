"""Size check for reports posted to length-limited targets such as PR comments."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

GITHUB_COMMENT_LIMIT = 65536


@dataclass(frozen=True, slots=True)
class LimitCheck:
    """Outcome of measuring a rendered report against a character limit."""

    length: int
    limit: int

    @property
    def exceeded(self) -> bool:
        return self.length > self.limit


def check_limit(rendered: str, limit: int = GITHUB_COMMENT_LIMIT) -> LimitCheck:
    """Measure ``rendered``. The text itself is never altered."""

    check = LimitCheck(length=len(rendered), limit=limit)
    if check.exceeded:
        logger.warning("Rendered report has %d characters, limit is %d", check.length, limit)
    return check


def format_limit_warning(check: LimitCheck) -> str:
    """Return the advisory block shown next to an oversized report, or ``""``."""

    if not check.exceeded:
        return ""
    return "\n".join(
        [
            "⚠️  Warning: Output exceeds GitHub comment limit!",
            f"   Character count: {check.length} / {check.limit}",
            "   Consider using --short mode or reducing the scope of changes.",
        ]
    )
