import logging
import re
from datetime import datetime
from typing import Optional

logger = logging.getLogger(__name__)

DISPLAY_FORMAT = "%c"

# fromisoformat before 3.11 only takes 3 or 6 fractional digits
FRACTION_PATTERN = re.compile(r"\.(\d+)")


def _normalize_fraction(match: "re.Match[str]") -> str:
    return "." + match.group(1)[:6].ljust(6, "0")


def format_date(raw: Optional[str], fallback: str, context: str = "") -> str:
    """Format an ISO-8601 timestamp for display, or return fallback if it won't parse"""
    if not isinstance(raw, str) or not raw.strip():
        logger.warning(f"Invalid date in {context or 'unknown context'}: {raw!r}")
        return fallback

    try:
        text = raw.strip().replace("Z", "+00:00")
        text = FRACTION_PATTERN.sub(_normalize_fraction, text, count=1)
        parsed = datetime.fromisoformat(text)
        return parsed.astimezone().strftime(DISPLAY_FORMAT)
    except (ValueError, OverflowError, OSError) as e:
        logger.warning(
            f"Invalid date in {context or 'unknown context'}: {raw!r} ({e})"
        )
        return fallback
