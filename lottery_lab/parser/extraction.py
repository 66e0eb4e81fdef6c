"""Text utilities: noise stripping, date detection, number tokenization."""

import re

from dateutil import parser as dtp

# Promotional / label noise found in pasted result pages
NOISE_PATTERNS = [
    re.compile(r"(?:Power|Cash|Mega)\s*Play\s*\d*x?", re.IGNORECASE),
    re.compile(r"Megaplier:?\s*\d*x?", re.IGNORECASE),
    re.compile(
        r"Top prize\s*\$?\d{1,3}(?:,\d{3})*"
        r"(?:\s*Per\s*(?:day|week|month|year)\s*for\s*life)?",
        re.IGNORECASE,
    ),
    re.compile(r"(?:Est(?:imated)?\.?\s*)?Jackpot:?", re.IGNORECASE),
    re.compile(r"\$\s*\d[\d,.]*(?:\s*(?:Million|Billion)\b)?", re.IGNORECASE),
    re.compile(r"Ad ends in\s*\d+", re.IGNORECASE),
    re.compile(r"\b(?:PB|CB|MB|Power\s*Ball|Cash\s*Ball|Mega\s*Ball):?", re.IGNORECASE),
]

WHITESPACE = re.compile(r"\s+")

# "January 5, 2024" / "Jan 5, 2024"
MONTH_DAY_YEAR = re.compile(r"([A-Za-z]+)\.?\s*(\d{1,2}),\s*(\d{4})")

# "01/05/2024"
SLASH_DATE = re.compile(r"(?<![\d/])(\d{1,2})/(\d{1,2})/(\d{4})(?![\d/])")

# "Mon," / "Monday," at the start of a line
WEEKDAY_PREFIX = re.compile(r"^(?:Mon|Tue|Wed|Thu|Fri|Sat|Sun)[a-z]*\.?,", re.IGNORECASE)

INTEGER_TOKEN = re.compile(r"\d+")
CONCATENATED_RUN = re.compile(r"\d{7,}")


def clean_block(text: str) -> str:
    """Strip known noise phrases and collapse whitespace."""
    for pattern in NOISE_PATTERNS:
        text = pattern.sub(" ", text)
    return WHITESPACE.sub(" ", text).strip()


def normalize_date(text: str) -> str | None:
    """Parse a free-form date and format it as YYYY-MM-DD.

    Returns None when the text is not a date.
    """
    try:
        parsed = dtp.parse(text)
    except (ValueError, OverflowError):
        return None
    return f"{parsed.year:04d}-{parsed.month:02d}-{parsed.day:02d}"


def find_month_day_year(text: str) -> str | None:
    """Return the first "Month Day, Year" date string found in the text."""
    match = MONTH_DAY_YEAR.search(text)
    if not match:
        return None
    return f"{match.group(1)} {match.group(2)}, {match.group(3)}"


def starts_new_drawing(line: str) -> bool:
    """A line opens a new drawing if it leads with a weekday or carries a full date."""
    return bool(WEEKDAY_PREFIX.match(line) or MONTH_DAY_YEAR.search(line))


def split_digit_run(token: str, max_value: int | None = None) -> list[int]:
    """Split a run of concatenated digits into 2-digit groups, left to right."""
    numbers = []
    for i in range(0, len(token), 2):
        value = int(token[i:i + 2])
        if value >= 1 and (max_value is None or value <= max_value):
            numbers.append(value)
    return numbers


def extract_candidate_numbers(block: str, max_value: int | None = None) -> list[int]:
    """Tokenize a block into candidate integers, in order.

    Runs of 7+ digits are scraped numbers glued together and are split
    into 2-digit groups, optionally bounded by ``max_value``.
    Duplicates are kept; the finalizer deduplicates. The first
    "Month Day, Year" date is not a candidate, and trailing punctuation
    is stripped from the remaining tokens.
    """
    text = MONTH_DAY_YEAR.sub(" ", clean_block(block), count=1)
    numbers: list[int] = []
    for token in text.split():
        token = token.rstrip(",;.")
        if CONCATENATED_RUN.fullmatch(token):
            numbers.extend(split_digit_run(token, max_value))
        elif INTEGER_TOKEN.fullmatch(token):
            value = int(token)
            if value >= 1:
                numbers.append(value)
    return numbers
