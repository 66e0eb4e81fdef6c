"""Line-accumulation strategy: one drawing per loosely-delimited group of lines.

Result pages list each drawing as a header line (weekday and/or full date)
followed by the balls, often one per line, with promotional text mixed in::

    Mon, Jan 1, 2024
    05 12 23 35 48
    PB 16
    Power Play 2x
"""

from lottery_lab.errors import FailureKind, ParseFailure
from lottery_lab.parser.base import BaseParser
from lottery_lab.parser.extraction import (
    clean_block,
    extract_candidate_numbers,
    find_month_day_year,
    normalize_date,
    starts_new_drawing,
)
from lottery_lab.parser.finalizer import finalize
from lottery_lab.schemas.lottery import Drawing, LotteryProfile


def process_block(
    block: str, profile: LotteryProfile, source_id: str | None = None
) -> Drawing | ParseFailure:
    """Extract the date and numbers of one block and finalize it."""
    cleaned = clean_block(block)

    date_text = find_month_day_year(cleaned)
    date = normalize_date(date_text) if date_text else None
    if date is None:
        return ParseFailure(kind=FailureKind.INVALID_DATE, detail="no parseable date", block=cleaned)

    candidates = extract_candidate_numbers(cleaned, max_value=profile.main.max)
    result = finalize(date, candidates, profile, source_id=source_id)
    if isinstance(result, ParseFailure):
        result.block = cleaned
    return result


def split_blocks(text: str) -> list[str]:
    """Group non-empty lines into blocks, starting a new one at each drawing header."""
    blocks = []
    current: list[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if starts_new_drawing(line) and current:
            blocks.append(" ".join(current))
            current = []
        current.append(line)

    if current:
        blocks.append(" ".join(current))
    return blocks


class LineAccumulationParser(BaseParser):

    def parse_results(
        self, text: str, source_id: str | None = None
    ) -> list[Drawing | ParseFailure]:
        profile = self.profile
        return [process_block(block, profile, source_id) for block in split_blocks(text)]
