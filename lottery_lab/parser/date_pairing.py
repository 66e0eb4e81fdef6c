"""Date/number-set pairing strategy for spreadsheet-style exports.

Dates (MM/DD/YYYY) and number groups are found in two independent scans,
then each date is paired with the first number group after it::

    01/02/2024   05 12 23 35 48 16
    01/05/2024   03 09 41 52 66 24
"""

import re

from loguru import logger

from lottery_lab.errors import FailureKind, ParseFailure
from lottery_lab.parser.base import BaseParser
from lottery_lab.parser.extraction import SLASH_DATE, normalize_date
from lottery_lab.parser.finalizer import finalize_split
from lottery_lab.schemas.lottery import MAIN_COUNT, Drawing

_NUMBER = r"(?<![\w/])\d{1,2}(?![\w/])"

# five or six 1-2 digit numbers separated by spaces, commas or dashes
NUMBER_SET = re.compile(rf"{_NUMBER}(?:[\s,\-]+{_NUMBER}){{4,5}}")
NUMBER = re.compile(_NUMBER)


class DatePairingParser(BaseParser):

    def parse_results(
        self, text: str, source_id: str | None = None
    ) -> list[Drawing | ParseFailure]:
        profile = self.profile
        dates = list(SLASH_DATE.finditer(text))
        number_sets = list(NUMBER_SET.finditer(text))

        if len(dates) != len(number_sets):
            return [ParseFailure(
                kind=FailureKind.PAIRING_MISMATCH,
                detail=f"{len(dates)} dates but {len(number_sets)} number sets",
            )]

        results: list[Drawing | ParseFailure] = []
        for date_match in dates:
            number_set = next(
                (s for s in number_sets if s.start() >= date_match.end()), None
            )
            if number_set is None:
                logger.debug(
                    "[{}] no number set after date {}", self.game_type, date_match.group(0)
                )
                results.append(ParseFailure(
                    kind=FailureKind.INSUFFICIENT_NUMBERS,
                    detail=f"no number set follows {date_match.group(0)}",
                ))
                continue

            date = normalize_date(date_match.group(0))
            if date is None:
                results.append(ParseFailure(
                    kind=FailureKind.INVALID_DATE,
                    detail=f"unparseable date {date_match.group(0)!r}",
                ))
                continue

            numbers = [int(n) for n in NUMBER.findall(number_set.group(0))]
            special = numbers[MAIN_COUNT] if len(numbers) > MAIN_COUNT else None
            result = finalize_split(
                date, numbers[:MAIN_COUNT], special, profile, source_id=source_id
            )
            if isinstance(result, ParseFailure):
                result.block = f"{date_match.group(0)} {number_set.group(0)}"
            results.append(result)

        return results
