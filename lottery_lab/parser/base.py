"""Base parser abstract class."""

from abc import ABC, abstractmethod

from loguru import logger

from lottery_lab.errors import ParseFailure
from lottery_lab.games import get_profile
from lottery_lab.schemas.lottery import Drawing, LotteryProfile, ParseReport


class BaseParser(ABC):
    """Abstract base for all pasted-text parsers."""

    game_type: str = ""

    @property
    def profile(self) -> LotteryProfile:
        return get_profile(self.game_type)

    @abstractmethod
    def parse_results(
        self, text: str, source_id: str | None = None
    ) -> list[Drawing | ParseFailure]:
        """Split the text into drawings, one result per block, in input order."""
        ...

    def parse(self, text: str, source_id: str | None = None) -> ParseReport:
        """Parse pasted text, keeping the drawings and collecting dropped blocks."""
        report = ParseReport(game_type=self.game_type)
        for result in self.parse_results(text, source_id):
            if isinstance(result, Drawing):
                report.drawings.append(result)
            else:
                logger.debug("[{}] block dropped: {} {}", self.game_type, result.kind.value, result.detail)
                report.failures.append(result)

        if report.drawings:
            logger.info(
                "[{}] parse completed: {} drawings found, {} blocks dropped",
                self.game_type, report.found, len(report.failures),
            )
        else:
            logger.warning("[{}] no drawings found in pasted text", self.game_type)
        return report
