"""Parser for Cash4Life result pages (main 1-60, Cash Ball 1-4)."""

from lottery_lab.parser.line_accumulation import LineAccumulationParser


class Cash4LifeParser(LineAccumulationParser):
    """Pasted Cash4Life results, e.g.::

        Thu, Jan 4, 2024
        07 18 27 39 52 CB 3
        Top prize $1,000 Per day for life
    """

    game_type = "cash4life"
