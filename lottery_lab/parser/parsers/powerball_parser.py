"""Parser for Powerball result pages (main 1-69, Powerball 1-26)."""

from lottery_lab.parser.line_accumulation import LineAccumulationParser


class PowerballParser(LineAccumulationParser):
    """Pasted Powerball results, e.g.::

        Sat, Jan 6, 2024
        11 19 29 63 68
        Powerball 25
        Power Play 2x
    """

    game_type = "powerball"
