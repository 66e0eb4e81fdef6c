"""Parser for Mega Millions spreadsheet exports (main 1-70, Mega Ball 1-24/25)."""

from lottery_lab.parser.date_pairing import DatePairingParser


class MegaMillionsParser(DatePairingParser):
    """Pasted Mega Millions rows, e.g.::

        01/02/2024  05 12 23 35 48  16  3x
    """

    game_type = "mega_millions"
