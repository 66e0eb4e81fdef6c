from lottery_lab.errors import FailureKind
from lottery_lab.parser.line_accumulation import split_blocks
from lottery_lab.parser.parsers.cash4life_parser import Cash4LifeParser
from lottery_lab.parser.parsers.mega_millions_parser import MegaMillionsParser
from lottery_lab.parser.parsers.powerball_parser import PowerballParser
from lottery_lab.services.lottery_service import get_parser

POWERBALL_PAGE = """
Mon, Jan 1, 2024
05 12 23 35 48
Powerball 16
Power Play 2x

Wed, Jan 3, 2024
01 02 03 04 05
PB 06
"""

MEGA_MILLIONS_EXPORT = """Date\tNumbers\tMega Ball
01/02/2024\t05 12 23 35 48\t16\t3x
01/05/2024\t03 09 41 52 66\t24
"""


def test_single_line_drawing_uses_last_number_as_special():
    report = PowerballParser().parse("Mon, Jan 1, 2024 05 12 23 35 48 16")
    assert report.found == 1
    drawing = report.drawings[0]
    assert drawing.date == "2024-01-01"
    assert drawing.main_numbers == [5, 12, 23, 35, 48]
    assert drawing.special == 16


def test_split_blocks_starts_new_block_at_each_header():
    blocks = split_blocks(POWERBALL_PAGE)
    assert len(blocks) == 2
    assert blocks[0].startswith("Mon, Jan 1, 2024")
    assert blocks[1].startswith("Wed, Jan 3, 2024")


def test_powerball_page_in_input_order():
    report = PowerballParser().parse(POWERBALL_PAGE, source_id="client-1")
    assert [d.date for d in report.drawings] == ["2024-01-01", "2024-01-03"]
    assert report.drawings[0].special == 16
    assert report.drawings[1].main_numbers == [1, 2, 3, 4, 5]
    assert report.drawings[1].special == 6
    assert all(d.source_id == "client-1" for d in report.drawings)
    assert report.failures == []


def test_header_without_date_is_dropped_not_raised():
    report = PowerballParser().parse("Powerball Results\n" + POWERBALL_PAGE)
    assert report.found == 2
    assert [f.kind for f in report.failures] == [FailureKind.INVALID_DATE]


def test_concatenated_digits_are_repaired():
    report = PowerballParser().parse("Sat, Jan 6, 2024\n111929636825")
    assert report.drawings[0].main_numbers == [11, 19, 29, 63, 68]
    assert report.drawings[0].special == 25


def test_short_block_reports_insufficient_numbers():
    report = PowerballParser().parse("Sat, Jan 6, 2024\n11 19 29")
    assert report.found == 0
    assert report.failures[0].kind == FailureKind.INSUFFICIENT_NUMBERS


def test_cash4life_block_with_prize_text():
    text = "Thu, Jan 4, 2024\n07 18 27 39 52 CB 3\nTop prize $1,000 Per day for life"
    report = Cash4LifeParser().parse(text)
    assert report.found == 1
    assert report.drawings[0].main_numbers == [7, 18, 27, 39, 52]
    assert report.drawings[0].special == 3


def test_mega_millions_pairs_dates_with_following_number_sets():
    report = MegaMillionsParser().parse(MEGA_MILLIONS_EXPORT)
    assert [d.date for d in report.drawings] == ["2024-01-02", "2024-01-05"]
    assert report.drawings[0].main_numbers == [5, 12, 23, 35, 48]
    assert report.drawings[0].special == 16
    assert report.drawings[1].main_numbers == [3, 9, 41, 52, 66]
    assert report.drawings[1].special == 24


def test_mega_millions_count_mismatch_rejects_everything():
    report = MegaMillionsParser().parse("01/02/2024 05 12 23 35 48 16\n01/05/2024")
    assert report.drawings == []
    assert len(report.failures) == 1
    assert report.failures[0].kind == FailureKind.PAIRING_MISMATCH


def test_mega_millions_special_out_of_range_is_dropped():
    report = MegaMillionsParser().parse("01/02/2024 05 12 23 35 48 26")
    assert report.found == 0
    assert report.failures[0].kind == FailureKind.RANGE_VALIDATION_FAILED


def test_empty_text_yields_empty_report():
    assert PowerballParser().parse("").found == 0
    assert MegaMillionsParser().parse("").found == 0


def test_get_parser_by_game():
    assert isinstance(get_parser("powerball"), PowerballParser)
    assert isinstance(get_parser("mega_millions"), MegaMillionsParser)


def test_mega_ball_may_repeat_a_main_number():
    report = MegaMillionsParser().parse("01/02/2024 05 12 16 35 48 16")
    assert report.found == 1
    assert report.drawings[0].main_numbers == [5, 12, 16, 35, 48]
    assert report.drawings[0].special == 16


def test_mega_millions_set_without_mega_ball():
    report = MegaMillionsParser().parse("01/02/2024 05 12 23 35 48")
    assert report.found == 0
    assert report.failures[0].kind == FailureKind.INSUFFICIENT_NUMBERS


def test_comma_separated_line():
    report = PowerballParser().parse("Mon, Jan 1, 2024 05, 12, 23, 35, 48, 16")
    assert report.found == 1
    assert report.drawings[0].main_numbers == [5, 12, 23, 35, 48]
    assert report.drawings[0].special == 16
