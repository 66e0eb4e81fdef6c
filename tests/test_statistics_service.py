from conftest import make_drawing

from lottery_lab.services import statistics_service as stats


def test_frequency_preseeds_full_range():
    assert stats.frequency([1, 1, 2], 3) == {1: 2, 2: 1, 3: 0}


def test_frequency_ignores_out_of_range():
    assert stats.frequency([0, 4, 1, -2], 3) == {1: 1, 2: 0, 3: 0}


def test_pair_frequency_single_drawing():
    pairs = stats.pair_frequency([make_drawing([5, 4, 3, 2, 1], 1)])
    assert len(pairs) == 10
    assert set(pairs.values()) == {1}
    assert "1-2" in pairs and "4-5" in pairs


def test_pair_frequency_accumulates():
    history = [make_drawing([1, 2, 3, 4, 5], 1), make_drawing([1, 2, 10, 20, 30], 1)]
    pairs = stats.pair_frequency(history)
    assert pairs["1-2"] == 2
    assert pairs["3-4"] == 1


def test_rank_numbers_breaks_ties_ascending():
    assert stats.rank_numbers({1: 0, 2: 0, 3: 5}, "desc", 2) == [3, 1]
    assert stats.rank_numbers({1: 4, 2: 0, 3: 0}, "asc", 2) == [2, 3]
    assert stats.rank_numbers({1: 1, 2: 2}, "desc") == [2, 1]


def test_top_pairs():
    pair_freq = {"3-4": 2, "1-2": 2, "5-9": 1}
    assert stats.top_pairs(pair_freq, 2) == [[1, 2], [3, 4]]


def test_odd_even_distribution():
    history = [make_drawing([1, 3, 5, 2, 4], 1), make_drawing([2, 4, 6, 8, 10], 1)]
    dist = stats.odd_even_distribution(history)
    assert list(dist) == ["0-5", "1-4", "2-3", "3-2", "4-1", "5-0"]
    assert dist["3-2"] == 1
    assert dist["0-5"] == 1
    assert sum(dist.values()) == 2


def test_consecutive_run_distribution():
    history = [
        make_drawing([1, 2, 3, 10, 20], 1),
        make_drawing([1, 2, 3, 4, 20], 1),
        make_drawing([1, 3, 5, 7, 9], 1),
    ]
    assert stats.consecutive_run_distribution(history) == {"0": 1, "1": 0, "2": 1, "3+": 1}


def test_sum_range_distribution():
    history = [
        make_drawing([1, 2, 3, 4, 5], 1),
        make_drawing([10, 20, 30, 40, 50], 1),
        make_drawing([11, 21, 31, 41, 51], 1),
    ]
    assert stats.sum_range_distribution(history) == {0: 1, 150: 2}


def test_repeat_with_previous_distribution():
    history = [
        make_drawing([1, 2, 3, 4, 5], 1),
        make_drawing([1, 2, 3, 40, 50], 1),
        make_drawing([7, 8, 9, 10, 11], 1),
    ]
    assert stats.repeat_with_previous_distribution(history) == {"0": 1, "1": 0, "2": 0, "3+": 1}


def test_decade_distribution(powerball):
    dist = stats.decade_distribution([make_drawing([1, 10, 25, 30, 69], 1)], powerball)
    assert list(dist) == [0, 1, 2, 3, 4, 5, 6]
    assert dist == {0: 1, 1: 1, 2: 1, 3: 1, 4: 0, 5: 0, 6: 1}


def test_most_common_key_prefers_latest_on_tie():
    assert stats.most_common_key({"a": 1, "b": 3, "c": 3}) == "c"
    assert stats.most_common_key({"a": 4, "b": 3, "c": 3}) == "a"
    assert stats.most_common_key({}) is None


def test_hot_cold(steady_history, powerball):
    analysis = stats.get_hot_cold(steady_history, powerball, limit=5)
    assert analysis.hot_numbers == [1, 2, 3, 4, 5]
    assert analysis.cold_numbers == [6, 7, 8, 9, 10]
    assert analysis.hot_special == 7
    assert analysis.total_draws == 10


def test_hot_cold_empty_history(powerball):
    analysis = stats.get_hot_cold([], powerball)
    assert analysis.hot_special is None
    assert analysis.total_draws == 0


def test_get_frequency_percentages(steady_history, powerball):
    freq = stats.get_frequency(steady_history, powerball)
    assert len(freq) == 69
    assert freq[0].number == 1 and freq[0].count == 10 and freq[0].percentage == 100.0
    assert freq[-1].count == 0


def test_get_pairs(steady_history):
    pairs = stats.get_pairs(steady_history, top_n=3)
    assert [p.pair for p in pairs] == [[1, 2], [1, 3], [1, 4]]
    assert pairs[0].count == 10


def test_get_patterns(steady_history, powerball):
    report = stats.get_patterns(steady_history, powerball)
    assert report.total_draws == 10
    assert report.odd_even["3-2"] == 10
    assert report.consecutive["3+"] == 10
    assert report.sum_ranges == {0: 10}
    assert report.repeat_with_previous["3+"] == 9


def test_odd_even_target_tie_goes_to_later_bucket():
    history = [make_drawing([1, 3, 2, 4, 6], 1)] * 5 + [make_drawing([1, 3, 5, 2, 4], 1)] * 5
    assert stats.most_common_key(stats.odd_even_distribution(history)) == "3-2"
