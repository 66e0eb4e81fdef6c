"""Descriptive comparison of generated combinations against real drawings."""

from collections.abc import Iterable
from typing import Any

from lottery_lab.schemas.generator import AccuracyMetrics, GeneratedCombination
from lottery_lab.services.history_service import normalize_history


def evaluate_prediction_accuracy(
    predictions: list[GeneratedCombination],
    actual_drawings: Iterable[Any],
) -> AccuracyMetrics:
    """Match predictions to actual drawings by date and count hits.

    Predictions without a drawing on their date still count toward
    ``total_predictions`` and the averages' denominator.
    """
    actual_by_date = {}
    for drawing in normalize_history(actual_drawings):
        if drawing.date is not None:
            actual_by_date.setdefault(drawing.date, drawing)

    main_matches: list[int] = []
    special_matches = 0
    exact_matches = 0

    for prediction in predictions:
        actual = actual_by_date.get(prediction.date)
        if actual is None:
            continue

        hits = len(set(prediction.main_numbers) & set(actual.main_numbers))
        main_matches.append(hits)
        special_hit = prediction.special == actual.special
        if special_hit:
            special_matches += 1
        if hits == len(prediction.main_numbers) and special_hit:
            exact_matches += 1

    total = len(predictions)
    return AccuracyMetrics(
        total_predictions=total,
        exact_matches=exact_matches,
        main_number_matches=main_matches,
        special_number_matches=special_matches,
        average_main_matches=sum(main_matches) / total if total else 0.0,
        average_special_matches=special_matches / total if total else 0.0,
    )
