import pytest

from carnavalito.core.meter import (
    FREE_METER,
    analyze_metrics,
    classify_meter,
    match_carnival_forms,
)
from carnavalito.core.verses import build_verses, segment_verses


@pytest.mark.parametrize(
    "count, name",
    [
        (6, "Hexasyllabic"),
        (7, "Heptasyllabic"),
        (8, "Octosyllabic"),
        (9, "Eneasyllabic"),
        (11, "Hendecasyllabic"),
        (10, "10 syllables"),
        (5, "5 syllables"),
    ],
)
def test_uniform_counts_are_named(count, name):
    result = classify_meter([count] * 4)

    assert result.pattern == name
    assert result.mean_syllables == float(count)
    assert result.variation == 0
    assert result.is_regular is True
    assert result.mode == count


def test_seguidilla_requires_the_exact_sequence():
    seguidilla = classify_meter([7, 5, 7, 5])

    assert seguidilla.pattern == "Seguidilla"
    assert seguidilla.mean_syllables == 6.0
    assert seguidilla.variation == 2
    assert seguidilla.is_regular is False

    assert classify_meter([7, 5, 7, 5, 7]).pattern == FREE_METER
    assert classify_meter([5, 7, 5, 7]).pattern == FREE_METER


def test_mixed_counts_are_free_meter():
    result = classify_meter([6, 7, 6, 6])

    assert result.pattern == FREE_METER
    assert result.mean_syllables == 6.25
    assert result.variation == 1
    assert result.is_regular is True
    assert result.mode == 6


def test_mean_is_rounded_to_two_decimals():
    assert classify_meter([8, 8, 9]).mean_syllables == 8.33


def test_mode_tie_goes_to_the_first_value_seen():
    assert classify_meter([5, 6, 6, 5]).mode == 5
    assert classify_meter([7, 5, 7, 5]).mode == 7


def test_empty_counts_give_a_zeroed_result():
    result = classify_meter([])

    assert (result.pattern, result.mean_syllables, result.variation, result.is_regular, result.mode) == (
        FREE_METER,
        0.0,
        0,
        True,
        0,
    )


def test_classify_meter_is_deterministic():
    counts = [8, 7, 9, 8, 11]

    assert classify_meter(counts) == classify_meter(list(counts))


def test_analyze_metrics_on_cadiz_example():
    text = "En Cádiz la bella\ndonde el sol se refleja\nvive una doncella\ncon su amor y su queja"
    metrics = analyze_metrics(build_verses(segment_verses(text)))

    assert metrics.syllable_counts == [6, 7, 6, 6]
    assert metrics.pattern == FREE_METER
    assert metrics.as_dict()["statistics"] == {
        "pattern": FREE_METER,
        "average_syllables": 6.25,
        "syllable_variation": 1,
        "is_regular": True,
        "dominant_meter": 6,
    }


def test_match_carnival_forms_checks_meter_and_scheme():
    assert match_carnival_forms([8, 8, 8, 8], "ABAB") == ["copla"]
    assert match_carnival_forms([8, 8, 8, 8], "ABCB") == ["tango"]
    assert match_carnival_forms([7, 5, 7, 5], "ABCB") == ["seguidilla"]
    assert match_carnival_forms([8, 8, 8], "ABA") == ["solea"]
    assert match_carnival_forms([8, 8, 8, 8], "AAAA") == []
    assert match_carnival_forms([8, 8, 8, 7], "ABAB") == []
