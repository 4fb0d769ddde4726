import json

import pytest

from carnavalito.core import (
    AnalysisLevel,
    EmptyInputError,
    InvalidOptionError,
    analyze_poem,
    quick_analysis,
    segment_verses,
)


def test_complete_analysis_of_a_copla(copla):
    analysis = analyze_poem(copla)

    assert analysis.level is AnalysisLevel.COMPLETE
    assert analysis.total_verses == 4
    assert analysis.metrics.pattern == "Octosyllabic"
    assert analysis.rhyme.scheme == "ABAB"
    assert analysis.rhyme.rhyme_type == "consonant"
    assert analysis.forms == ("copla",)
    assert analysis.style.level == "authentic"
    assert analysis.devices is not None
    assert [item.kind for item in analysis.improvements] == ["rhyme"]


def test_basic_analysis_skips_style_and_advice(copla):
    analysis = analyze_poem(copla, "basic")
    payload = analysis.as_dict()

    assert analysis.style is None
    assert analysis.devices is None
    assert analysis.improvements == ()
    assert "carnival_style" not in payload
    assert payload["analysis_level"] == "basic"


def test_verse_records_line_up_across_analyses(copla):
    analysis = analyze_poem(copla)
    expected = len(segment_verses(copla))

    assert len(analysis.metrics.verses) == expected
    assert len(analysis.rhyme.verses) == expected
    assert len(analysis.rhyme.scheme) == expected


def test_repeated_analysis_is_identical(copla):
    first = analyze_poem(copla).as_dict()
    second = analyze_poem(copla).as_dict()

    assert first == second
    assert json.dumps(first, sort_keys=True) == json.dumps(second, sort_keys=True)


def test_unknown_level_is_rejected(copla):
    with pytest.raises(InvalidOptionError) as excinfo:
        analyze_poem(copla, "deep")

    assert excinfo.value.allowed == ("basic", "complete")


def test_empty_text_is_rejected():
    with pytest.raises(EmptyInputError):
        analyze_poem("  \n\n ")


def test_quick_analysis_of_a_copla(copla):
    result = quick_analysis(copla)

    assert result.syllables == (8, 8, 8, 8)
    assert result.rhyme_pattern == "ABAB"
    assert result.is_octosyllabic is True
    assert result.verses_count == 4
    assert result.message.startswith("Perfect for the Carnival")


def test_quick_analysis_flags_free_meter():
    result = quick_analysis("mar\nsol")

    assert result.is_octosyllabic is False
    assert result.as_dict()["syllables"] == [1, 1]
