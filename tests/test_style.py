import pytest

from carnavalito.core.meter import analyze_metrics
from carnavalito.core.rhyme import analyze_rhyme
from carnavalito.core.style import (
    DEFAULT_STYLE_RUBRIC,
    StyleRubric,
    score_carnival_style,
    style_level,
)
from carnavalito.core.verses import build_verses, segment_verses


def _score(text, rubric=DEFAULT_STYLE_RUBRIC):
    lines = segment_verses(text)
    metrics = analyze_metrics(build_verses(lines))
    return score_carnival_style(lines, metrics, analyze_rhyme(lines), rubric)


def test_copla_scores_as_authentic(copla):
    result = _score(copla)

    assert result.score == pytest.approx(0.9)
    assert result.level == "authentic"
    assert result.features == (
        'Carnival vocabulary: "comparsa"',
        'Carnival vocabulary: "cadiz"',
        'Carnival vocabulary: "caleta"',
        'Carnival vocabulary: "mar"',
        "Traditional octosyllabic meter",
        "Traditional consonant rhyme",
    )
    assert result.suggestions == ()


def test_plain_text_gets_every_suggestion():
    result = _score("mar\nsol\nluz\npaz")

    assert result.score == pytest.approx(0.1)
    assert result.level == "not in style"
    assert len(result.suggestions) == 5
    assert "Consider octosyllables (8 syllables per verse)" in result.suggestions


def test_expressions_add_their_weight_once():
    once = _score("pisha")
    repeated = _score("pisha pisha pisha")

    assert once.score == pytest.approx(0.15)
    assert repeated.score == once.score
    assert repeated.features == ('Cádiz expression: "pisha"',)


def test_multiword_expressions_match_without_accents():
    result = _score("ay mare que rico")

    assert 'Cádiz expression: "ay mare"' in result.features
    assert 'Cádiz expression: "qué rico"' in result.features


def test_accented_and_plain_spellings_count_once():
    result = _score("Cádiz cadiz CÁDIZ")

    assert result.features == ('Carnival vocabulary: "cadiz"',)


def test_terms_match_inside_longer_words():
    result = _score("quiero amar la salida con parte")

    assert result.features == (
        'Carnival vocabulary: "mar"',
        'Carnival vocabulary: "sal"',
        'Cádiz expression: "arte"',
    )
    assert result.score == pytest.approx(0.35)


def test_adding_a_theme_word_never_lowers_the_score():
    lines = segment_verses("la noche es larga")
    metrics = analyze_metrics(build_verses(lines))
    rhyme = analyze_rhyme(lines)

    base = score_carnival_style(lines, metrics, rhyme)
    richer = score_carnival_style(["la noche es larga en el carnaval"], metrics, rhyme)

    assert richer.score > base.score


def test_score_is_clamped_to_one():
    text = (
        "carnaval chirigota comparsa coro cuarteto falla\n"
        "pisha mostro zambombazo salero arte viva"
    )

    assert _score(text).score == 1.0


def test_score_is_deterministic(copla):
    assert _score(copla) == _score(copla)


@pytest.mark.parametrize(
    "score, level",
    [
        (1.0, "authentic"),
        (0.8, "authentic"),
        (0.79, "stylized"),
        (0.6, "stylized"),
        (0.4, "reminiscent"),
        (0.2, "slight influence"),
        (0.19, "not in style"),
        (0.0, "not in style"),
    ],
)
def test_style_level_thresholds(score, level):
    assert style_level(score) == level


def test_custom_rubric_changes_the_weights(copla):
    rubric = StyleRubric(theme_word_weight=0.0, octosyllabic_bonus=0.0, rhyme_bonus=0.0)

    assert _score(copla, rubric).score == 0.0
