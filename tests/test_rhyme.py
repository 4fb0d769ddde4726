import pytest

from carnavalito.core.rhyme import (
    analyze_rhyme,
    detect_rhyme_scheme,
    extract_ending,
    find_rhymes,
    group_label,
    quality_label,
)


def test_consonant_rhymes_form_one_group():
    result = analyze_rhyme(["la vida", "mi querida", "tu salida", "la partida"])

    assert result.scheme == "AAAA"
    assert result.rhyme_type == "consonant"
    assert result.quality == "excellent"
    assert result.quality_score == pytest.approx(1.0)


def test_unrelated_endings_are_free_verse():
    result = analyze_rhyme(["mar", "sol", "luz", "paz"])

    assert result.scheme == "ABCD"
    assert result.rhyme_type == "free"
    assert result.quality == "none"


def test_assonant_rhyme():
    result = analyze_rhyme(["casa", "playa", "cara"])

    assert result.scheme == "AAA"
    assert result.rhyme_type == "assonant"
    assert result.quality == "good"


def test_grouping_compares_only_against_representatives():
    # "amar" joins "casa" by assonance; "lugar" rhymes with "amar" but not with "casa".
    forward = analyze_rhyme(["casa", "amar", "lugar"])
    backward = analyze_rhyme(["lugar", "amar", "casa"])

    assert forward.scheme == "AAB"
    assert forward.rhyme_type == "consonant"
    assert [verse.group for verse in backward.verses] == ["A", "A", "B"]
    assert backward.verses[2].word == "casa"


def test_scheme_has_one_label_per_verse():
    verses = ["vida", "cantar", "querida", "mar", "sol"]

    assert len(analyze_rhyme(verses).scheme) == len(verses)


@pytest.mark.parametrize(
    "index, label",
    [(0, "A"), (1, "B"), (25, "Z"), (26, "AA"), (27, "AB"), (51, "AZ"), (52, "BA")],
)
def test_group_label_sequence(index, label):
    assert group_label(index) == label


def test_extract_ending_folds_the_last_token():
    ending = extract_ending("¡Olé, mi Cádiz!")

    assert ending.word == "cadiz"
    assert ending.consonant == "diz"
    assert ending.assonant == "ai"


@pytest.mark.parametrize("verse", ["la vida .", "la vida 123"])
def test_last_token_without_letters_gives_an_empty_ending(verse):
    ending = extract_ending(verse)

    assert (ending.word, ending.consonant, ending.assonant) == ("", "", "")


def test_verses_ending_in_punctuation_tokens_do_not_rhyme():
    result = analyze_rhyme(["la vida .", "la querida ."])

    assert result.scheme == "AB"
    assert result.rhyme_type == "free"
    assert result.quality == "none"


def test_short_words_have_no_assonant_pattern():
    ending = extract_ending("el mar")

    assert ending.consonant == "mar"
    assert ending.assonant == ""


def test_empty_endings_never_rhyme():
    first, second = extract_ending(""), extract_ending("...")

    assert first.pair_points(second) == 0
    assert detect_rhyme_scheme([first, second]) == ["A", "B"]


def test_single_verse_has_no_quality():
    result = analyze_rhyme(["Cádiz"])

    assert result.scheme == "A"
    assert result.quality == "none"
    assert result.quality_score == 0.0


@pytest.mark.parametrize(
    "score, label",
    [(0.81, "excellent"), (0.8, "good"), (0.61, "good"), (0.5, "regular"), (0.3, "weak"), (0.2, "none"), (0.0, "none")],
)
def test_quality_label_thresholds_are_strict(score, label):
    assert quality_label(score) == label


def test_rhyme_analysis_as_dict_shape():
    payload = analyze_rhyme(["la vida", "el mar"]).as_dict()

    assert payload["scheme"] == "AB"
    assert payload["type"] == "free"
    assert payload["verses"][0] == {
        "verse": 1,
        "word": "vida",
        "ending": "ida",
        "vowel_pattern": "ia",
        "group": "A",
    }


def test_find_rhymes_uses_the_tables_and_skips_the_word():
    suggestions = find_rhymes("vida")

    assert "querida" in suggestions.consonant
    assert "comida" in suggestions.assonant
    assert "vida" not in suggestions.consonant
    assert "vida" not in suggestions.assonant
    assert suggestions.consonant_pattern == "da"
    assert suggestions.assonant_pattern == "ia"


def test_find_rhymes_matches_accented_table_keys():
    suggestions = find_rhymes("Alegría")

    assert suggestions.word == "alegria"
    assert "fantasía" in suggestions.consonant
    assert "alegría" not in suggestions.consonant


def test_find_rhymes_respects_limit():
    assert len(find_rhymes("vida", limit=2).consonant) == 2
    assert find_rhymes("vida", limit=0).consonant == ()


def test_find_rhymes_for_unknown_endings_is_empty():
    suggestions = find_rhymes("xyz")

    assert suggestions.consonant == ()
    assert suggestions.assonant == ()
