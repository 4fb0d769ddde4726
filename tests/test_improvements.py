from carnavalito.core.improvements import advise_verse, suggest_improvements
from carnavalito.core.meter import analyze_metrics
from carnavalito.core.rhyme import analyze_rhyme
from carnavalito.core.verses import build_verses, segment_verses


def _improvements(text):
    lines = segment_verses(text)
    return suggest_improvements(analyze_metrics(build_verses(lines)), analyze_rhyme(lines))


def test_uneven_unrhymed_poem_gets_every_kind_of_suggestion():
    suggestions = _improvements("sol\nla luna brilla sobre el mar de la bahía gaditana")

    assert [item.kind for item in suggestions] == ["meter", "rhyme", "verse", "verse"]
    assert suggestions[0].priority == "high"
    assert suggestions[0].details == "Current variation: 15 syllables"
    assert suggestions[2].verse == "sol"


def test_well_formed_copla_only_gets_rhyme_advice(copla):
    suggestions = _improvements(copla)

    assert [item.kind for item in suggestions] == ["rhyme"]
    assert suggestions[0].details == "Current quality: weak"


def test_advise_verse_on_target():
    advice = advise_verse("Cádiz tiene una caleta")

    assert advice.current_syllables == 8
    assert advice.difference == 0
    assert advice.suggestions[0].kind == "perfect_meter"
    assert advice.ending == "eta"
    assert advice.has_carnival_words is True
    assert advice.word_count == 4


def test_advise_verse_offers_rhymes_from_the_tables():
    advice = advise_verse("Cádiz tiene una caleta")
    rhyme_tip = advice.suggestions[-1]

    assert rhyme_tip.kind == "rhyme_suggestions"
    assert "bandera" in rhyme_tip.examples
    assert "caleta" not in rhyme_tip.examples
    assert len(rhyme_tip.examples) <= 5


def test_advise_verse_short_and_long():
    short = advise_verse("la mar")
    long = advise_verse("donde la gente va a cantar con alegría")

    assert short.suggestions[0].kind == "add_syllables"
    assert short.suggestions[0].description == "Add 6 syllables"
    assert long.current_syllables == 12
    assert long.suggestions[0].description == "Remove 4 syllables"


def test_advise_verse_singular_wording():
    advice = advise_verse("Cádiz tiene una caleta", target_syllables=9)

    assert advice.suggestions[0].description == "Add 1 syllable"


def test_advice_as_dict_shape():
    payload = advise_verse("la mar").as_dict()

    assert payload["original_verse"] == "la mar"
    assert payload["difference"] == 6
    assert payload["analysis"] == {"ending": "mar", "words": 2, "has_carnival_words": False}
