import io
import pytest
from markovtext import services
from markovtext.config import settings
from markovtext.core.errors import UnknownPrefixError
from markovtext.core.rng import ScriptedRandom

TEXT = "The cat sat. The dog ran."

def test_build_model_from_stream():
    mk = services.build_model(io.StringIO("The cat sat.\nThe dog ran.\n"), rng=ScriptedRandom([0] * 10))
    assert mk.order == settings.order
    assert mk.ntokens == 6

def test_generate_words_and_render():
    mk = services.build_model_from_text(TEXT, rng=ScriptedRandom([0, 1, 0, 0, 0]))
    words = services.generate_words(mk, 3)
    assert services.render(words) == "The cat sat. The dog"
    assert services.render(words, "newline") == "The\ncat\nsat.\nThe\ndog"

def test_generate_words_with_start():
    mk = services.build_model_from_text(TEXT, rng=ScriptedRandom([0] * 10))
    assert services.generate_words(mk, 1, start=["dog", "ran."]) == ["dog", "ran."]
    with pytest.raises(UnknownPrefixError):
        services.generate_words(mk, 1, start=["dog", "cat"])

def test_clamp_count(monkeypatch, caplog):
    monkeypatch.setattr(settings, "max_words", 4)
    assert services.clamp_count(3) == 3
    with caplog.at_level("WARNING"):
        assert services.clamp_count(40) == 4
    assert "capping" in caplog.text

def test_generate_from_text_is_seeded():
    a = services.generate_from_text(TEXT, 10, seed=3)
    b = services.generate_from_text(TEXT, 10, seed=3)
    assert a == b
    assert a['start'] in (["The", "cat"], ["The", "dog"])
    assert a['text'] == " ".join(a['tokens'])
    assert a['states'] == 7

def test_generate_from_empty_text():
    out = services.generate_from_text("", 5, seed=1)
    assert out['tokens'] == [] and out['text'] == "" and out['start'] == []

def test_explicit_zero_order_is_rejected():
    with pytest.raises(ValueError):
        services.build_model_from_text(TEXT, order=0)
