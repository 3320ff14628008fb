# tests/test_conjugation.py
"""Tests for verb/adjective conjugation."""

import pytest

from hanmorph.core.conjugation import ConjugationExpander, Conjugation, conjugate
from hanmorph.core.dictionary import DictionaryStore
from hanmorph.core.pos import Pos


@pytest.fixture
def expander():
    return ConjugationExpander()


# === Regular stems ===

def test_consonant_stem():
    forms = conjugate("받다", Pos.Verb)

    for form in ["받다", "받아", "받았다", "받고", "받은", "받을", "받는", "받습니다", "받으면"]:
        assert form in forms


def test_vowel_stem_contracts():
    forms = conjugate("가다", Pos.Verb)

    for form in ["가", "가서", "갔다", "간", "갈", "갑니다", "간다", "가면"]:
        assert form in forms
    assert "가아" not in forms


def test_ha_stem():
    forms = conjugate("하다", Pos.Verb)

    for form in ["해", "하여", "했다", "한", "하게", "합니다"]:
        assert form in forms


def test_rieul_stem_drops_before_n():
    forms = conjugate("만들다", Pos.Verb)

    for form in ["만들어", "만든", "만드는", "만들", "만듭니다", "만든다"]:
        assert form in forms
    assert "만들은" not in forms


def test_adjective_takes_no_verb_endings():
    forms = conjugate("착하다", Pos.Adjective)

    assert "착한" in forms
    assert "착하는" not in forms
    assert "착하자" not in forms


def test_existential_takes_verb_endings():
    assert "있는" in conjugate("있다", Pos.Adjective)


def test_malformed_stem():
    assert conjugate("강아지", Pos.Verb) == frozenset()


# === Irregular stems ===

def test_b_irregular():
    forms = conjugate("아름답다", Pos.Adjective)
    assert "아름다운" in forms
    assert "아름다워" in forms

    assert "누워" in conjugate("눕다", Pos.Verb)


def test_d_irregular():
    forms = conjugate("듣다", Pos.Verb)

    assert "들어" in forms
    assert "들은" in forms
    assert "듣고" in forms


def test_h_irregular():
    forms = conjugate("그렇다", Pos.Adjective)

    assert "그래" in forms
    assert "그래요" in forms
    assert "그런" in forms


def test_reu_irregular():
    assert "몰라" in conjugate("모르다", Pos.Verb)


# === Expander ===

def test_expand_rejects_nouns(expander):
    with pytest.raises(ValueError):
        expander.expand("강아지", Pos.Noun)


def test_match_prefixes(expander):
    store = DictionaryStore({Pos.Verb: {"받다"}})
    matches = expander.match("받은 루루", 0, 2, store.snapshot())

    assert matches == [Conjugation("받다", Pos.Verb, 2)]


def test_ambiguous_surface(expander):
    store = DictionaryStore({Pos.Verb: {"걷다", "걸다"}})

    stems = expander.stems_of("걸어", store.snapshot())

    assert stems == (("걷다", Pos.Verb), ("걸다", Pos.Verb))


def test_index_follows_dictionary_edits(expander):
    store = DictionaryStore({Pos.Verb: {"받다"}})
    assert not expander.is_form("꿀잼해", store.snapshot())

    store.add(Pos.Verb, {"꿀잼하다"})
    assert expander.stems_of("꿀잼해", store.snapshot()) == (("꿀잼하다", Pos.Verb),)

    store.remove(Pos.Verb, {"꿀잼하다"})
    assert not expander.is_form("꿀잼해", store.snapshot())
