# tests/test_cli.py
"""Tests for the command line."""

import pytest

from hanmorph.cli import client
from hanmorph.cli.main import main


# === In-process commands ===

def test_tokenize(capsys):
    main(["tokenize", "착한강아지상을 받은 루루"])
    out = capsys.readouterr().out

    assert "착한(Adjective(착하다): 0, 2)" in out
    assert "Space" not in out


def test_tokenize_json(capsys):
    main(["tokenize", "루루", "--json"])
    out = capsys.readouterr().out

    assert '"text": "루루"' in out
    assert '"pos": "Noun"' in out


def test_normalize(capsys):
    main(["normalize", "힘들겟씀다 그래욬ㅋㅋㅋ"])
    assert capsys.readouterr().out.strip() == "힘들겠습니다 그래요ㅋㅋㅋ"


def test_split(capsys):
    main(["split", "가을이다! 루루야!"])
    lines = capsys.readouterr().out.strip().splitlines()

    assert lines == ["[  0,   5) 가을이다!", "[  6,  10) 루루야!"]


def test_phrases(capsys):
    main(["phrases", "아름다운 트위터를 만들어 보자. 시발 #욕하지_말자", "--filter-spam"])
    out = capsys.readouterr().out

    assert "아름다운 트위터(Noun: 0, 8)" in out
    assert "시발" not in out
    assert "#욕하지_말자(Hashtag: 21, 7)" in out


def test_detok(capsys):
    main(["detok", "늘", "평온", "하게", "누워", "있", "는", "루루"])
    assert capsys.readouterr().out.strip() == "늘 평온하게 누워있는 루루"


def test_no_command(capsys):
    main([])
    assert "usage" in capsys.readouterr().out


# === Dictionary commands (client mocked) ===

def test_dict_add(monkeypatch, capsys):
    calls = []

    def fake_add(category, words):
        calls.append((category, words))
        return {"category": "Noun", "added": words}

    monkeypatch.setattr(client, "add_words", fake_add)
    main(["dict", "add", "noun", "춍춍", "챵챵챵"])

    assert calls == [("noun", ["춍춍", "챵챵챵"])]
    assert "✓ Added to Noun: 춍춍, 챵챵챵" in capsys.readouterr().out


def test_dict_lookup(monkeypatch, capsys):
    monkeypatch.setattr(
        client, "lookup_word",
        lambda category, word: {"category": "Noun", "word": word, "present": False},
    )
    main(["dict", "lookup", "noun", "루루"])

    assert "✗ 루루 (Noun)" in capsys.readouterr().out


def test_dict_error_exits(monkeypatch, capsys):
    def fail(category, words):
        raise RuntimeError("server down")

    monkeypatch.setattr(client, "remove_words", fail)
    with pytest.raises(SystemExit) as exc:
        main(["dict", "remove", "noun", "루루"])

    assert exc.value.code == 1
    assert "✗ Error: server down" in capsys.readouterr().out
