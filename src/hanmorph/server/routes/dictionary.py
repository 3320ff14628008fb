"""
Dictionary routes: /api/dictionary
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from hanmorph.core.pos import dictionary_pos
from hanmorph.server.deps import get_processor


router = APIRouter(prefix="/api/dictionary", tags=["dictionary"])


class WordsRequest(BaseModel):
    words: list[str]


def _category(name: str):
    try:
        return dictionary_pos(name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{category}/{word}")
async def lookup_word(category: str, word: str):
    """Check whether a word is in a category."""
    pos = _category(category)
    present = get_processor().lookup(pos, word)
    return {"category": pos.value, "word": word, "present": present}


@router.post("/{category}")
async def add_words(category: str, req: WordsRequest):
    """Add words to a category. Already present words are ignored."""
    pos = _category(category)
    try:
        get_processor().add_words(pos, req.words)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"category": pos.value, "added": req.words}


@router.delete("/{category}")
async def remove_words(category: str, req: WordsRequest):
    """Remove words from a category. Missing words are ignored."""
    pos = _category(category)
    try:
        get_processor().remove_words(pos, req.words)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"category": pos.value, "removed": req.words}
