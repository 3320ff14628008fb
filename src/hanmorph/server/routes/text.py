"""
Text analysis routes: /api/normalize, /api/tokenize, /api/sentences,
/api/phrases, /api/detokenize
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from hanmorph.core.pos import Pos
from hanmorph.server.deps import get_processor


router = APIRouter(prefix="/api", tags=["text"])


class TextRequest(BaseModel):
    text: str


class TokenizeRequest(BaseModel):
    text: str
    normalize: bool = False
    keep_space: bool = True


class PhrasesRequest(BaseModel):
    text: str
    normalize: bool = False
    filter_spam: bool = False
    include_hashtags: bool = True


class DetokenizeRequest(BaseModel):
    morphemes: list[str]


@router.post("/normalize")
async def normalize(req: TextRequest):
    """Normalize informal spelling."""
    processor = get_processor()
    try:
        return {"text": processor.normalize(req.text)}
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/tokenize")
async def tokenize(req: TokenizeRequest):
    """Tokenize text into POS-tagged morphemes."""
    processor = get_processor()
    try:
        text = processor.normalize(req.text) if req.normalize else req.text
        tokens = processor.tokenize(text)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not req.keep_space:
        tokens = [t for t in tokens if t.pos is not Pos.Space]
    return {"text": text, "tokens": [t.to_dict() for t in tokens]}


@router.post("/sentences")
async def sentences(req: TextRequest):
    """Split text into sentences."""
    processor = get_processor()
    try:
        found = processor.split_sentences(req.text)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"sentences": [s.to_dict() for s in found]}


@router.post("/phrases")
async def phrases(req: PhrasesRequest):
    """Extract noun phrases (and hashtags)."""
    processor = get_processor()
    try:
        text = processor.normalize(req.text) if req.normalize else req.text
        tokens = processor.tokenize(text)
        found = processor.extract_phrases(tokens, req.filter_spam, req.include_hashtags)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"text": text, "phrases": [p.to_dict() for p in found]}


@router.post("/detokenize")
async def detokenize(req: DetokenizeRequest):
    """Join morphemes back into spaced text."""
    processor = get_processor()
    try:
        return {"text": processor.detokenize(req.morphemes)}
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
