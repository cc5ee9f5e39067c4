from fastapi import APIRouter, Depends, HTTPException, Header
from markovtext.api.schemas import GenerateIn, GenerateOut, StatsIn, StatsOut
from markovtext.services import build_model_from_text, generate_from_text, get_stats
from markovtext.config import settings
from markovtext.core.errors import UnknownPrefixError

router = APIRouter()


def _auth(api_key_header: str | None = Header(default=None, alias="X-API-Key")):
    if settings.api_key and api_key_header != settings.api_key:
        raise HTTPException(status_code=401, detail="Invalid API key")

@router.post('/generate', response_model=GenerateOut)
def generate(data: GenerateIn, ok=Depends(_auth)):
    try:
        return generate_from_text(data.text, data.count, order=data.order, seed=data.seed, start=data.start)
    except UnknownPrefixError as e:
        raise HTTPException(400, detail=str(e))

@router.post('/stats', response_model=StatsOut)
def stats(data: StatsIn, ok=Depends(_auth)):
    return get_stats(build_model_from_text(data.text, order=data.order))
