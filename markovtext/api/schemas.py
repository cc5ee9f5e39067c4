from pydantic import BaseModel, Field
from typing import Optional

from markovtext.config import settings


class GenerateIn(BaseModel):
    text: str
    count: int = Field(ge=0)
    order: int = Field(default=settings.order, ge=1)
    seed: Optional[int] = None
    start: Optional[list[str]] = None


class GenerateOut(BaseModel):
    tokens: list[str]
    text: str
    start: list[str]
    states: int


class StatsIn(BaseModel):
    text: str
    order: int = Field(default=settings.order, ge=1)


class StatsOut(BaseModel):
    order: int
    tokens: int
    vocabulary: int
    states: int
    suffixes: int
    max_fanout: int
    mean_fanout: float
    terminal_states: int
    start_candidates: int
    entropy: float
