# moviehub/models/pokemon.py

from typing import List

from pydantic import BaseModel, ConfigDict


class PokemonRef(BaseModel):
    name: str
    url: str


class PokemonPage(BaseModel):
    """Upstream list envelope; only `results` is used."""

    model_config = ConfigDict(extra="ignore")

    results: List[PokemonRef]


class ErrorMessage(BaseModel):
    message: str
