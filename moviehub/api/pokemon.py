# moviehub/api/pokemon.py

from typing import List

from fastapi import APIRouter, Depends

from moviehub.clients.pokeapi import PokeAPIClient
from moviehub.dependencies import get_pokeapi_client
from moviehub.models.pokemon import ErrorMessage, PokemonRef

router = APIRouter(prefix="/pokemon", tags=["pokemon"])


@router.get(
    "",
    response_model=List[PokemonRef],
    responses={500: {"model": ErrorMessage}},
)
async def list_pokemon(
    client: PokeAPIClient = Depends(get_pokeapi_client),
) -> List[PokemonRef]:
    """
    Proxy the upstream Pokemon list, unwrapping its `results` field.
    """
    return await client.list_pokemon()
