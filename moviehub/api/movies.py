# moviehub/api/movies.py

from typing import List

from fastapi import APIRouter

router = APIRouter(tags=["movies"])

MOVIES = ["Star Wars", "Bill and Ted", "Next To Normal"]


@router.get("/", response_model=List[str])
def list_movies() -> List[str]:
    return list(MOVIES)
