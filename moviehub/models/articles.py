# moviehub/models/articles.py

from pydantic import BaseModel


class ArticleOut(BaseModel):
    title: str
