# moviehub/api/articles.py

from fastapi import APIRouter

from moviehub.models.articles import ArticleOut

router = APIRouter(prefix="/articles", tags=["articles"])


@router.get("/{title}", response_model=ArticleOut)
def get_article_by_title(title: str) -> ArticleOut:
    """
    Echo the article title taken from the URL path.
    """
    return ArticleOut(title=title)
