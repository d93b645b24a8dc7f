from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from nexttalent.core.session import SessionContext
from nexttalent.database import get_db
from nexttalent.dependencies import get_current_session
from nexttalent.models.news_item import NewsItem
from nexttalent.repos.news_repo import get_all
from nexttalent.schemas.notification import NewsResponse

router = APIRouter(prefix="/news", tags=["news"])


def news_to_response(item: NewsItem) -> NewsResponse:
    return NewsResponse(
        id=item.id,
        title=item.title,
        description=item.description,
        image_url=item.image_url,
        created_at=item.created_at.isoformat() if item.created_at else None,
    )


@router.get("", response_model=list[NewsResponse])
def list_news(
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_session),
):
    return [news_to_response(n) for n in get_all(db)]
