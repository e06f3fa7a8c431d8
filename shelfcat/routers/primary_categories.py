import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from shelfcat.database import get_session
from shelfcat.services.categories import count_primary_categories

logger = logging.getLogger(__name__)

router = APIRouter(tags=["primary_categories"])


@router.get("/primary_categories", response_class=PlainTextResponse)
async def list_primary_categories(session: AsyncSession = Depends(get_session)):
    count = await count_primary_categories(session)
    logger.info("Counted %d primary categories", count)
    return f"# of primary categories: {count}"
