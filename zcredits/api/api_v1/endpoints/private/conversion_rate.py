from fastapi import APIRouter, Body, Depends, Path
from fastapi_pagination import Params
from fastapi_pagination.ext.sqlalchemy import apaginate
from rfc9457 import NotFoundProblem
from sqlalchemy.ext.asyncio import AsyncSession

from zcredits.core.logger import logger
from zcredits.core.utils import create_pagination_page
from zcredits.database.crud.conversion_rate import ConversionRateService
from zcredits.database.db.session import get_async_db
from zcredits.database.schemas.conversion_rate import ConversionRateCreate, ConversionRateRead

conversion_rate_router = APIRouter(prefix='/conversion-rate', tags=["conversion-rate"])

ConversionRatePage = create_pagination_page(ConversionRateRead)


@conversion_rate_router.get("", response_model=ConversionRatePage, description="Rate history, newest first")
async def get_conversion_rates(params: Params = Depends(), db: AsyncSession = Depends(get_async_db)):
    return await apaginate(db, ConversionRateService.get_history_stmt(), params)


@conversion_rate_router.get("/{rate_id}", response_model=ConversionRateRead)
async def get_conversion_rate(rate_id: int = Path(..., gt=0), db: AsyncSession = Depends(get_async_db)):
    record = await ConversionRateService(db).get(rate_id)
    if not record:
        raise NotFoundProblem(detail=f'Conversion rate {rate_id} not found')
    return record


@conversion_rate_router.post("", response_model=ConversionRateRead, status_code=201,
                             description="Publish a new rate; cached rates expire on their own")
async def create_conversion_rate(data: ConversionRateCreate = Body(...), db: AsyncSession = Depends(get_async_db)):
    record = await ConversionRateService(db).create(data)
    logger.info('Conversion rate published', extra={'rate': record.rate, 'id': record.id})
    return record
