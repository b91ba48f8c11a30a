# shopdb/order_info.py
import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from .database import get_session
from .models import Order, OrderInfo
from .schemas import OrderInfoCreate, OrderInfoOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/orders", tags=["order-info"])


async def _get_info(session: AsyncSession, order_id: int) -> OrderInfo:
    res = await session.execute(select(OrderInfo).where(OrderInfo.order_id == order_id))
    record = res.scalar_one_or_none()
    if not record:
        raise HTTPException(status_code=404, detail="Order info not found")
    return record


# 📝 Attach notes to an order (once; there is no update)
@router.post("/{order_id}/info", response_model=OrderInfoOut, status_code=status.HTTP_201_CREATED)
async def create_order_info(
    order_id: int,
    payload: OrderInfoCreate,
    session: AsyncSession = Depends(get_session),
):
    order = await session.get(Order, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")

    record = OrderInfo(order_id=order_id, info=payload.info)
    session.add(record)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        # the order may have been deleted since the lookup above
        res = await session.execute(select(Order.id).where(Order.id == order_id))
        if res.scalar_one_or_none() is None:
            logger.warning("order %s deleted before its info was saved", order_id)
            raise HTTPException(status_code=404, detail="Order not found")
        logger.warning("order info rejected for order %s", order_id)
        raise HTTPException(status_code=409, detail="Order already has info")

    await session.refresh(record)
    return record


@router.get("/{order_id}/info", response_model=OrderInfoOut)
async def read_order_info(order_id: int, session: AsyncSession = Depends(get_session)):
    return await _get_info(session, order_id)


@router.delete("/{order_id}/info", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order_info(order_id: int, session: AsyncSession = Depends(get_session)):
    record = await _get_info(session, order_id)
    await session.delete(record)
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
