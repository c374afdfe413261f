"""
Payments API.

Robokassa calls /payment-success after a successful payment and expects
a plain `OK<InvId>` body.
"""

from typing import Union

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from ai_server.services.payment import process_payment

router = APIRouter(tags=["payments"])


class PaymentSuccessRequest(BaseModel):
    OutSum: Union[float, str]
    InvId: Union[int, str]


@router.post("/payment-success", response_class=PlainTextResponse)
async def payment_success(request: PaymentSuccessRequest):
    try:
        return await process_payment(request.OutSum, request.InvId)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
