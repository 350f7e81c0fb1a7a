"""Production batch routes."""

from typing import Optional

from fastapi import APIRouter, Request

from traceright.core.rate_limit import limiter
from traceright.db.session import StoreDep
from traceright.schemas.batch import BatchCreate, BatchResponse, BatchUpdate
from traceright.schemas.common import InsertResult, SuccessResponse
from traceright.services import production_service

router = APIRouter()


@router.get("/", response_model=list[BatchResponse], name="batches.list")
@limiter.limit("60/minute")
def list_batches(request: Request, store: StoreDep):
    return production_service.get_all_batches(store)


@router.get("/{batch_id}", response_model=Optional[BatchResponse], name="batches.getById")
@limiter.limit("60/minute")
def get_batch(request: Request, batch_id: int, store: StoreDep):
    return production_service.get_batch_by_id(store, batch_id)


@router.post("/", response_model=InsertResult, name="batches.create")
@limiter.limit("30/minute")
def create_batch(request: Request, data: BatchCreate, store: StoreDep):
    return production_service.create_batch(store, data)


@router.put("/{batch_id}", response_model=SuccessResponse, name="batches.update")
@limiter.limit("30/minute")
def update_batch(request: Request, batch_id: int, patch: BatchUpdate, store: StoreDep):
    """Record batch progress (status, dates, location, notes)."""
    production_service.update_batch(store, batch_id, patch)
    return SuccessResponse()


@router.delete("/{batch_id}", response_model=SuccessResponse, name="batches.delete")
@limiter.limit("30/minute")
def delete_batch(request: Request, batch_id: int, store: StoreDep):
    production_service.delete_batch(store, batch_id)
    return SuccessResponse()
