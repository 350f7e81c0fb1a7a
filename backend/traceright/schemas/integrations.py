"""Schemas for the mocked collaborator endpoints under /integrations."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from traceright.schemas.common import NonEmptyStr


# ==================== NEXUS ====================

class AlertType(str, Enum):
    INVENTORY_LOW = "INVENTORY_LOW"
    PRICE_VARIANCE = "PRICE_VARIANCE"


class SupplyChainAlert(BaseModel):
    """Event published on the supply-chain bus."""

    type: AlertType
    item: str
    current_count: Optional[int] = None
    job_site_id: Optional[str] = None
    variance_percent: Optional[float] = None
    supplier: Optional[str] = None


class JobSiteVideoRequest(BaseModel):
    """Video to analyse. ``detected_objects`` overrides the mocked detector."""

    video_uri: NonEmptyStr
    job_site_id: NonEmptyStr
    detected_objects: Optional[Dict[str, int]] = None


class JobSiteVideoResult(BaseModel):
    job_site_id: str
    detected_objects: Dict[str, int]
    timestamp: datetime
    alerts: List[SupplyChainAlert] = []


class InvoiceLine(BaseModel):
    name: str
    price: float
    quantity: int


class SupplierInvoiceRequest(BaseModel):
    invoice_id: NonEmptyStr
    supplier: NonEmptyStr
    items: List[InvoiceLine]
    total: float
    estimate_id: Optional[str] = None


class SupplierInvoiceResult(BaseModel):
    invoice_id: str
    alerts: List[SupplyChainAlert] = []


# ==================== EVOLUTION LOOP ====================

class CorrectionRequest(BaseModel):
    """A human correction of a miscounted image."""

    image_id: NonEmptyStr
    original_count: int
    corrected_count: int
    object_type: NonEmptyStr
    user_feedback: str = ""


class CorrectionAck(BaseModel):
    success: bool = True
    message: str


class TrainingStats(BaseModel):
    queue_size: int
    last_correction: Optional[CorrectionRequest] = None


# ==================== GENERATIVE CONTENT ====================

class DesignRequest(BaseModel):
    prompt: NonEmptyStr
    skin_tone: Literal["light", "medium", "dark", "deep"]
    style: Literal["traditional", "watercolor", "geometric", "realistic"]
    user_id: Optional[str] = None


class DesignResult(BaseModel):
    success: bool = True
    image_url: str
    metadata: Dict[str, Any]


class ShareRequest(BaseModel):
    image_url: NonEmptyStr
    platform: Literal["instagram", "tiktok"]
    user_id: Optional[str] = None


class ShareResult(BaseModel):
    success: bool = True
    message: str


# ==================== REFERRALS ====================

class ReferralCodeRequest(BaseModel):
    user_id: Optional[str] = None


class ReferralCodeResult(BaseModel):
    success: bool = True
    referral_code: str


class ConversionRequest(BaseModel):
    new_user_id: NonEmptyStr
    used_code: NonEmptyStr


class ConversionResult(BaseModel):
    success: bool = True
    referrer_id: Optional[str] = None
    message: str = "Viral Loop Updated"


# ==================== ESTIMATOR ====================

class EstimateRequest(BaseModel):
    """Construction estimate parameters."""

    project_type: Literal["residential", "commercial"]
    square_footage: float = Field(gt=0)
    materials: Literal["standard", "premium", "luxury"]
    location_zip: Optional[str] = None


class QuoteTier(BaseModel):
    name: Literal["Good", "Better", "Best"]
    price: float
    materials: List[str]
    timeline_weeks: int


class EstimateResult(BaseModel):
    success: bool = True
    quotes: List[QuoteTier]
