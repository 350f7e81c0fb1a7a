"""Mocked collaborator endpoints: supply-chain nexus, evolution loop,
generative content, referrals and the construction estimator."""

from fastapi import APIRouter, Request

from traceright.core.rate_limit import limiter
from traceright.core.rbac import CurrentUser
from traceright.schemas.integrations import (
    ConversionRequest,
    ConversionResult,
    CorrectionAck,
    CorrectionRequest,
    DesignRequest,
    DesignResult,
    EstimateRequest,
    EstimateResult,
    JobSiteVideoRequest,
    JobSiteVideoResult,
    ReferralCodeRequest,
    ReferralCodeResult,
    ShareRequest,
    ShareResult,
    SupplierInvoiceRequest,
    SupplierInvoiceResult,
    TrainingStats,
)
from traceright.services import content_service, estimator_service, nexus_service
from traceright.services.evolution_service import evolution_loop
from traceright.services.referral_service import referral_tracker

router = APIRouter()


# ==================== NEXUS ====================

@router.post("/nexus/job-site-video", response_model=JobSiteVideoResult, name="nexus.processJobSiteVideo")
@limiter.limit("30/minute")
def process_job_site_video(request: Request, data: JobSiteVideoRequest, current_user: CurrentUser):
    return nexus_service.process_job_site_video(data.video_uri, data.job_site_id, data.detected_objects)


@router.post("/nexus/supplier-invoice", response_model=SupplierInvoiceResult, name="nexus.processSupplierInvoice")
@limiter.limit("30/minute")
def process_supplier_invoice(request: Request, data: SupplierInvoiceRequest, current_user: CurrentUser):
    return nexus_service.process_supplier_invoice(data)


# ==================== EVOLUTION LOOP ====================

@router.post("/evolution/corrections", response_model=CorrectionAck, name="evolution.submitCorrection")
@limiter.limit("30/minute")
async def submit_correction(request: Request, data: CorrectionRequest, current_user: CurrentUser):
    return await evolution_loop.submit_correction(data)


@router.get("/evolution/stats", response_model=TrainingStats, name="evolution.stats")
@limiter.limit("60/minute")
def get_training_stats(request: Request, current_user: CurrentUser):
    return evolution_loop.stats()


# ==================== GENERATIVE CONTENT ====================

@router.post("/content/designs", response_model=DesignResult, name="content.generateDesign")
@limiter.limit("10/minute")
def generate_design(request: Request, data: DesignRequest, current_user: CurrentUser):
    return content_service.generate_design(data, data.user_id or current_user.open_id)


@router.post("/content/share", response_model=ShareResult, name="content.shareDesign")
@limiter.limit("30/minute")
def share_design(request: Request, data: ShareRequest, current_user: CurrentUser):
    return content_service.share_design(data, data.user_id or current_user.open_id)


# ==================== REFERRALS ====================

@router.post("/referrals/code", response_model=ReferralCodeResult, name="referrals.generateCode")
@limiter.limit("30/minute")
def generate_referral_code(request: Request, data: ReferralCodeRequest, current_user: CurrentUser):
    code = referral_tracker.generate_code(data.user_id or current_user.open_id)
    return ReferralCodeResult(referral_code=code)


@router.post("/referrals/conversions", response_model=ConversionResult, name="referrals.trackConversion")
@limiter.limit("30/minute")
def track_conversion(request: Request, data: ConversionRequest, current_user: CurrentUser):
    referrer_id = referral_tracker.track_conversion(data.new_user_id, data.used_code)
    return ConversionResult(referrer_id=referrer_id)


# ==================== ESTIMATOR ====================

@router.post("/estimator/calculate", response_model=EstimateResult, name="estimator.calculate")
@limiter.limit("60/minute")
def calculate_estimate(request: Request, data: EstimateRequest, current_user: CurrentUser):
    return EstimateResult(quotes=estimator_service.calculate_quotes(data))
