"""Generative design content (mocked) and social sharing rewards."""

import logging
import time

from traceright.schemas.integrations import DesignRequest, DesignResult, ShareRequest, ShareResult

logger = logging.getLogger(__name__)

IMAGE_BUCKET_URL = "https://storage.googleapis.com/apex-generated-tattoos"
GENERATION_CREDITS = 10
SHARE_CREDITS = 50


def build_design_prompt(request: DesignRequest) -> str:
    return (
        f"A high-quality, detailed tattoo design of {request.prompt}, {request.style} style, "
        f"rendered realistically on a person with {request.skin_tone} skin tone. "
        "Focus on how the ink colors interact with the skin tone naturally. "
        "Professional photography, cinematic lighting."
    )


def generate_design(request: DesignRequest, user_id: str) -> DesignResult:
    """Return a mock image URL for the design; no image is rendered."""
    logger.info(f"[Content] Generating design for {request.skin_tone} skin tone. Style: {request.style}")
    prompt = build_design_prompt(request)
    logger.debug(f"[Content] Prompt: {prompt}")

    image_url = f"{IMAGE_BUCKET_URL}/{user_id}_{int(time.time() * 1000)}.png"
    return DesignResult(
        image_url=image_url,
        metadata={
            "prompt": prompt,
            "skin_tone": request.skin_tone,
            "credits_earned": GENERATION_CREDITS,
        },
    )


def share_design(request: ShareRequest, user_id: str) -> ShareResult:
    logger.info(f"[Content] User {user_id} sharing {request.image_url} to {request.platform}")
    return ShareResult(message=f"Design shared! {SHARE_CREDITS} Reward Credits added to your wallet.")
