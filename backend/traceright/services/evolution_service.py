"""Active-learning loop: human count corrections queued for retraining (mocked)."""

import asyncio
import logging
from typing import Optional

from traceright.core.config import settings
from traceright.schemas.integrations import CorrectionAck, CorrectionRequest, TrainingStats

logger = logging.getLogger(__name__)


class EvolutionLoop:
    """In-process training queue."""

    def __init__(self, delay_seconds: Optional[float] = None):
        self.delay_seconds = settings.evolution_delay_seconds if delay_seconds is None else delay_seconds
        self._received = 0
        self._last: Optional[CorrectionRequest] = None

    async def submit_correction(self, correction: CorrectionRequest) -> CorrectionAck:
        logger.info(f"[EvolutionLoop] Received correction for image {correction.image_id}.")
        logger.info(
            f"[EvolutionLoop] Counted {correction.original_count} {correction.object_type}, "
            f"user says {correction.corrected_count}."
        )
        self._received += 1
        self._last = correction
        await self._retrain(correction)
        return CorrectionAck(message="Correction received. VEO is evolving.")

    async def _retrain(self, correction: CorrectionRequest) -> None:
        logger.info(
            f"[EvolutionLoop] Fine-tuning on new ground truth: "
            f"{correction.object_type} = {correction.corrected_count}"
        )
        await asyncio.sleep(self.delay_seconds)
        logger.info("[EvolutionLoop] Model updated.")

    def stats(self) -> TrainingStats:
        return TrainingStats(
            queue_size=self._received,
            last_correction=self._last,
        )


evolution_loop = EvolutionLoop()
