"""Supply-chain event bus.

Job-site video counts and supplier invoices are checked against simple
thresholds; breaches are published as ``supply_chain_alert`` events.
Detection is mocked.
"""

import logging
import secrets
from collections import defaultdict
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from traceright.core.config import settings
from traceright.schemas.integrations import (
    AlertType,
    JobSiteVideoResult,
    SupplierInvoiceRequest,
    SupplierInvoiceResult,
    SupplyChainAlert,
)

logger = logging.getLogger(__name__)

SUPPLY_CHAIN_ALERT = "supply_chain_alert"

# Expected unit price per item, used to flag invoice price variance
REFERENCE_ESTIMATE: Dict[str, float] = {
    "2x4_lumber": 5.00,
    "cement_bags": 12.00,
}

Listener = Callable[[SupplyChainAlert], None]


class SupplyChainNexus:
    """Minimal synchronous pub/sub."""

    def __init__(self):
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)

    def on(self, event: str, listener: Listener) -> None:
        self._listeners[event].append(listener)

    def off(self, event: str, listener: Listener) -> None:
        if listener in self._listeners.get(event, []):
            self._listeners[event].remove(listener)

    def emit(self, event: str, payload: SupplyChainAlert) -> int:
        """Deliver to every listener; returns how many were called."""
        listeners = list(self._listeners.get(event, []))
        for listener in listeners:
            listener(payload)
        return len(listeners)


def log_alert(alert: SupplyChainAlert) -> None:
    logger.info(f"[Nexus] Signal received: {alert.model_dump(exclude_none=True)}")
    if alert.type == AlertType.INVENTORY_LOW:
        logger.info(f"[Nexus] Action: Auto-drafting purchase order for {alert.item}.")
    elif alert.type == AlertType.PRICE_VARIANCE:
        logger.info(f"[Nexus] Action: Flagging supplier {alert.supplier} for review.")


nexus = SupplyChainNexus()
nexus.on(SUPPLY_CHAIN_ALERT, log_alert)


def _mock_detect_objects() -> Dict[str, int]:
    return {"2x4_lumber": secrets.randbelow(100), "cement_bags": 20}


def process_job_site_video(
    video_uri: str,
    job_site_id: str,
    detected_objects: Optional[Dict[str, int]] = None,
    bus: SupplyChainNexus = nexus,
) -> JobSiteVideoResult:
    """Count materials on site and alert when lumber runs low."""
    logger.info(f"[Nexus] Processing video for site: {job_site_id} ({video_uri})")
    counts = detected_objects if detected_objects is not None else _mock_detect_objects()

    alerts: List[SupplyChainAlert] = []
    lumber = counts.get("2x4_lumber")
    if lumber is not None and lumber < settings.lumber_threshold:
        logger.warning(f"[Nexus] ALERT: Low Lumber Detected ({lumber}). Signaling Supply Chain.")
        alert = SupplyChainAlert(
            type=AlertType.INVENTORY_LOW,
            item="2x4_lumber",
            current_count=lumber,
            job_site_id=job_site_id,
        )
        bus.emit(SUPPLY_CHAIN_ALERT, alert)
        alerts.append(alert)

    return JobSiteVideoResult(
        job_site_id=job_site_id,
        detected_objects=counts,
        timestamp=datetime.now(timezone.utc),
        alerts=alerts,
    )


def process_supplier_invoice(
    invoice: SupplierInvoiceRequest,
    bus: SupplyChainNexus = nexus,
) -> SupplierInvoiceResult:
    """Flag every line priced above the reference estimate."""
    logger.info(f"[Nexus] Processing invoice: {invoice.invoice_id}")

    alerts: List[SupplyChainAlert] = []
    for line in invoice.items:
        expected = REFERENCE_ESTIMATE.get(line.name)
        if expected and line.price > expected:
            variance = (line.price - expected) / expected * 100
            logger.warning(
                f"[Nexus] ALERT: Price Variance Detected for {line.name}. "
                f"Paid ${line.price}, Expected ${expected} (+{variance:.1f}%)."
            )
            alert = SupplyChainAlert(
                type=AlertType.PRICE_VARIANCE,
                item=line.name,
                variance_percent=variance,
                supplier=invoice.supplier,
            )
            bus.emit(SUPPLY_CHAIN_ALERT, alert)
            alerts.append(alert)

    return SupplierInvoiceResult(invoice_id=invoice.invoice_id, alerts=alerts)
