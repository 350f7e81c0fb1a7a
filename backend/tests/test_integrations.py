"""Mocked collaborators: nexus bus, evolution loop, content, referrals, estimator."""

import re

import pytest

from traceright.schemas.integrations import (
    AlertType,
    CorrectionRequest,
    EstimateRequest,
    InvoiceLine,
    SupplierInvoiceRequest,
)
from traceright.services import estimator_service, nexus_service
from traceright.services.evolution_service import EvolutionLoop, evolution_loop
from traceright.services.nexus_service import SUPPLY_CHAIN_ALERT, SupplyChainNexus
from traceright.services.referral_service import ReferralTracker

API = "/api/v1/integrations"


@pytest.fixture
def bus():
    """Private bus with a recording listener."""
    bus = SupplyChainNexus()
    received = []
    bus.on(SUPPLY_CHAIN_ALERT, received.append)
    bus.received = received
    return bus


class TestNexus:

    def test_low_lumber_emits_alert(self, bus):
        result = nexus_service.process_job_site_video(
            "gs://videos/site-4.mp4", "site-4", {"2x4_lumber": 5, "cement_bags": 20}, bus=bus
        )
        assert len(bus.received) == 1
        alert = bus.received[0]
        assert alert.type == AlertType.INVENTORY_LOW
        assert alert.current_count == 5
        assert alert.job_site_id == "site-4"
        assert result.alerts == [alert]

    def test_enough_lumber_is_silent(self, bus):
        result = nexus_service.process_job_site_video("uri", "site-1", {"2x4_lumber": 20}, bus=bus)
        assert bus.received == []
        assert result.alerts == []

    def test_mock_detector(self, bus):
        result = nexus_service.process_job_site_video("uri", "site-1", bus=bus)
        assert 0 <= result.detected_objects["2x4_lumber"] < 100
        assert result.detected_objects["cement_bags"] == 20

    def test_price_variance(self, bus):
        invoice = SupplierInvoiceRequest(
            invoice_id="INV-7",
            supplier="Lumber Co",
            items=[
                InvoiceLine(name="2x4_lumber", price=6.0, quantity=100),
                InvoiceLine(name="cement_bags", price=12.0, quantity=10),
                InvoiceLine(name="nails", price=99.0, quantity=1),
            ],
            total=801.0,
        )
        result = nexus_service.process_supplier_invoice(invoice, bus=bus)
        assert [a.item for a in result.alerts] == ["2x4_lumber"]
        assert result.alerts[0].variance_percent == pytest.approx(20.0)
        assert result.alerts[0].supplier == "Lumber Co"
        assert len(bus.received) == 1

    def test_off_removes_listener(self):
        bus = SupplyChainNexus()
        received = []
        bus.on(SUPPLY_CHAIN_ALERT, received.append)
        bus.off(SUPPLY_CHAIN_ALERT, received.append)
        assert bus.emit(SUPPLY_CHAIN_ALERT, None) == 0

    def test_route(self, client, auth_headers):
        resp = client.post(f"{API}/nexus/job-site-video", json={
            "video_uri": "gs://v.mp4", "job_site_id": "s1", "detected_objects": {"2x4_lumber": 3},
        }, headers=auth_headers)
        assert resp.status_code == 200
        assert resp.json()["alerts"][0]["type"] == "INVENTORY_LOW"


class TestEvolutionLoop:

    @pytest.mark.asyncio
    async def test_submit_and_stats(self):
        loop = EvolutionLoop(delay_seconds=0)
        correction = CorrectionRequest(
            image_id="img-1", original_count=12, corrected_count=14, object_type="2x4_lumber",
        )
        ack = await loop.submit_correction(correction)
        assert ack.success is True
        stats = loop.stats()
        assert stats.queue_size == 1
        assert stats.last_correction == correction

    @pytest.mark.asyncio
    async def test_stats_keep_count_and_latest_only(self):
        loop = EvolutionLoop(delay_seconds=0)
        for n in range(3):
            await loop.submit_correction(CorrectionRequest(
                image_id=f"img-{n}", original_count=n, corrected_count=n + 1, object_type="plywood",
            ))
        stats = loop.stats()
        assert stats.queue_size == 3
        assert stats.last_correction.image_id == "img-2"
        assert not any(isinstance(value, (list, tuple)) for value in vars(loop).values())

    def test_empty_stats(self):
        assert EvolutionLoop(delay_seconds=0).stats().last_correction is None

    def test_route(self, client, auth_headers, monkeypatch):
        monkeypatch.setattr(evolution_loop, "delay_seconds", 0)
        before = evolution_loop.stats().queue_size
        resp = client.post(f"{API}/evolution/corrections", json={
            "image_id": "img-2", "original_count": 1, "corrected_count": 2, "object_type": "plywood",
        }, headers=auth_headers)
        assert resp.status_code == 200
        assert resp.json()["message"] == "Correction received. VEO is evolving."
        stats = client.get(f"{API}/evolution/stats", headers=auth_headers).json()
        assert stats["queue_size"] == before + 1
        assert stats["last_correction"]["image_id"] == "img-2"


class TestContent:

    def test_generate_design(self, client, auth_headers, regular_user):
        resp = client.post(f"{API}/content/designs", json={
            "prompt": "a koi fish", "skin_tone": "deep", "style": "watercolor",
        }, headers=auth_headers)
        assert resp.status_code == 200
        body = resp.json()
        assert re.fullmatch(
            rf"https://storage.googleapis.com/apex-generated-tattoos/{regular_user.open_id}_\d+\.png",
            body["image_url"],
        )
        assert body["metadata"]["credits_earned"] == 10
        assert "deep skin tone" in body["metadata"]["prompt"]

    def test_unknown_style_rejected(self, client, auth_headers):
        resp = client.post(f"{API}/content/designs", json={
            "prompt": "a koi fish", "skin_tone": "deep", "style": "pixel-art",
        }, headers=auth_headers)
        assert resp.status_code == 400

    def test_share(self, client, auth_headers):
        resp = client.post(f"{API}/content/share", json={
            "image_url": "https://example.com/x.png", "platform": "tiktok",
        }, headers=auth_headers)
        assert "50 Reward Credits" in resp.json()["message"]


class TestReferrals:

    def test_code_format(self):
        assert re.fullmatch(r"VEO-[A-Z0-9]{6}", ReferralTracker().generate_code("u1"))

    def test_conversion_credits_referrer(self):
        tracker = ReferralTracker()
        code = tracker.generate_code("u1")
        assert tracker.track_conversion("u2", code) == "u1"
        assert tracker.track_conversion("u3", code) == "u1"
        node = tracker.get_node("u1")
        assert node.downstream_referrals == 2
        assert node.viral_coefficient == 2

    def test_unknown_code(self):
        assert ReferralTracker().track_conversion("u2", "VEO-NOPE00") is None

    def test_routes(self, client, auth_headers):
        code = client.post(f"{API}/referrals/code", json={}, headers=auth_headers).json()["referral_code"]
        resp = client.post(f"{API}/referrals/conversions", json={"new_user_id": "friend", "used_code": code},
                           headers=auth_headers)
        assert resp.json()["referrer_id"] == "user-open-id"


class TestEstimator:

    def test_residential_standard(self):
        quotes = estimator_service.calculate_quotes(
            EstimateRequest(project_type="residential", square_footage=1000, materials="standard")
        )
        assert [(q.name, q.price, q.timeline_weeks) for q in quotes] == [
            ("Good", 135000.0, 8),
            ("Better", 150000.0, 6),
            ("Best", 195000.0, 4),
        ]

    def test_commercial_luxury(self):
        base = estimator_service.estimate_base_cost(
            EstimateRequest(project_type="commercial", square_footage=100, materials="luxury")
        )
        assert base == pytest.approx(55000.0)

    def test_route_rejects_non_positive_area(self, client, auth_headers):
        resp = client.post(f"{API}/estimator/calculate", json={
            "project_type": "residential", "square_footage": 0, "materials": "standard",
        }, headers=auth_headers)
        assert resp.status_code == 400
