"""Sample postings for demos and for runs with no job export available."""
from __future__ import annotations

from jobfeed.log import get_logger
from jobfeed.models import JobPosting
from jobfeed.ranking import now_ms
from jobfeed.sources.base import JobSource

log = get_logger(__name__)

_HOUR_MS = 60 * 60 * 1000


class MockSource(JobSource):
    def __init__(self, now: int | None = None) -> None:
        self.now = now if now is not None else now_ms()

    def fetch(self) -> list[JobPosting]:
        log.info("MockSource generating sample jobs")
        return [
            JobPosting(
                id="mock-1",
                title="Delivery Driver",
                company="QuickShip Logistics",
                location="Pune, Maharashtra",
                salary="₹15,000 - ₹20,000/month",
                type="full-time",
                description="Deliver parcels across Pune. Two-wheeler and driving license required.",
                requirements=("Driving License", "Two-wheeler", "Local route knowledge"),
                employer_id="emp-quickship",
                created_at=self.now - 5 * _HOUR_MS,
            ),
            JobPosting(
                id="mock-2",
                title="Head Cook",
                company="Spice Route Kitchen",
                location="Mumbai",
                salary="₹25,000/month",
                type="full-time",
                description="Lead a kitchen of six. North Indian and tandoor experience preferred.",
                requirements=("Cooking", "Kitchen management", "Tandoor"),
                employer_id="emp-spiceroute",
                created_at=self.now - 50 * _HOUR_MS,
            ),
            JobPosting(
                id="mock-3",
                title="Warehouse Associate",
                company="StoreMax",
                location="Pune",
                salary="₹14,000/month",
                type="part-time",
                description="Packing, inventory counts and loading. Night shifts available.",
                requirements=("Inventory", "Packing"),
                employer_id="emp-storemax",
                created_at=self.now - 6 * 24 * _HOUR_MS,
            ),
            JobPosting(
                id="mock-4",
                title="Security Guard",
                company="SafeHands Services",
                location="Nagpur",
                salary="₹12,000 - ₹13,500/month",
                type="full-time",
                description="Gate duty and patrols for a residential complex.",
                requirements=("Security training",),
                employer_id="emp-safehands",
                created_at=self.now - 12 * 24 * _HOUR_MS,
            ),
        ]
