"""Construction cost estimator: Good / Better / Best quote tiers."""

from typing import Dict, List

from traceright.schemas.integrations import EstimateRequest, QuoteTier

# Base rate per square foot
BASE_RATES: Dict[str, float] = {
    "residential": 150,
    "commercial": 250,
}

MATERIAL_MULTIPLIERS: Dict[str, float] = {
    "standard": 1.0,
    "premium": 1.5,
    "luxury": 2.2,
}

# (name, price factor, materials, timeline in weeks)
QUOTE_TIERS = [
    ("Good", 0.9, ["Standard Grade", "Basic Finishes"], 8),
    ("Better", 1.0, ["Premium Grade", "Quality Finishes", "Extended Warranty"], 6),
    ("Best", 1.3, ["Luxury Grade", "Custom Finishes", "Lifetime Warranty", "Priority Scheduling"], 4),
]


def estimate_base_cost(params: EstimateRequest) -> float:
    return params.square_footage * BASE_RATES[params.project_type] * MATERIAL_MULTIPLIERS[params.materials]


def calculate_quotes(params: EstimateRequest) -> List[QuoteTier]:
    base = estimate_base_cost(params)
    return [
        QuoteTier(name=name, price=round(base * factor, 2), materials=list(materials), timeline_weeks=weeks)
        for name, factor, materials, weeks in QUOTE_TIERS
    ]
