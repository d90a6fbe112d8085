"""
Digital experience (DEX) impact figures for the landing page charts.

Everything is derived from one headcount number: hours lost to IT
interruptions, what those hours cost, and the Nexthink per-10k-employee
model scaled to the same headcount.
"""

from dataclasses import dataclass

from footprint.config import (
    COST_PER_HOUR_GBP,
    HOURS_LOST_PER_EMPLOYEE,
    NEXTHINK_USD_PER_10K,
    WORKING_HOURS_PER_YEAR,
)


@dataclass(frozen=True)
class DexImpact:
    employees: int
    hours_at_risk: int
    cost_gbp: float
    nexthink_usd: float

    @classmethod
    def for_headcount(cls, employees: int) -> "DexImpact":
        hours = employees * HOURS_LOST_PER_EMPLOYEE
        return cls(
            employees=employees,
            hours_at_risk=hours,
            cost_gbp=hours * COST_PER_HOUR_GBP,
            nexthink_usd=(employees / 10_000) * NEXTHINK_USD_PER_10K,
        )

    @property
    def cost_per_1000_gbp(self) -> float:
        return 1000 * HOURS_LOST_PER_EMPLOYEE * COST_PER_HOUR_GBP

    def pie_data(self) -> list[dict]:
        """Working year split for one employee (illustrative)."""
        return [
            {"name": "Productive Time",
             "value": max(0, WORKING_HOURS_PER_YEAR - HOURS_LOST_PER_EMPLOYEE)},
            {"name": "IT Interruptions", "value": HOURS_LOST_PER_EMPLOYEE},
        ]

    def bar_data(self) -> list[dict]:
        return [
            {"name": "DEX loss (£)", "value": round(self.cost_gbp)},
            {"name": "Nexthink model ($)", "value": round(self.nexthink_usd)},
        ]
