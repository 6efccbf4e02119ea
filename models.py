"""
Typed contracts between the aggregators and the presentation layer.

Every value here is a frozen snapshot built fresh per computation, and
mapping fields are stored as read-only proxies. The ``as_dict`` helpers
render the camelCase shape the dashboard and the JSON export consume;
payment-method shares stay strings with one decimal digit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class MonthBucket:
    month: str                       # "Jan" .. "Dec"
    volume: float
    count: int
    revenue_proxy: float             # volume * fixed 2% fee rate

    def as_dict(self) -> dict[str, Any]:
        return {
            "month": self.month,
            "tpv": self.volume,
            "transactions": self.count,
            "revenue": self.revenue_proxy,
        }


@dataclass(frozen=True)
class CategoryTotal:
    name: str
    volume: float

    def as_dict(self) -> dict[str, Any]:
        return {"name": self.name, "tpv": self.volume}


@dataclass(frozen=True)
class ScalarMetrics:
    """Dataset-wide sums, rates and classification counts."""

    total_volume: float
    total_count: int
    successful_count: int
    success_rate: float
    fraud_rate: float
    chargeback_rate: float
    refund_rate: float
    nps_score: int
    sentiment_score: float
    customer_retention: float
    active_merchants: int
    dispute_resolution_time: float


@dataclass(frozen=True)
class VolumeScales:
    """Total volume re-expressed at monthly/quarterly/yearly scale (simple divisions)."""

    monthly: float
    quarterly: float
    yearly: float


@dataclass(frozen=True)
class RevenueSplit:
    payment_gateway: float
    credit_bnpl: float
    value_added_services: float


@dataclass(frozen=True)
class TransactionStats:
    total: int
    successful: int
    success_rate: float


@dataclass(frozen=True)
class ProductPerformance:
    tpv: VolumeScales
    revenue: RevenueSplit
    transactions: TransactionStats
    average_transaction_value: float
    payment_methods: Mapping[str, str]
    refund_rate: float
    chargeback_rate: float
    settlement_time: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "payment_methods", MappingProxyType(dict(self.payment_methods)))

    def as_dict(self) -> dict[str, Any]:
        return {
            "tpv": {
                "monthly": self.tpv.monthly,
                "quarterly": self.tpv.quarterly,
                "yearly": self.tpv.yearly,
            },
            "revenue": {
                "paymentGateway": self.revenue.payment_gateway,
                "creditBNPL": self.revenue.credit_bnpl,
                "valueAddedServices": self.revenue.value_added_services,
            },
            "transactions": {
                "total": self.transactions.total,
                "successful": self.transactions.successful,
                "successRate": self.transactions.success_rate,
            },
            "averageTransactionValue": self.average_transaction_value,
            "paymentMethods": dict(self.payment_methods),
            "refundRate": self.refund_rate,
            "chargebackRate": self.chargeback_rate,
            "settlementTime": self.settlement_time,
        }


@dataclass(frozen=True)
class MerchantStats:
    active: int
    onboarded: int                   # estimated: active * multiplier
    churn_rate: float                # placeholder constant


@dataclass(frozen=True)
class CustomerSentiments:
    merchants: MerchantStats
    top_categories: tuple[CategoryTotal, ...]
    customer_retention: float
    nps: int
    sentiment_score: float

    def as_dict(self) -> dict[str, Any]:
        return {
            "merchants": {
                "active": self.merchants.active,
                "onboarded": self.merchants.onboarded,
                "churnRate": self.merchants.churn_rate,
            },
            "topSegments": [item.as_dict() for item in self.top_categories],
            "customerRetention": self.customer_retention,
            "nps": self.nps,
            "sentimentScore": self.sentiment_score,
        }


@dataclass(frozen=True)
class MarketTrends:
    fraud_rate: float
    dispute_resolution_time: float
    system_uptime: float             # placeholder constant
    compliance_score: float          # placeholder constant

    def as_dict(self) -> dict[str, Any]:
        return {
            "fraudRate": self.fraud_rate,
            "disputeResolutionTime": self.dispute_resolution_time,
            "systemUptime": self.system_uptime,
            "complianceScore": self.compliance_score,
        }


@dataclass(frozen=True)
class MetricsReport:
    product_performance: ProductPerformance
    customer_sentiments: CustomerSentiments
    market_trends: MarketTrends
    monthly_data: tuple[MonthBucket, ...]
    resolved_fields: Mapping[str, str | None] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "resolved_fields", MappingProxyType(dict(self.resolved_fields)))

    def as_dict(self) -> dict[str, Any]:
        return {
            "productPerformance": self.product_performance.as_dict(),
            "customerSentiments": self.customer_sentiments.as_dict(),
            "marketTrends": self.market_trends.as_dict(),
            "monthlyData": [bucket.as_dict() for bucket in self.monthly_data],
            "resolvedFields": dict(self.resolved_fields),
        }
