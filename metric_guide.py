"""Human-readable metric definitions for the app."""

METRIC_GUIDE = [
    {
        "Metric": "TPV (yearly)",
        "Meaning": "Total payment volume: sum of the amount column over every row.",
        "Formula": "sum(amount)",
        "Source": "Measured",
    },
    {
        "Metric": "TPV (monthly / quarterly)",
        "Meaning": "The single-file total spread evenly, not separately measured periods.",
        "Formula": "TPV / 12, TPV / 4",
        "Source": "Approximation",
    },
    {
        "Metric": "Revenue split",
        "Meaning": "Fixed allocation weights applied to TPV for gateway, credit/BNPL and value-added services.",
        "Formula": "TPV * 1.5%, TPV * 0.8%, TPV * 0.5%",
        "Source": "Configured",
    },
    {
        "Metric": "Success rate",
        "Meaning": "Share of rows whose status is success, completed or approved.",
        "Formula": "(successful rows / rows) * 100",
        "Source": "Measured",
    },
    {
        "Metric": "Average transaction value",
        "Meaning": "Mean amount per row.",
        "Formula": "TPV / rows",
        "Source": "Measured",
    },
    {
        "Metric": "Payment methods",
        "Meaning": "Share of rows per payment method; rows without one count as Other.",
        "Formula": "(rows per method / rows) * 100",
        "Source": "Measured",
    },
    {
        "Metric": "Refund rate",
        "Meaning": "Share of rows flagged as refunds. A flag is set by true, 1, yes or y in any case.",
        "Formula": "(refund rows / rows) * 100",
        "Source": "Measured",
    },
    {
        "Metric": "Chargeback rate",
        "Meaning": "Share of rows flagged as chargebacks. A flag is set by true, 1, yes or y in any case.",
        "Formula": "(chargeback rows / rows) * 100",
        "Source": "Measured",
    },
    {
        "Metric": "Settlement time",
        "Meaning": "Hours between capture and payout to the merchant.",
        "Formula": "constant (24h)",
        "Source": "Configured",
    },
    {
        "Metric": "Active merchants",
        "Meaning": "Distinct non-empty merchant ids.",
        "Formula": "count(unique(merchant_id))",
        "Source": "Measured",
    },
    {
        "Metric": "Onboarded merchants",
        "Meaning": "Estimate derived from active merchants.",
        "Formula": "round(active * 1.2)",
        "Source": "Configured",
    },
    {
        "Metric": "Customer retention",
        "Meaning": "Share of merchants with more than one transaction.",
        "Formula": "(merchants with >1 row / active merchants) * 100",
        "Source": "Measured",
    },
    {
        "Metric": "NPS",
        "Meaning": "Ratings 1..10; promoters score 6 or more, detractors 5 or less. Classic NPS uses 9+/6-.",
        "Formula": "round((promoters - detractors) / ratings * 100)",
        "Source": "Measured",
    },
    {
        "Metric": "Sentiment score",
        "Meaning": "Average sentiment in -1..1 shown on a 0..5 scale.",
        "Formula": "round((avg + 1) / 2 * 5, 1)",
        "Source": "Measured",
    },
    {
        "Metric": "Top segments",
        "Meaning": "Five largest merchant categories by summed amount.",
        "Formula": "top5(sum(amount) by category)",
        "Source": "Measured",
    },
    {
        "Metric": "Fraud rate",
        "Meaning": "Share of rows flagged as fraud. A flag is set by true, 1, yes or y in any case.",
        "Formula": "(fraud rows / rows) * 100",
        "Source": "Measured",
    },
    {
        "Metric": "Dispute resolution time",
        "Meaning": "Average dispute days per row; rows without a value count as 0.",
        "Formula": "sum(dispute_days) / rows",
        "Source": "Measured",
    },
    {
        "Metric": "System uptime / compliance",
        "Meaning": "Placeholder figures, not read from the file.",
        "Formula": "constants (99.95%, 98.5%)",
        "Source": "Configured",
    },
    {
        "Metric": "Monthly revenue",
        "Meaning": "Estimated fee revenue per calendar month.",
        "Formula": "sum(amount in month) * 2%",
        "Source": "Approximation",
    },
]
