"""Demonstration query and context used when the CLI gets no input."""

DEMO_QUERY = (
    "Can you check whether the nightly ETL job broke the churn dashboard "
    "after the last sprint, and whether the SLA for the gold tier still holds?"
)

DEMO_CONTEXT = """\
Glossary:
- ETL job: the scheduled pipeline that copies order data from the shop database into the warehouse.
- Churn dashboard: the report showing customers who cancelled their subscription in the last 30 days.
- Gold tier: customers paying for the premium support plan.
"""
