"""
Flows
=====
Prefect flows: setup-schema, run-reports, validate-indicators.
"""
