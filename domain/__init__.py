"""Domain layer for daily energy balance tracking.

This package holds the business logic (metabolic calculations, ledger
aggregation) decoupled from the GraphQL presentation and from the
infrastructure adapters.
"""
