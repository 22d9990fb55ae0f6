"""Storefront administration backend.

Catalog-constrained product variants, deterministic SKUs and store
sales reporting.
"""
