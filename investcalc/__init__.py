"""Compound-growth projections and reinvestment/withdrawal strategies."""
