"""Constant tables shared across riskrating modules."""
