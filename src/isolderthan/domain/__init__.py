"""Domain layer: calendar math, thresholds, and verdicts.

This layer depends only on stdlib, pydantic, and python-dateutil.
It must never import from services, infrastructure, commands, or config.
"""
