"""
Insight Panel Backend Package.

FastAPI service layer for the dashboard Insight panel. Computes the heuristic
insight summary (trend, volatility, spikes, risk score) and the data quality
badge for a single numeric series, and assembles the render-ready panel view.

Subpackages:
    - api: FastAPI route handlers
    - core: Configuration and dependencies
    - models: Pydantic schemas and enums
    - services: Pure analytics and panel glue services
"""

__version__ = "1.0.0"
