'''
Insight Panel Backend Test Suite

Test Modules:
-------------
- test_insight_engine.py: Insight engine heuristics
  - Low-data guard (< 6 samples)
  - Trend classification and percentage
  - Z-score threshold by mode and sensitivity (clamped to 1.8-4.0)
  - Spike counting, risk point stacking, summary bands

- test_data_quality.py: Data quality badge (LOW / MEDIUM / GOOD)

- test_panel.py: Panel glue
  - Numeric series extraction from host data frames
  - Tolerant option normalization
  - Panel view assembly

- test_api.py: FastAPI route handlers and error mapping

Running Tests:
--------------
    pip install -e ".[test]"
    pytest insight_panel/tests/ -v

Configuration:
--------------
See conftest.py for shared fixtures and test configuration.
'''

__all__ = []
