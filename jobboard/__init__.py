"""Job board home page: REST gateway, aggregation, typing animation and page controller."""

__version__ = "0.1.0"
