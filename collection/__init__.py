"""Schema-guided data collection."""

from .collector import DataCollector

__all__ = ["DataCollector"]
