"""
Services module for Excellence Eligibility.
"""

from excellence.services.event_data_source import EventDataSource, InMemoryEventDataSource

__all__ = ["EventDataSource", "InMemoryEventDataSource"]
