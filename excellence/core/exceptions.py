"""
Custom Exceptions - Excellence Eligibility
excellence/core/exceptions.py

Exception classes for the event data source layer. The eligibility engine
itself never raises; every anomalous input becomes a "No Data" or
"Zero Score" verdict instead.
"""


class DataSourceException(Exception):
    """Base exception for event data source operations."""

    pass


class EventNotFoundException(DataSourceException):
    """Event not available from the data source."""

    def __init__(self, sku: str):
        self.sku = sku
        super().__init__(f"Event with SKU {sku} not found")


class DataSourceAuthenticationException(DataSourceException):
    """Data source was built without the credentials it needs."""

    def __init__(self, message: str = "Data source credentials are missing"):
        self.message = message
        super().__init__(message)
