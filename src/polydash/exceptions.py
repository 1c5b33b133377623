"""Exception types raised across the dashboard"""


class PolydashError(Exception):
    """Base class for dashboard errors"""


class MetricsPayloadError(PolydashError):
    """A metrics payload does not have the expected shape"""


class MetricsUnavailableError(PolydashError):
    """A metrics provider could not produce metrics for a market"""


class TransportError(PolydashError):
    """The metrics endpoint could not be reached or its reply could not be read"""
