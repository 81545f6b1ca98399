class GeoDashboardError(Exception):
    """Base exception for all geo_dashboard errors"""


class InvalidQueryParameterError(GeoDashboardError, ValueError):
    """A sort/filter/page parameter that must never reach the record source"""


class RecordQueryError(GeoDashboardError):
    """The record source failed to answer a query"""


class ConfigError(GeoDashboardError):
    """Invalid or unreadable dashboard configuration file"""
