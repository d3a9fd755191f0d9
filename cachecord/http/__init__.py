from .cdn import CDNRoute
from .route import API_VERSION, Endpoint, Route
from .session import HTTPSession

__all__ = (
    "API_VERSION",
    "CDNRoute",
    "Endpoint",
    "HTTPSession",
    "Route",
)
