"""Services resolving, assembling and registering train routes."""

from .bootstrap import SchemaBootstrapper, BootstrapReport
from .console import Console
from .platform_resolver import PlatformResolver, PlatformSnapshot, matches_start
from .route_assembler import RouteAssembler, Route
from .route_registry import RouteRegistry

__all__ = [
    "SchemaBootstrapper",
    "BootstrapReport",
    "Console",
    "PlatformResolver",
    "PlatformSnapshot",
    "matches_start",
    "RouteAssembler",
    "Route",
    "RouteRegistry",
]
