"""Train, station and route management with an interactive console."""

__version__ = "1.0.0"
