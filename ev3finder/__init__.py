"""Geometry, destination loading, HTTP serving and TCP messaging for an EV3 path-finding robot."""

__version__ = "0.1.0"