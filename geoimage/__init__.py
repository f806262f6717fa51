"""geoimage — deterministic geometric pattern images over HTTP."""

__version__ = "0.1.0"
