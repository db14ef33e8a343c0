"""themegen: build-time generator for the web UI theme stylesheet."""

__version__ = "0.1.0"
