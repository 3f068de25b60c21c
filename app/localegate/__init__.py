"""localegate - per-request locale negotiation and message formatting."""

__version__ = "0.1.0"
