"""Campus events backend with preference-based event recommendations."""

__version__ = "0.1.0"
