"""Launchgames: small interactive games for a Launchpad pad grid."""

__version__ = "0.1.0"

__all__ = ["__version__"]
