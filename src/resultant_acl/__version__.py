"""Version information for resultant-acl."""

__version__ = "0.1.0"
