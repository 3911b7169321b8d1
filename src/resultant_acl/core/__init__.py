"""Core building blocks shared across resultant-acl."""

from .exceptions import *  # noqa: F401,F403
from .exceptions import __all__
