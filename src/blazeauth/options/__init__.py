"""
Option holders for BlazeAuth.
"""

from .authentication import ENV_PREFIX, AuthenticationAdapterOptions
from .base import Options

__all__ = ["AuthenticationAdapterOptions", "ENV_PREFIX", "Options"]
