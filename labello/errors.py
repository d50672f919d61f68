# -*- coding: utf-8 -*-
"""Exception types raised by labello."""
from __future__ import annotations


class LabelloError(Exception):
    """Base class for every error raised by the encoder."""


class NotFittedError(LabelloError, RuntimeError):
    """Raised when an operation needs a fitted encoder."""


class ConfigError(LabelloError, ValueError):
    """Raised for semantically invalid encoder configuration."""


class MappingError(LabelloError, ValueError):
    """Raised when a custom mapping function breaks the value/code bijection."""
