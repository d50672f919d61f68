# -*- coding: utf-8 -*-
"""Configuration objects for label encoders."""
from __future__ import annotations

import numbers
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Callable, Dict, Hashable, Mapping, Optional

from .errors import ConfigError


class EncoderType(Enum):
    """Encoding strategy selected for a :class:`~labello.encoders.LabelEncoder`."""

    ORDINAL = "ordinal"
    ONE_HOT = "one_hot"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: Optional["EncoderType | str"]) -> "EncoderType":
        if value is None:
            return cls.ORDINAL
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().lower().replace("-", "_")
            if name == "onehot":
                name = "one_hot"
            for member in cls:
                if member.value == name:
                    return member
        raise ConfigError(f"Unsupported encoder type: {value!r}")


@dataclass
class EncoderConfig:
    """Options consumed by ``LabelEncoder.fit``."""

    max_nclasses: Optional[int] = None
    # value -> code; overrides the sequential assignment
    mapping_function: Optional[Callable[[Hashable], int]] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EncoderConfig":
        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name in data:
                kwargs[f.name] = data[f.name]
        return cls(**kwargs)

    @staticmethod
    def ensure(cfg: Optional[Mapping[str, Any] | "EncoderConfig"]) -> "EncoderConfig":
        if cfg is None:
            return EncoderConfig()
        if isinstance(cfg, EncoderConfig):
            return cfg
        if isinstance(cfg, Mapping):
            return EncoderConfig.from_mapping(cfg)
        raise TypeError(f"Unrecognised encoder config type: {type(cfg)!r}")

    def validate(self) -> "EncoderConfig":
        limit = self.max_nclasses
        if limit is not None:
            if isinstance(limit, bool) or not isinstance(limit, numbers.Integral):
                raise ConfigError(f"max_nclasses must be an integer, got {limit!r}")
            if int(limit) <= 0:
                raise ConfigError(f"max_nclasses must be positive, got {limit}")
        if self.mapping_function is not None and not callable(self.mapping_function):
            raise ConfigError("mapping_function must be callable.")
        return self
