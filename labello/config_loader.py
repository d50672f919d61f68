# -*- coding: utf-8 -*-
"""YAML configuration for encoders.

Both a grouped layout and flat keys are accepted::

    ENCODER:                      ENCODER_TYPE: ordinal
      encoder_type: ordinal       MAX_NCLASSES: 32
      max_nclasses: 32            COLUMNS: [carrier, origin]
      columns: [carrier, origin]
"""
from __future__ import annotations

import logging
import os
from typing import Tuple

import yaml

from .config import EncoderConfig, EncoderType
from .errors import ConfigError
from .encoders import LabelEncoder


_logger = logging.getLogger(__name__)
if not _logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    _logger.addHandler(_handler)
_logger.setLevel(logging.INFO)

REQUIRED_GROUPS = {"ENCODER"}
FLAT_KEYS = {"ENCODER_TYPE", "MAX_NCLASSES", "COLUMNS"}


def _normalize_flat_to_grouped(raw: dict) -> dict:
    """Map flat keys such as ``MAX_NCLASSES`` onto the grouped layout."""
    if not FLAT_KEYS & set(raw):
        return {}
    return {
        "ENCODER": {
            "encoder_type": raw.get("ENCODER_TYPE"),
            "max_nclasses": raw.get("MAX_NCLASSES"),
            "columns": raw.get("COLUMNS"),
        }
    }


def load_yaml_cfg(path: str) -> dict:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file does not exist: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if not isinstance(raw, dict) or not raw:
        raise ValueError(f"YAML is empty or not a mapping: {path}")

    cfg = raw if REQUIRED_GROUPS & set(raw) else _normalize_flat_to_grouped(raw)

    missing = [g for g in sorted(REQUIRED_GROUPS) if g not in cfg]
    if missing:
        raise KeyError(f"YAML is missing groups {missing}; expected {sorted(REQUIRED_GROUPS)}")
    if not isinstance(cfg["ENCODER"], dict):
        raise ValueError("ENCODER group must be a mapping.")

    columns = cfg["ENCODER"].get("columns")
    if columns is not None and not isinstance(columns, list):
        raise ValueError(f"ENCODER.columns must be a list, got {type(columns).__name__}")
    return cfg


def extract_encoder_settings(cfg: dict) -> Tuple[EncoderType, EncoderConfig]:
    """Parse the ENCODER group into an encoder type and a validated config."""
    group = cfg["ENCODER"]
    enc_type = EncoderType.parse(group.get("encoder_type"))
    if enc_type is EncoderType.CUSTOM:
        raise ConfigError("encoder_type 'custom' needs a mapping_function, which YAML cannot express.")
    enc_cfg = EncoderConfig(max_nclasses=group.get("max_nclasses")).validate()
    return enc_type, enc_cfg


def build_encoder_from_cfg(cfg: dict) -> Tuple[LabelEncoder, EncoderConfig]:
    enc_type, enc_cfg = extract_encoder_settings(cfg)
    return LabelEncoder(enc_type), enc_cfg


def show_cfg(cfg: dict) -> None:
    _logger.info("Config snapshot:")
    for grp in sorted(cfg):
        _logger.info("- %s: %s", grp, cfg[grp])
