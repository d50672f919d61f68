"""
labello: label encoding of categorical values into dense integer codes.
"""
from .errors import LabelloError, NotFittedError, ConfigError, MappingError
from .config import EncoderType, EncoderConfig
from .encoders import LabelEncoder
from .config_loader import (
    load_yaml_cfg,
    extract_encoder_settings,
    build_encoder_from_cfg,
    show_cfg,
)
from .data_io import fit_label_encoders, apply_label_encoders, invert_label_encoders

__all__ = [
    "LabelloError",
    "NotFittedError",
    "ConfigError",
    "MappingError",
    "EncoderType",
    "EncoderConfig",
    "LabelEncoder",
    "load_yaml_cfg",
    "extract_encoder_settings",
    "build_encoder_from_cfg",
    "show_cfg",
    "fit_label_encoders",
    "apply_label_encoders",
    "invert_label_encoders",
]
