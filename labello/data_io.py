# -*- coding: utf-8 -*-
"""Column-wise helpers applying label encoders to pandas DataFrames."""
from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

import pandas as pd

from .config import EncoderConfig, EncoderType
from .encoders import LabelEncoder


def fit_label_encoders(
    df: pd.DataFrame,
    categorical_cols: Sequence[str],
    config: Optional[Mapping[str, Any] | EncoderConfig] = None,
    encoder_type: Optional[EncoderType | str] = None,
) -> dict[str, LabelEncoder]:
    """Fit one encoder per categorical column."""

    encoders: dict[str, LabelEncoder] = {}
    for col in categorical_cols:
        if col not in df.columns:
            raise KeyError(f"Missing categorical column: {col}")
        encoders[col] = LabelEncoder(encoder_type).fit(df[col], config)
    return encoders


def apply_label_encoders(
    df: pd.DataFrame,
    encoders: Mapping[str, LabelEncoder],
    *,
    suffix: str = "_enc",
    fill_value: int = -1,
    inplace: bool = False,
) -> pd.DataFrame:
    """Append ``<col><suffix>`` code columns; unknown values get ``fill_value``."""

    target = df if inplace else df.copy()
    for col, encoder in encoders.items():
        if col not in target.columns:
            raise KeyError(f"Missing categorical column: {col}")
        target[f"{col}{suffix}"] = encoder.transform_array(target[col], fill_value=fill_value)
    return target


def invert_label_encoders(
    df: pd.DataFrame,
    encoders: Mapping[str, LabelEncoder],
    *,
    suffix: str = "_enc",
    inplace: bool = False,
) -> pd.DataFrame:
    """Decode ``<col><suffix>`` columns back into ``<col>``."""

    target = df if inplace else df.copy()
    for col, encoder in encoders.items():
        enc_col = f"{col}{suffix}"
        if enc_col not in target.columns:
            raise KeyError(f"Missing encoded column: {enc_col}")
        decoded = encoder.inverse_transform(target[enc_col])
        target[col] = pd.Series(decoded, index=target.index, dtype=object)
    return target
