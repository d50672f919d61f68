# -*- coding: utf-8 -*-
"""Label encoders mapping categorical values to dense integer codes."""
from __future__ import annotations

import logging
import math
import numbers
from dataclasses import replace
from types import MappingProxyType
from typing import Any, Callable, Dict, Hashable, Iterable, List, Mapping, Optional

import numpy as np
import pandas as pd

from .config import EncoderConfig, EncoderType
from .errors import ConfigError, MappingError, NotFittedError


_logger = logging.getLogger(__name__)
if not _logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    _logger.addHandler(_handler)
_logger.setLevel(logging.INFO)

# every float NaN is folded onto this object so missing values share one class
_NAN = float("nan")


def _canonical(value: Any) -> Any:
    if isinstance(value, float) and math.isnan(value):
        return _NAN
    return value


def _as_list(values: Iterable) -> List[Any]:
    if isinstance(values, (str, bytes)):
        raise TypeError("Expected a sequence of values, got a bare string.")
    if isinstance(values, (pd.Series, pd.Index, np.ndarray)):
        items = values.tolist()
    else:
        items = list(values)
    return [_canonical(v) for v in items]


def _as_code(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    # float columns (NaN-bearing pandas code columns) still carry whole codes
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return int(value)
    return None


class _BiMap:
    """Paired value->code and code->value tables, mutated only via :meth:`insert`."""

    __slots__ = ("forward", "backward")

    def __init__(self) -> None:
        self.forward: Dict[Hashable, int] = {}
        self.backward: Dict[int, Hashable] = {}

    def insert(self, value: Hashable, code: int) -> None:
        if value in self.forward:
            raise MappingError(f"Value {value!r} is already mapped to code {self.forward[value]}.")
        if code in self.backward:
            raise MappingError(
                f"Values {self.backward[code]!r} and {value!r} both map to code {code}."
            )
        self.forward[value] = code
        self.backward[code] = value

    def __len__(self) -> int:
        return len(self.forward)


class LabelEncoder:
    """Assign stable integer codes to categorical values and map them back.

    Codes follow first-seen order in the fitted data (``0, 1, 2, ...``) unless
    the config supplies a ``mapping_function``. Values outside the fitted
    vocabulary encode to ``None``; unknown codes decode to ``None``.

    Example::

        >>> enc = LabelEncoder().fit(["hello", "world", "world", "again"])
        >>> enc.transform(["world", "again", "nope"])
        [1, 2, None]
        >>> enc.inverse_transform([0, 2, 7])
        ['hello', 'again', None]
    """

    def __init__(self, encoder_type: Optional[EncoderType | str] = None) -> None:
        self._encoder_type = EncoderType.parse(encoder_type)
        self._table: Optional[_BiMap] = None
        self._config: Optional[EncoderConfig] = None
        self._positional: bool = True

    # ------------------------------------------------------------------
    # state
    # ------------------------------------------------------------------
    @property
    def encoder_type(self) -> EncoderType:
        return self._encoder_type

    @property
    def is_fitted(self) -> bool:
        return self._table is not None

    @property
    def config(self) -> Optional[EncoderConfig]:
        """Copy of the config used by the last successful :meth:`fit`."""
        return None if self._config is None else replace(self._config)

    @property
    def nclasses(self) -> int:
        return len(self._require_fitted())

    def _require_fitted(self) -> _BiMap:
        if self._table is None:
            raise NotFittedError("LabelEncoder must be fitted before use; call fit() first.")
        return self._table

    def _require_positional(self) -> _BiMap:
        table = self._require_fitted()
        if not self._positional:
            raise ConfigError("One-hot output needs positional codes; custom mappings are not supported.")
        return table

    # ------------------------------------------------------------------
    # fitting
    # ------------------------------------------------------------------
    def _check_strategy(self, cfg: EncoderConfig) -> None:
        has_func = cfg.mapping_function is not None
        if self._encoder_type is EncoderType.CUSTOM and not has_func:
            raise ConfigError("CUSTOM encoders require a mapping_function in the config.")
        if self._encoder_type is EncoderType.ONE_HOT and has_func:
            raise ConfigError("ONE_HOT encoders do not accept a mapping_function.")

    @staticmethod
    def _custom_code(func: Callable[[Hashable], int], value: Hashable) -> int:
        code = _as_code(func(value))
        if code is None or code < 0:
            raise MappingError(f"mapping_function returned an invalid code for {value!r}.")
        return code

    def fit(
        self,
        data: Iterable,
        config: Optional[Mapping[str, Any] | EncoderConfig] = None,
    ) -> "LabelEncoder":
        """Build the value/code mapping from ``data``, replacing any prior fit.

        On error the encoder keeps its previous state.
        """
        # owned copy of the caller's config
        cfg = replace(EncoderConfig.ensure(config).validate())
        if cfg.max_nclasses is not None:
            cfg.max_nclasses = int(cfg.max_nclasses)
        self._check_strategy(cfg)

        distinct = list(dict.fromkeys(_as_list(data)))
        dropped = 0
        if cfg.max_nclasses is not None and len(distinct) > cfg.max_nclasses:
            dropped = len(distinct) - cfg.max_nclasses
            distinct = distinct[: cfg.max_nclasses]

        func = cfg.mapping_function
        table = _BiMap()
        for idx, value in enumerate(distinct):
            code = idx if func is None else self._custom_code(func, value)
            table.insert(value, code)

        self._table = table
        self._config = cfg
        self._positional = func is None
        if dropped:
            _logger.info(
                "LabelEncoder kept %d classes (max_nclasses=%d), dropped %d distinct values.",
                len(table), cfg.max_nclasses, dropped,
            )
        _logger.debug("LabelEncoder fitted: type=%s nclasses=%d", self._encoder_type.value, len(table))
        return self

    def fit_transform(
        self,
        data: Iterable,
        config: Optional[Mapping[str, Any] | EncoderConfig] = None,
    ) -> List[Optional[int]]:
        values = _as_list(data)
        return self.fit(values, config).transform(values)

    # ------------------------------------------------------------------
    # encoding / decoding
    # ------------------------------------------------------------------
    def transform(self, data: Iterable) -> List[Optional[int]]:
        forward = self._require_fitted().forward
        return [forward.get(v) for v in _as_list(data)]

    def transform_array(self, data: Iterable, fill_value: int = -1) -> np.ndarray:
        """Encode ``data`` into an int64 array, unknowns replaced by ``fill_value``."""
        codes = self.transform(data)
        return np.array([fill_value if c is None else c for c in codes], dtype=np.int64)

    def inverse_transform(self, codes: Iterable) -> List[Optional[Hashable]]:
        backward = self._require_fitted().backward
        out: List[Optional[Hashable]] = []
        for raw in _as_list(codes):
            code = _as_code(raw)
            out.append(None if code is None else backward.get(code))
        return out

    def transform_onehot(self, data: Iterable) -> np.ndarray:
        """Return a ``(len(data), nclasses)`` boolean indicator matrix."""
        table = self._require_positional()
        codes = self.transform(data)
        matrix = np.zeros((len(codes), len(table)), dtype=bool)
        rows = [i for i, c in enumerate(codes) if c is not None]
        if rows:
            matrix[rows, [codes[i] for i in rows]] = True
        return matrix

    def inverse_onehot(self, matrix) -> List[Optional[Hashable]]:
        table = self._require_positional()
        arr = np.asarray(matrix, dtype=bool)
        if arr.ndim == 1 and arr.size == 0:
            arr = arr.reshape(0, len(table))
        if arr.ndim != 2 or arr.shape[1] != len(table):
            raise ValueError(
                f"Expected a 2-D matrix with {len(table)} columns, got shape {arr.shape}."
            )
        if arr.shape[1] == 0:
            return [None] * arr.shape[0]
        hits = arr.sum(axis=1)
        cols = arr.argmax(axis=1)
        return [
            table.backward[int(col)] if hit == 1 else None
            for col, hit in zip(cols, hits)
        ]

    # ------------------------------------------------------------------
    # introspection
    # ------------------------------------------------------------------
    def uniques(self) -> List[Hashable]:
        """Retained values ordered by code."""
        backward = self._require_fitted().backward
        return [backward[code] for code in sorted(backward)]

    def mapping(self) -> Mapping[Hashable, int]:
        return MappingProxyType(self._require_fitted().forward)

    def __len__(self) -> int:
        return 0 if self._table is None else len(self._table)

    def __contains__(self, value: object) -> bool:
        if self._table is None:
            return False
        return _canonical(value) in self._table.forward

    def __repr__(self) -> str:
        state = f"nclasses={len(self._table)}" if self._table is not None else "unfitted"
        return f"LabelEncoder(encoder_type={self._encoder_type.value!r}, {state})"
