"""Configuration helpers for resolution and equation formatting."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Optional


@dataclass
class ResolverConfig:
    """Knobs shared by the resolver and the equation formatter."""

    # Longest chain of in-progress point/shape ids; None leaves only the interpreter's limit.
    max_depth: Optional[int] = None
    zero_tolerance: float = 1e-9
    intercept_precision: int = 9


_RESOLVER_CONFIG = ResolverConfig()


def get_resolver_config() -> ResolverConfig:
    return copy.deepcopy(_RESOLVER_CONFIG)


def set_resolver_config(config: ResolverConfig) -> None:
    global _RESOLVER_CONFIG
    _RESOLVER_CONFIG = copy.deepcopy(config)


__all__ = ["ResolverConfig", "get_resolver_config", "set_resolver_config"]
