"""Environment-driven settings for the process-wide shared generator.

``LAZYRAND_SEED`` pins the seed the shared instance uses on first access,
which makes a whole program run reproducible without touching its code.
Accepts decimal or ``0x``-prefixed hex; empty means unset.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

SEED_ENV_VAR = "LAZYRAND_SEED"


@dataclass(frozen=True)
class Config:
    seed: Optional[int] = None

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> Config:
        if environ is None:
            environ = os.environ
        raw = environ.get(SEED_ENV_VAR, "").strip()
        if not raw:
            return Config()
        try:
            seed = int(raw, 0)
        except ValueError:
            raise ValueError(
                f"{SEED_ENV_VAR} must be an integer, got {raw!r}"
            ) from None
        return Config(seed=seed)
