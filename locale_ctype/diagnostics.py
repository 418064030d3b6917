from __future__ import annotations

from collections.abc import Mapping
import os
from typing import Any

from .classification import ClassificationService
from .const import LOCALE_ENV_VARS


def get_diagnostics(service: ClassificationService, environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Return diagnostics for a classification service."""
    env = os.environ if environ is None else environ
    return {
        "locale_env": {name: env.get(name) for name in LOCALE_ENV_VARS},
        "config": service.config.as_dict(),
        "bridge": service.bridge.get_diagnostics(),
    }
