"""
Environment diagnostics for EcoFit.

The diagnostics run quickly from the CLI (``ecofit doctor``) and during CI
checks.  Each diagnostic returns a dictionary with a human-readable
description, status and optional details.
"""

from __future__ import annotations

import importlib
import platform
import sys
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional

MIN_PYTHON = (3, 9)
CRITICAL_DEPENDENCIES = [
    "numpy",
    "loguru",
    "omegaconf",
    "yaml",
]


@dataclass
class CheckResult:
    """Structured diagnostic result."""

    check: str
    status: str
    details: Optional[str] = None

    def as_dict(self) -> Dict[str, Optional[str]]:
        payload = asdict(self)
        if payload["details"] is None:
            payload.pop("details")
        return payload


def _status(ok: bool) -> str:
    return "pass" if ok else "fail"


def _check_python_version() -> CheckResult:
    current = sys.version_info
    ok = current >= MIN_PYTHON
    details = f"Detected Python {current.major}.{current.minor}.{current.micro}"
    if not ok:
        details += f" (requires >= {MIN_PYTHON[0]}.{MIN_PYTHON[1]})"
    return CheckResult(check="Python runtime", status=_status(ok), details=details)


def _check_dependency(module_name: str) -> CheckResult:
    check = f"Python package '{module_name}' import"
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:  # pragma: no cover - dependent on external env
        return CheckResult(check=check, status="fail", details=f"{exc.__class__.__name__}: {exc}")
    return CheckResult(check=check, status="pass", details=str(getattr(module, "__version__", "unknown")))


def _check_schema() -> CheckResult:
    from ecofit.utils.config_reference import CONFIG_SCHEMA, SCHEMA_PATH

    count = sum(len(fields) for fields in CONFIG_SCHEMA.values())
    return CheckResult(
        check="Configuration schema",
        status=_status(count > 0),
        details=f"{count} keys in {len(CONFIG_SCHEMA)} sections ({SCHEMA_PATH.name})",
    )


def _check_presets() -> CheckResult:
    """The two reference shapes must be exact complements of each other."""
    from ecofit.genetics.fitness import DELTA, INVERSE_DELTA

    grid = [-1.0, 0.0, 0.5, 1.0, 10.0]
    broken = [
        (t, x)
        for t in grid
        for x in grid
        if DELTA(t, x).value + INVERSE_DELTA(t, x).value != 1.0
    ]
    details = "delta / delta-inv complementary" if not broken else f"Not complementary at {broken}"
    return CheckResult(check="Reference shapes", status=_status(not broken), details=details)


def _check_platform() -> CheckResult:
    details = f"{platform.system()} {platform.release()} ({platform.machine()})"
    return CheckResult(check="Platform", status="pass", details=details)


def run_doctor() -> List[Dict[str, Optional[str]]]:
    """
    Execute environment diagnostics and return structured results.

    Returns
    -------
    list of dict
        Each dictionary contains `check`, `status`, and optional `details`.
        Status is one of ``pass`` or ``fail``.
    """

    results: List[CheckResult] = [
        _check_platform(),
        _check_python_version(),
    ]
    results.extend(_check_dependency(module) for module in CRITICAL_DEPENDENCIES)
    results.append(_check_schema())
    results.append(_check_presets())

    # Convert to dictionaries for CLI friendliness.
    return [result.as_dict() for result in results]
