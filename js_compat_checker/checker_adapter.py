"""
Compatibility checker adapter: runs the lint engine over each source unit and
normalizes its output into diagnostics.
"""

import logging
import shutil
import tempfile
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .config import AnalysisConfig
from .errors import LintEngineError, StagingError
from .issue import CheckResult, Diagnostic, Severity, SourceUnit, UnitCheck
from .lint_engine import COMPAT_RULE_ID, LintEngine
from .utils import is_polyfilled, staging_filename

logger = logging.getLogger(__name__)

STAGING_PREFIX = "js_compat_"
_ESLINT_ERROR_SEVERITY = 2


def _to_severity(value: Any) -> Severity:
    return Severity.ERROR if value == _ESLINT_ERROR_SEVERITY else Severity.WARNING


class CompatibilityChecker:
    """Checks source units concurrently and merges results in discovery order."""

    def __init__(self, engine: LintEngine):
        self.engine = engine

    def check(self, units: Sequence[SourceUnit], config: AnalysisConfig) -> CheckResult:
        """Run the engine over every unit.

        A unit the engine cannot analyze is skipped with a warning. Staging
        failures and an unavailable engine propagate to the caller.
        """
        if not units:
            return CheckResult(diagnostics=(), warnings=())

        staging_dir = self._create_staging_dir()
        try:
            try:
                config_path = self.engine.write_config(staging_dir, config)
                staged = [self._stage(staging_dir, i, unit) for i, unit in enumerate(units)]
            except OSError as e:
                raise StagingError(f"Could not write to staging directory {staging_dir}: {e}") from e

            workers = min(config.max_workers, len(units))
            with ThreadPoolExecutor(max_workers=workers) as pool:
                futures = [
                    pool.submit(self._check_unit, i, unit, path, config_path, config)
                    for i, (unit, path) in enumerate(zip(units, staged))
                ]
                # Collected in submission order, not completion order
                partials: List[UnitCheck] = [f.result() for f in futures]
        finally:
            self._cleanup(staging_dir)

        diagnostics: List[Diagnostic] = []
        warnings: List[str] = []
        for partial in sorted(partials, key=lambda p: p.index):
            diagnostics.extend(partial.diagnostics)
            warnings.extend(partial.warnings)
        return CheckResult(diagnostics=tuple(diagnostics), warnings=tuple(warnings))

    def _create_staging_dir(self) -> Path:
        try:
            return Path(tempfile.mkdtemp(prefix=STAGING_PREFIX))
        except OSError as e:
            raise StagingError(f"Could not create staging directory: {e}") from e

    def _stage(self, staging_dir: Path, index: int, unit: SourceUnit) -> Path:
        path = staging_dir / staging_filename(index, unit.origin_id)
        path.write_text(unit.content, encoding="utf-8")
        return path

    def _cleanup(self, staging_dir: Path) -> None:
        try:
            shutil.rmtree(staging_dir)
        except OSError as e:
            logger.warning("Failed to clean up staging directory %s: %s", staging_dir, e)

    def _check_unit(
        self,
        index: int,
        unit: SourceUnit,
        path: Path,
        config_path: Optional[Path],
        config: AnalysisConfig,
    ) -> UnitCheck:
        try:
            results = self.engine.lint_files([path], config_path)
            diagnostics = self._collect(unit, results, config)
        except LintEngineError as e:
            warning = f"Failed to analyze {unit.origin_id}: {e}"
            logger.warning(warning)
            return UnitCheck(index=index, warnings=[warning])
        return UnitCheck(index=index, diagnostics=diagnostics)

    def _collect(
        self,
        unit: SourceUnit,
        results: List[Dict[str, Any]],
        config: AnalysisConfig,
    ) -> List[Diagnostic]:
        messages = [m for result in results for m in (result.get("messages") or [])]

        fatal = next((m for m in messages if m.get("fatal")), None)
        if fatal is not None:
            raise LintEngineError(
                f"{fatal.get('message', 'fatal error')} (line {fatal.get('line', '?')})"
            )

        diagnostics: List[Diagnostic] = []
        for m in messages:
            if m.get("ruleId") != COMPAT_RULE_ID:
                continue
            message = str(m.get("message", ""))
            if is_polyfilled(message, config.known_polyfills):
                logger.debug("Suppressed polyfilled feature in %s: %s", unit.origin_id, message)
                continue
            diagnostics.append(Diagnostic(
                origin_id=unit.origin_id,
                line=int(m.get("line") or 0),
                column=int(m.get("column") or 0),
                message=message,
                severity=_to_severity(m.get("severity")),
            ))
        return diagnostics
