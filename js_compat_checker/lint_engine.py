"""
Lint engine: runs ESLint with eslint-plugin-compat over staged script files.
"""

import json
import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .config import AnalysisConfig
from .errors import EngineUnavailableError, LintEngineError

logger = logging.getLogger(__name__)

COMPAT_RULE_ID = "compat/compat"
DEFAULT_ESLINT_COMMAND = "npx --no-install eslint"
CONFIG_FILENAME = "eslintrc.compat.json"

# ESLint exit codes: 0 = clean, 1 = lint problems found, 2 = fatal/config error.
_LINT_PROBLEMS_EXIT = 1


def build_eslint_config(config: AnalysisConfig) -> Dict[str, Any]:
    """Legacy (.eslintrc-style) config enabling only the compat rule."""
    return {
        "root": True,
        "env": {"browser": True, "es2021": True},
        "parserOptions": {"ecmaVersion": "latest", "sourceType": "script"},
        "plugins": ["compat"],
        "rules": {COMPAT_RULE_ID: "error"},
        "settings": {
            "browsers": list(config.target_browsers),
            "polyfills": list(config.known_polyfills),
        },
    }


class LintEngine:
    """Interface for the external rule-based checker."""

    def write_config(self, directory: Path, config: AnalysisConfig) -> Optional[Path]:
        """Write any engine config into the staging directory. Returns its path, if any."""
        return None

    def lint_files(self, paths: Sequence[Path], config_path: Optional[Path] = None) -> List[Dict[str, Any]]:
        """Return ESLint-style results: [{filePath, messages: [{ruleId, line, column, message, severity}]}]."""
        raise NotImplementedError


class ESLintEngine(LintEngine):
    """Invokes the ESLint CLI as a subprocess and parses its JSON formatter output."""

    def __init__(self, command: str = DEFAULT_ESLINT_COMMAND, timeout: Optional[float] = 60.0):
        self.command = shlex.split(command)
        self.timeout = timeout

    def write_config(self, directory: Path, config: AnalysisConfig) -> Path:
        path = directory / CONFIG_FILENAME
        path.write_text(json.dumps(build_eslint_config(config), indent=2), encoding="utf-8")
        return path

    def lint_files(self, paths: Sequence[Path], config_path: Optional[Path] = None) -> List[Dict[str, Any]]:
        args = list(self.command) + ["--no-eslintrc", "--format", "json"]
        if config_path is not None:
            args += ["--config", str(config_path)]
        args += [str(p) for p in paths]

        env = dict(os.environ)
        # eslintrc-style config needs the legacy loader on ESLint 9
        env["ESLINT_USE_FLAT_CONFIG"] = "false"
        logger.debug("Running %s", " ".join(args))
        try:
            proc = subprocess.run(
                args,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                env=env,
                check=False,
            )
        except FileNotFoundError as e:
            raise EngineUnavailableError(f"ESLint command not found: {self.command[0]}") from e
        except subprocess.TimeoutExpired as e:
            raise LintEngineError(f"ESLint timed out after {self.timeout}s") from e

        if proc.returncode not in (0, _LINT_PROBLEMS_EXIT):
            detail = (proc.stderr or proc.stdout or "").strip().splitlines()
            raise LintEngineError(
                f"ESLint exited with code {proc.returncode}: {detail[0] if detail else 'no output'}"
            )
        return parse_eslint_output(proc.stdout)


def parse_eslint_output(stdout: str) -> List[Dict[str, Any]]:
    """Parse the ESLint JSON formatter output."""
    try:
        results = json.loads(stdout)
    except json.JSONDecodeError as e:
        raise LintEngineError(f"Could not parse ESLint output: {e}") from e
    if not isinstance(results, list):
        raise LintEngineError("Unexpected ESLint output: expected a list of file results")
    return results
