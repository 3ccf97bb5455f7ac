"""Startup validation and configuration checks."""

import logging
import shlex
import shutil

from js_compat_checker.platform_profile import load_platform_profile

from .config import get_eslint_command, get_log_level, get_platform_profile_path

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "") -> None:
    logging.basicConfig(level=(level or get_log_level()), format=LOG_FORMAT)


def _eslint_launcher() -> str:
    command = shlex.split(get_eslint_command())
    return command[0] if command else ""


def eslint_launcher_available() -> bool:
    launcher = _eslint_launcher()
    return bool(launcher) and shutil.which(launcher) is not None


def validate_config() -> None:
    """Validate config at startup and warn if ESLint or the platform profile are unusable."""
    if not eslint_launcher_available():
        print(f"⚠️  WARNING: ESLint launcher '{_eslint_launcher()}' not found on PATH.")
        print("   Install Node.js and run: npm install eslint@8 eslint-plugin-compat")
        print("   or set JS_COMPAT_ESLINT_COMMAND. Analysis requests will fail until then.")
    try:
        load_platform_profile(get_platform_profile_path())
    except (OSError, ValueError) as e:
        print(f"⚠️  WARNING: Platform profile could not be loaded: {e}")
        print("   Fix JS_COMPAT_PLATFORM_PROFILE or unset it to use the bundled profile.")
