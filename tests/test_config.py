from __future__ import annotations

import os
import unittest
from pathlib import Path
from unittest import mock

from app import config as app_config
from js_compat_checker.config import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_POLYFILLS,
    DEFAULT_TARGET_BROWSERS,
    AnalysisConfig,
)


class EnvConfigTests(unittest.TestCase):
    def test_defaults_when_unset(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            config = app_config.get_analysis_config()
            self.assertEqual(config.target_browsers, DEFAULT_TARGET_BROWSERS)
            self.assertEqual(config.known_polyfills, DEFAULT_POLYFILLS)
            self.assertEqual(config.max_workers, DEFAULT_MAX_WORKERS)
            self.assertIsNone(app_config.get_platform_profile_path())
            self.assertEqual(app_config.get_eslint_timeout(), 60.0)
            self.assertEqual(app_config.get_port(), 8000)

    def test_lists_are_comma_separated(self) -> None:
        env = {"JS_COMPAT_TARGET_BROWSERS": "IE 11, iOS 15.5 ,", "JS_COMPAT_POLYFILLS": "fetch,Promise"}
        with mock.patch.dict(os.environ, env, clear=True):
            self.assertEqual(app_config.get_target_browsers(), ("IE 11", "iOS 15.5"))
            self.assertEqual(app_config.get_known_polyfills(), ("fetch", "Promise"))

    def test_empty_polyfills_disables_suppression(self) -> None:
        with mock.patch.dict(os.environ, {"JS_COMPAT_POLYFILLS": ""}, clear=True):
            self.assertEqual(app_config.get_known_polyfills(), ())

    def test_invalid_numbers_fall_back(self) -> None:
        env = {"JS_COMPAT_MAX_WORKERS": "zero", "JS_COMPAT_FETCH_TIMEOUT": "soon", "PORT": "http"}
        with mock.patch.dict(os.environ, env, clear=True):
            self.assertEqual(app_config.get_max_workers(), DEFAULT_MAX_WORKERS)
            self.assertEqual(app_config.get_fetch_timeout(), 15.0)
            self.assertEqual(app_config.get_port(), 8000)
        with mock.patch.dict(os.environ, {"JS_COMPAT_MAX_WORKERS": "-3"}, clear=True):
            self.assertEqual(app_config.get_max_workers(), DEFAULT_MAX_WORKERS)

    def test_profile_path(self) -> None:
        with mock.patch.dict(os.environ, {"JS_COMPAT_PLATFORM_PROFILE": "/etc/profiles/android.json"}, clear=True):
            self.assertEqual(app_config.get_platform_profile_path(), Path("/etc/profiles/android.json"))


class AnalysisConfigTests(unittest.TestCase):
    def test_overrides_return_new_config(self) -> None:
        base = AnalysisConfig()
        changed = base.with_overrides(target_browsers=["IE 11"], known_polyfills=[], max_workers=2)
        self.assertEqual(changed.target_browsers, ("IE 11",))
        self.assertEqual(changed.known_polyfills, ())
        self.assertEqual(changed.max_workers, 2)
        self.assertEqual(base.target_browsers, DEFAULT_TARGET_BROWSERS)

    def test_blank_overrides_keep_current_values(self) -> None:
        base = AnalysisConfig(known_polyfills=("fetch",))
        same = base.with_overrides(target_browsers=[" "], known_polyfills=None, max_workers=None)
        self.assertEqual(same, base)

    def test_zero_workers_override_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            AnalysisConfig().with_overrides(max_workers=0)

    def test_invalid_config_rejected(self) -> None:
        with self.assertRaises(ValueError):
            AnalysisConfig(max_workers=0)
        with self.assertRaises(ValueError):
            AnalysisConfig(target_browsers=())


if __name__ == "__main__":
    unittest.main()
