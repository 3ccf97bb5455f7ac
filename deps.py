"""Centralized imports for the app layer (CLI, services, formatters)."""

# Standard library
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

# External
from fastapi import HTTPException
