"""
Toolkit-independent validation engine.

This package resolves criteria, compiles them into full-string matchers,
caches validity until the text changes, and runs the sanitization hook.
"""

from .config import FieldConfig
from .controller import ValidationController
from .criteria import Criterion, ValidationKind, kind_from_name, kind_from_value, pattern_for
from .errors import ConfigError, PatternError, SanitizerError
from .host import ValidationHost, bind_host
from .pattern_compiler import CompiledMatcher, compile_pattern
from .revalidation import RevalidationPhase, RevalidationState
from .sanitizer import Sanitizer, run_sanitizer

__all__ = [
    "CompiledMatcher",
    "ConfigError",
    "Criterion",
    "FieldConfig",
    "PatternError",
    "RevalidationPhase",
    "RevalidationState",
    "Sanitizer",
    "SanitizerError",
    "ValidationController",
    "ValidationHost",
    "ValidationKind",
    "bind_host",
    "compile_pattern",
    "kind_from_name",
    "kind_from_value",
    "pattern_for",
    "run_sanitizer",
]
