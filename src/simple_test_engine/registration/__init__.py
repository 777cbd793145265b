"""Registration domain exports."""

from .case_models import HookKind, Modifier, RegistrationError, TestBody, TestCase
from .run_context import RunContext, default_context, new_context
from .suite_projection import QUALIFIED_NAME_SEPARATOR, SuiteProjector

__all__ = [
    "HookKind",
    "Modifier",
    "TestBody",
    "TestCase",
    "RegistrationError",
    "RunContext",
    "default_context",
    "new_context",
    "QUALIFIED_NAME_SEPARATOR",
    "SuiteProjector",
]
