"""Structural validation of assembled documents."""

from skuipy.validate.rules import (
    IdScopeRule,
    ParameterShapeRule,
    RelativeKeyRule,
    RootCardinalityRule,
    ValidationRule,
    default_validation_rules,
    validate_validation_rules,
)
from skuipy.validate.runner import run_validation

__all__ = [
    "IdScopeRule",
    "ParameterShapeRule",
    "RelativeKeyRule",
    "RootCardinalityRule",
    "ValidationRule",
    "default_validation_rules",
    "run_validation",
    "validate_validation_rules",
]
