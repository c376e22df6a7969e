"""Conversion of raw plan JSON into the analyzer's data model."""

from .plan_normalizer import PlanFormatError, PlanNormalizer

__all__ = ["PlanFormatError", "PlanNormalizer"]
