from .entitlement_evaluator import EntitlementEvaluator

__all__ = ["EntitlementEvaluator"]
