"""Billing domain: subscription state and track entitlement."""
