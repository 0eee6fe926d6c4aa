"""Vendor-neutral payment provider contract with Stripe and PayPal gateways."""

__version__ = "0.1.0"
