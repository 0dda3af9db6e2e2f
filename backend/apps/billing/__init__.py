"""
Billing app - Paystack card verification and trial subscriptions.
"""
