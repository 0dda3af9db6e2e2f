"""
Organizations app - tenants, super-admin provisioning and dashboard stats.
"""
