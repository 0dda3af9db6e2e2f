"""
Accounts app - users, organization members and invitations mirrored from Stytch.
"""
