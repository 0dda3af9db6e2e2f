"""
Identity configuration constants.

Stytch role ids must match the configuration in the Stytch Dashboard.
See: https://stytch.com/docs/b2b/guides/rbac/overview
"""


class StytchRoles:
    """
    Stytch RBAC role identifiers.

    These must match the role IDs configured in the Stytch Dashboard.
    """

    ADMIN = "stytch_admin"
    """Admin role ID - grants full organization management permissions."""


class OrgRoles:
    """Organization roles as stored on Member and carried in request claims."""

    ADMIN = "org:admin"
    MEMBER = "org:member"

    CHOICES = [(ADMIN, "Admin"), (MEMBER, "Member")]


SUPER_ADMIN_METADATA_ROLE = "super_admin"
"""Value of ``trusted_metadata.role`` that marks a Stytch member as super-admin."""

SUPER_ORG_ID = "SUPER_ORG"
"""Reserved organization id used for the super-admin area. Never a real tenant."""
