"""
Accounts models - users, memberships and invitations.
"""

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models

from apps.accounts.constants import OrgRoles


class UserManager(BaseUserManager):
    """Custom manager for User model."""

    def create_user(
        self,
        email: str,
        **extra_fields,
    ) -> "User":
        """Create and return a regular user."""
        if not email:
            raise ValueError("Email is required")

        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        # No password - Stytch handles authentication
        user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_superuser(
        self,
        email: str,
        **extra_fields,
    ) -> "User":
        """Create and return a superuser (for Django admin access)."""
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self.create_user(email, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """
    Custom User model - cross-org identity.

    This is AUTH_USER_MODEL. Stytch handles authentication;
    we mirror the identity and its global role claim locally.
    """

    email = models.EmailField(unique=True, db_index=True)
    name = models.CharField(max_length=255, blank=True)

    # Global role claim, orthogonal to any organization
    is_super_admin = models.BooleanField(
        default=False,
        help_text="Can provision organizations and view the default checklist",
    )

    # Django auth compatibility
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(
        default=False,
        help_text="Can access Django admin",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.email


class Member(models.Model):
    """
    Org-scoped membership linking User to Organization.

    Role is fixed at invite time and synced from Stytch RBAC.
    """

    stytch_member_id = models.CharField(
        max_length=255,
        unique=True,
        db_index=True,
        help_text="Stytch member_id, e.g. 'member-xxx'",
    )

    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name="memberships",
    )
    organization = models.ForeignKey(
        "organizations.Organization",
        on_delete=models.CASCADE,
        to_field="stytch_org_id",
        db_column="org_id",
        related_name="members",
    )

    role = models.CharField(
        max_length=50,
        choices=OrgRoles.CHOICES,
        default=OrgRoles.MEMBER,
    )
    created_by = models.CharField(
        max_length=255,
        blank=True,
        help_text="Email of whoever invited or created this member",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        unique_together = ["user", "organization"]

    def __str__(self) -> str:
        return f"{self.user.email} @ {self.organization.name} ({self.role})"

    @property
    def is_admin(self) -> bool:
        return self.role == OrgRoles.ADMIN


class Invitation(models.Model):
    """
    Single-use invitation into an organization.

    Claimed when a member with the same email is first synced into the
    organization.
    """

    email = models.EmailField(db_index=True)
    role = models.CharField(max_length=50, choices=OrgRoles.CHOICES, default=OrgRoles.ADMIN)
    organization = models.ForeignKey(
        "organizations.Organization",
        on_delete=models.CASCADE,
        to_field="stytch_org_id",
        db_column="org_id",
        related_name="invitations",
    )
    invited_by = models.CharField(max_length=255, blank=True)
    claimed = models.BooleanField(default=False)
    claimed_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.email} -> {self.organization_id} ({'claimed' if self.claimed else 'pending'})"
