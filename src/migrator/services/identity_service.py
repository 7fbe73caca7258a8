# migrator/services/identity_service.py
"""
Identity provisioning for migrated users.
"""

from migrator.models.choices import RoleClaimPolicy, UserRole
from migrator.models.legacy import LegacyUser
from migrator.providers.base import IdentityProvider
from migratorutils.logging import get_logger

logger = get_logger(__name__)


class IdentityService:
    """
    Creates one identity per legacy user and assigns its role claim.

    Under the FIXED role claim policy every identity is granted CLIENT,
    whatever role its profile document ends up with. The COMPUTED policy
    grants the profile role instead.
    """

    def __init__(
        self,
        provider: IdentityProvider,
        role_claim_policy: RoleClaimPolicy = RoleClaimPolicy.FIXED,
    ):
        self.provider = provider
        self.role_claim_policy = RoleClaimPolicy(role_claim_policy)

    def claim_role_for(self, profile_role: UserRole) -> UserRole:
        if self.role_claim_policy == RoleClaimPolicy.COMPUTED:
            return profile_role
        return UserRole.CLIENT

    def provision(self, user: LegacyUser, profile_role: UserRole) -> str:
        """
        Create the identity of ``user`` and set its role claim.

        A pre-existing ``uid`` is reused. Otherwise the provider allocates
        one and it is written back onto ``user`` for later linking.

        Raises:
            IdentityProvisioningError: If the provider rejects the identity
        """
        uid = self.provider.create_identity(user.uid, user.name, user.email)
        if not user.uid:
            user.uid = uid

        claim_role = self.claim_role_for(profile_role)
        self.provider.set_role_claim(uid, claim_role.value)

        logger.info(
            "identity_created",
            uid=uid,
            legacy_id=user.id,
            role_claim=claim_role.value,
        )
        return uid
