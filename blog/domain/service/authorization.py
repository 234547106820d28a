"""Authorization policy.

Pure decisions about who may author and who may modify content. Callers
check ``can_author`` before ``can_modify`` for posts; comments only need
``can_modify``.
"""

from blog.domain.error import ForbiddenError
from blog.domain.model import AuthenticatedUser
from blog.domain.value import Role, UserId


def can_author(role: Role) -> bool:
    """Whether the role may create, edit or delete posts."""
    return role.can_author


def can_modify(actor_id: UserId, actor_role: Role, owner_id: UserId) -> bool:
    """Whether the actor may modify content owned by ``owner_id``.

    Admins may modify anything; everyone else only their own content.
    """
    return actor_role.bypasses_ownership or actor_id == owner_id


def ensure_can_author(actor: AuthenticatedUser) -> None:
    """Raise ForbiddenError unless the actor's role may author posts."""
    if not can_author(actor.role):
        raise ForbiddenError()


def ensure_can_modify(actor: AuthenticatedUser, owner_id: UserId) -> None:
    """Raise ForbiddenError unless the actor may modify the owner's content."""
    if not can_modify(actor.user_id, actor.role, owner_id):
        raise ForbiddenError()
