"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.domain.service import (
    AuthService,
    CommentService,
    JWTService,
    PostService,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services, built from their constructor annotations.

    Services that touch repositories live per request, next to the session.
    JWTService only needs settings and is shared.
    """

    scope = Scope.REQUEST

    jwt_service = provide(JWTService, scope=Scope.APP)
    auth_service = provide(AuthService)
    user_service = provide(UserService)
    post_service = provide(PostService)
    comment_service = provide(CommentService)
