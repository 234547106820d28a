"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from blog.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from blog.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """One use case instance per request."""

    scope = Scope.REQUEST

    # Auth
    register = provide(RegisterUseCase)
    login = provide(LoginUseCase)
    get_current_user = provide(GetCurrentUserUseCase)

    # Posts
    list_posts = provide(ListPostsUseCase)
    get_post = provide(GetPostUseCase)
    create_post = provide(CreatePostUseCase)
    update_post = provide(UpdatePostUseCase)
    delete_post = provide(DeletePostUseCase)

    # Comments
    list_comments = provide(ListCommentsUseCase)
    create_comment = provide(CreateCommentUseCase)
    update_comment = provide(UpdateCommentUseCase)
    delete_comment = provide(DeleteCommentUseCase)
