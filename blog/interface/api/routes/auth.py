"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel

from blog.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)

router = APIRouter(prefix="/api/auth", tags=["auth"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for registering an account."""

    username: str = ""
    email: str = ""
    password: str = ""


class LoginAPIRequest(BaseModel):
    """API request for logging in."""

    email: str = ""
    password: str = ""


class RegisterAPIResponse(RegisterResponse):
    success: bool = True
    message: str = "User registered successfully"


class LoginAPIResponse(LoginResponse):
    success: bool = True
    message: str = "Login successful"


class MeAPIResponse(GetCurrentUserResponse):
    success: bool = True


@router.post(
    "/register",
    response_model=RegisterAPIResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterAPIResponse:
    """Register a new account with the User role.

    Returns:
        Session token and the new user
    """
    result = await register_use_case.execute(
        RegisterRequest(
            username=request.username,
            email=request.email,
            password=request.password,
        )
    )
    return RegisterAPIResponse(**result.model_dump())


@router.post("/login", response_model=LoginAPIResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginAPIResponse:
    """Log in with email and password."""
    result = await login_use_case.execute(
        LoginRequest(email=request.email, password=request.password)
    )
    return LoginAPIResponse(**result.model_dump())


@router.get("/me", response_model=MeAPIResponse)
async def me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> MeAPIResponse:
    """Get the authenticated user."""
    result = await get_current_user_use_case.execute(
        GetCurrentUserRequest(authorization=authorization)
    )
    return MeAPIResponse(**result.model_dump())
