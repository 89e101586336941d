# Standard library imports
import logging
from typing import List, NoReturn

# External package imports
from fastapi import APIRouter, HTTPException, Response, status

# Local application imports
from ...application.dto.user_dto import CreateUserRequest, UpdateUserRequest, UserResponse
from ...application.use_cases.user import (
    CreateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
)
from ...domain.exceptions import (
    DuplicateEmailError,
    InvalidArgumentError,
    InvalidUserStateError,
    StorageInconsistencyError,
    UserNotFoundError,
    ValidationFailedError,
)
from ...di.container import get_container

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


def _raise_http_error(exception: Exception) -> NoReturn:
    """Translate a use-case failure into the matching HTTP error"""
    if isinstance(exception, (ValidationFailedError, InvalidUserStateError, InvalidArgumentError)):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exception, UserNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exception, DuplicateEmailError):
        status_code = status.HTTP_409_CONFLICT
    else:
        # StorageInconsistencyError and anything else is a server-side fault
        logger.error(f"User storage failure: {exception}")
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    raise HTTPException(status_code=status_code, detail=str(exception))


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(request: CreateUserRequest) -> UserResponse:
    """
    Create a new user
    
    Args:
        request: User creation request
        
    Returns:
        UserResponse with created user information
    """
    container = get_container()
    create_user_use_case = container.get(CreateUserUseCase)
    
    try:
        return await create_user_use_case.execute(request)
    except (ValidationFailedError, InvalidUserStateError, DuplicateEmailError) as exception:
        _raise_http_error(exception)


@router.get("", response_model=List[UserResponse])
async def list_users() -> List[UserResponse]:
    """
    List all users
    
    Returns:
        List of UserResponse objects
    """
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)
    
    return await list_users_use_case.execute()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int) -> UserResponse:
    """
    Get a user by ID
    
    Args:
        user_id: ID of the user
        
    Returns:
        UserResponse with user information
    """
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)
    
    try:
        return await get_user_use_case.execute(user_id)
    except (InvalidArgumentError, UserNotFoundError) as exception:
        _raise_http_error(exception)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(user_id: int, request: UpdateUserRequest) -> UserResponse:
    """
    Update an existing user
    
    Args:
        user_id: ID of the user to update
        request: User update request
        
    Returns:
        UserResponse with updated user information
    """
    container = get_container()
    update_user_use_case = container.get(UpdateUserUseCase)
    
    try:
        return await update_user_use_case.execute(user_id, request)
    except (
        InvalidArgumentError,
        ValidationFailedError,
        InvalidUserStateError,
        UserNotFoundError,
        DuplicateEmailError,
        StorageInconsistencyError,
    ) as exception:
        _raise_http_error(exception)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int) -> Response:
    """
    Delete a user by ID
    
    Args:
        user_id: ID of the user to delete
    """
    container = get_container()
    delete_user_use_case = container.get(DeleteUserUseCase)
    
    try:
        await delete_user_use_case.execute(user_id)
    except (InvalidArgumentError, UserNotFoundError, StorageInconsistencyError) as exception:
        _raise_http_error(exception)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
