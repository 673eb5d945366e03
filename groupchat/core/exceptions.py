from fastapi import HTTPException, status


class ChatServiceError(HTTPException):
    def __init__(self, detail: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(status_code=status_code, detail=detail)


class InvalidInputError(ChatServiceError):
    def __init__(self, detail: str):
        super().__init__(detail=detail, status_code=status.HTTP_400_BAD_REQUEST)


class UserNotFoundError(ChatServiceError):
    def __init__(self, detail: str = "User not found"):
        super().__init__(detail=detail, status_code=status.HTTP_404_NOT_FOUND)


class GroupNotFoundError(ChatServiceError):
    def __init__(self):
        super().__init__(detail="Group not found", status_code=status.HTTP_404_NOT_FOUND)


class MembershipNotFoundError(ChatServiceError):
    def __init__(self):
        super().__init__(detail="User is not a member of this group", status_code=status.HTTP_404_NOT_FOUND)


class UsernameTakenError(ChatServiceError):
    def __init__(self):
        super().__init__(detail="Username already taken", status_code=status.HTTP_409_CONFLICT)


class GroupNameTakenError(ChatServiceError):
    def __init__(self):
        super().__init__(detail="Group name already taken", status_code=status.HTTP_409_CONFLICT)


class NotAMemberError(ChatServiceError):
    def __init__(self):
        super().__init__(detail="User is not a member of this group", status_code=status.HTTP_403_FORBIDDEN)


class NotGroupOwnerError(ChatServiceError):
    def __init__(self, detail: str = "Only the group owner can perform this action"):
        super().__init__(detail=detail, status_code=status.HTTP_403_FORBIDDEN)


class CannotRemoveOwnerError(ChatServiceError):
    def __init__(self):
        super().__init__(
            detail="Cannot remove the group owner from the group",
            status_code=status.HTTP_403_FORBIDDEN,
        )


class StorageError(ChatServiceError):
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(detail=detail, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
