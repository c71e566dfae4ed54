from fastapi import HTTPException, status


class MissingFieldsException(HTTPException):
    def __init__(self, fields: list[str] | None = None):
        detail = "Please fill out all required fields."
        if fields:
            detail = f"Missing required fields: {', '.join(fields)}"
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class InvalidFieldException(HTTPException):
    def __init__(self, field: str, reason: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {field}: {reason}"
        )


class IdentifierTakenException(HTTPException):
    # a duplicate identifier is reported as a server error on this API
    def __init__(self, field: str = "phone number"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"User with this {field} already exists."
        )


class UserNotFoundException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found. Please register first."
        )


class InvalidCredentialsException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid phone number or password.",
            headers={"WWW-Authenticate": "Bearer"},
        )


class TokenExpiredException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired.",
            headers={"WWW-Authenticate": "Bearer"},
        )


class TokenInvalidException(HTTPException):
    def __init__(self, detail: str = "Token is invalid."):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ForbiddenIdentityException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Token does not belong to this user."
        )


class RouteNotFoundException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="API endpoint not found."
        )


class StoreException(HTTPException):
    def __init__(self, detail: str = "Database error. Please try again later."):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class IdentityProviderUnavailableException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Could not reach the identity provider."
        )
