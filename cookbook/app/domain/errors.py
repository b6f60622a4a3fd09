from __future__ import annotations


class CookbookError(Exception):
    pass


class ValidationError(CookbookError):
    def __init__(self, errors: list[str]):
        super().__init__(" ".join(errors) or "Invalid request")
        self.errors = list(errors)


class NotFoundError(CookbookError):
    def __init__(self, kind: str, item_id: object = None):
        super().__init__(f"{kind} not found.")
        self.kind = kind
        self.item_id = item_id


class AuthError(CookbookError):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class StoreError(CookbookError):
    def __init__(self, operation: str, reason: str):
        super().__init__(f"Content store error during {operation}: {reason}")
        self.operation = operation
        self.reason = reason


class MigrationError(StoreError):
    def __init__(self, version: int, reason: str):
        super().__init__(f"migration {version}", reason)
        self.version = version
