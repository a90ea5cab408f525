"""Application use cases package."""

from .create_account import CreateAccountUseCase

__all__ = ["CreateAccountUseCase"]
