"""Pydantic models for API request/response validation.

Defines data structures for all API endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field

from core import PasswordOptions
from core.config import MIN_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH, DEFAULT_PASSWORD_LENGTH


class PasswordGenerateRequest(BaseModel):
    """Request model for password generation."""
    length: int = Field(
        default=DEFAULT_PASSWORD_LENGTH,
        ge=MIN_PASSWORD_LENGTH,
        le=MAX_PASSWORD_LENGTH,
        description="Password length"
    )
    include_uppercase: bool = Field(default=True, description="Include uppercase letters")
    include_lowercase: bool = Field(default=True, description="Include lowercase letters")
    include_numbers: bool = Field(default=True, description="Include digits")
    include_symbols: bool = Field(default=True, description="Include symbols")
    seed: Optional[int] = Field(
        default=None,
        ge=0,
        description="Fixed generator seed for reproducible output (defaults to the clock)"
    )

    def to_options(self) -> PasswordOptions:
        """Convert the class flags to PasswordOptions."""
        return PasswordOptions(
            include_uppercase=self.include_uppercase,
            include_lowercase=self.include_lowercase,
            include_numbers=self.include_numbers,
            include_symbols=self.include_symbols,
        )


class PasswordGenerateResponse(BaseModel):
    """Response model for generated password."""
    password: str
    strength: str
    length: int
    alphabet_size: int
    cryptographically_secure: bool = False


class PasswordCheckRequest(BaseModel):
    """Request model for password strength check."""
    password: str = Field(..., min_length=1, description="Password to check")


class PasswordCheckResponse(BaseModel):
    """Response model for password check."""
    strength: str
    variety: int
    length: int


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    version: str
