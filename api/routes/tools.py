"""Password tools endpoints.

Public endpoints for password generation and strength checking.
Generated passwords are NOT cryptographically secure; every response
says so in ``cryptographically_secure``.
"""

from fastapi import APIRouter

from api.models import (
    PasswordGenerateRequest,
    PasswordGenerateResponse,
    PasswordCheckRequest,
    PasswordCheckResponse,
)
from cli.generator import build_alphabet, generate_password
from core import log_generation_event
from password_checker import calculate_strength, count_character_variety


router = APIRouter(tags=["Password Tools"])


@router.post("/generate", response_model=PasswordGenerateResponse)
async def generate_new_password(request: PasswordGenerateRequest):
    """Generate a pseudo-random password and rate it."""
    options = request.to_options()
    password = generate_password(request.length, options, seed=request.seed)

    strength = calculate_strength(password)
    alphabet_size = len(build_alphabet(options))

    log_generation_event(
        length=request.length,
        classes=options.selected_classes(),
        alphabet_size=alphabet_size,
        strength=strength.value,
        source="api",
    )

    return PasswordGenerateResponse(
        password=password,
        strength=strength.value,
        length=len(password),
        alphabet_size=alphabet_size,
    )


@router.post("/check", response_model=PasswordCheckResponse)
async def check_password(request: PasswordCheckRequest):
    """Rate a password by length and character variety."""
    return PasswordCheckResponse(
        strength=calculate_strength(request.password).value,
        variety=count_character_variety(request.password),
        length=len(request.password),
    )
