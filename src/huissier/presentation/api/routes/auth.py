"""
Wallet authentication API routes.

Challenge-response login for Solana wallets:
- POST /nonce    - issue a nonce for the wallet to sign
- POST /verify   - check the signed nonce and open a session
- POST /register - register a wallet explicitly
- POST /logout   - end the session (client discards its token)
"""

from fastapi import APIRouter, Depends, status

from huissier.application.use_cases import IssueNonce, RegisterWallet, VerifyWallet
from huissier.di.dependencies import (
    get_issue_nonce,
    get_register_wallet,
    get_verify_wallet,
)
from huissier.domain.services import build_challenge_message
from huissier.presentation.schemas import (
    AuthResponse,
    ErrorResponse,
    MessageResponse,
    NonceRequest,
    NonceResponse,
    RegisterRequest,
    UserResponse,
    VerifyRequest,
)

router = APIRouter(tags=["Authentication"])


@router.post(
    "/nonce",
    response_model=NonceResponse,
    status_code=status.HTTP_200_OK,
    summary="Request a sign-in challenge",
    responses={400: {"model": ErrorResponse}},
)
async def request_nonce(
    request: NonceRequest,
    use_case: IssueNonce = Depends(get_issue_nonce),
) -> NonceResponse:
    """
    Issue a fresh nonce for a wallet.

    Unknown wallets get a user record on first request. Any earlier,
    unused nonce for the wallet stops being valid.
    """
    result = await use_case.execute(
        wallet_address=request.wallet_address,
        wallet_provider=request.wallet_provider,
    )

    return NonceResponse(
        message=build_challenge_message(result.nonce),
        nonce=result.nonce,
        wallet_address=result.wallet_address,
    )


@router.post(
    "/verify",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
    summary="Verify a signed challenge",
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def verify_signature(
    request: VerifyRequest,
    use_case: VerifyWallet = Depends(get_verify_wallet),
) -> AuthResponse:
    """
    Verify the wallet's signature over the challenge message.

    Flow:
    1. Look up the wallet's user
    2. Compare the supplied nonce with the stored one
    3. Verify the Ed25519 signature over the challenge message
    4. Record the login and mint a session token
    """
    result = await use_case.execute(
        wallet_address=request.wallet_address,
        signature=request.signature,
        nonce=request.nonce,
        wallet_provider=request.wallet_provider,
    )

    return AuthResponse(
        message="Authentication successful",
        user=UserResponse.from_entity(result.user),
        token=result.token,
    )


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a wallet",
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def register_wallet(
    request: RegisterRequest,
    use_case: RegisterWallet = Depends(get_register_wallet),
) -> AuthResponse:
    result = await use_case.execute(
        wallet_address=request.wallet_address,
        wallet_provider=request.wallet_provider,
    )

    return AuthResponse(
        message="User registered successfully",
        user=UserResponse.from_entity(result.user),
        token=result.token,
    )


@router.post(
    "/logout",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Log out",
)
async def logout() -> MessageResponse:
    """
    Acknowledge logout.

    Tokens are stateless; the client drops its copy and the token lapses
    at expiry.
    """
    return MessageResponse(message="Logged out successfully")
