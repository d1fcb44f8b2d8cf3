"""Gemini API key management and service status endpoints."""

import logfire
from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_credentials, get_gemini_client
from generation.steps.ai_client.main import GeminiClient
from schemas.credentials import CredentialStatusResponse, SaveCredentialRequest
from services.credential_store import CredentialStore


router = APIRouter(prefix="/api/credentials", tags=["Credentials"])


async def _status(
    credentials: CredentialStore,
    client: GeminiClient,
    probe: bool,
) -> CredentialStatusResponse:
    credential = credentials.load()
    connected = None
    if probe:
        connected = await client.probe_connection(credential)

    return CredentialStatusResponse(
        configured=credential is not None,
        source=credentials.source(),
        connected=connected,
    )


@router.get("/status", response_model=CredentialStatusResponse)
async def get_credential_status(
    probe: bool = True,
    credentials: CredentialStore = Depends(get_credentials),
    client: GeminiClient = Depends(get_gemini_client),
):
    """
    Report whether a Gemini API key is configured and working.

    Args:
        probe: Send a minimal request to Gemini to check the key (default: true)

    Returns:
        CredentialStatusResponse: configured/source/connected flags
    """
    with logfire.span("api.credential_status", probe=probe):
        result = await _status(credentials, client, probe)
        logfire.info(
            "Credential status checked",
            configured=result.configured,
            source=result.source,
            connected=result.connected,
        )
        return result


@router.put("", response_model=CredentialStatusResponse)
async def save_credential(
    request: SaveCredentialRequest,
    credentials: CredentialStore = Depends(get_credentials),
    client: GeminiClient = Depends(get_gemini_client),
):
    """
    Save a Gemini API key, replacing any previous one.

    Returns the status after saving, including a live probe of the new key.

    Raises:
        HTTPException 400: If the key is blank
    """
    try:
        credentials.save(request.api_key)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return await _status(credentials, client, probe=True)


@router.delete("", response_model=CredentialStatusResponse)
async def remove_credential(
    credentials: CredentialStore = Depends(get_credentials),
    client: GeminiClient = Depends(get_gemini_client),
):
    """
    Remove the saved Gemini API key.

    A GOOGLE_API_KEY from the environment, if set, remains in effect.
    """
    credentials.clear()
    return await _status(credentials, client, probe=False)
