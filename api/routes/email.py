"""
Email generation API endpoints.

Generation is synchronous: the request returns once Gemini (or the
template engine) has produced the email. One generation runs at a time.
"""

from fastapi import APIRouter, Depends, HTTPException, status
import logfire

from api.dependencies import get_generation_session
from generation.core.exceptions import GenerationInProgressError
from generation.core.session import GenerationSession
from generation.options import get_ai_preferences, get_email_purposes, get_email_tones
from schemas.email import EmailOptionsResponse, GenerateEmailRequest, GeneratedEmailResponse


router = APIRouter(prefix="/api/email", tags=["Email Generation"])


@router.get("/options", response_model=EmailOptionsResponse)
async def get_options():
    """
    List the labelled choices for purpose, tone and AI preference.

    Returns:
        EmailOptionsResponse: Form choices and word-count bounds
    """
    return EmailOptionsResponse(
        purposes=get_email_purposes(),
        tones=get_email_tones(),
        ai_preferences=get_ai_preferences(),
    )


@router.post("/generate", response_model=GeneratedEmailResponse)
async def generate_email(
    request: GenerateEmailRequest,
    session: GenerationSession = Depends(get_generation_session),
):
    """
    Generate an email and make it the current one.

    Uses Google Gemini when preferred and an API key is configured,
    otherwise the template engine. Gemini failures fall back to the
    template engine; the response `notice` explains why.

    Args:
        request: Form fields
        session: Generation session (injected by dependency)

    Returns:
        GeneratedEmailResponse: The new current email

    Raises:
        HTTPException 409: If another generation is still running
    """
    with logfire.span(
        "api.generate_email",
        purpose=request.purpose,
        tone=request.tone,
        ai_preference=request.ai_preference.value,
    ):
        try:
            email = await session.submit(request.to_email_request())
        except GenerationInProgressError as e:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=str(e)
            )

        logfire.info(
            "Email generation request completed",
            provenance=email.provenance.value,
            has_notice=email.notice is not None,
        )

        return email


@router.get("/current", response_model=GeneratedEmailResponse)
async def get_current_email(
    session: GenerationSession = Depends(get_generation_session),
):
    """
    Return the most recently generated email.

    Raises:
        HTTPException 404: If nothing has been generated yet
    """
    email = session.current
    if email is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No email has been generated yet"
        )
    return email


@router.delete("/current", status_code=status.HTTP_204_NO_CONTENT)
async def clear_current_email(
    session: GenerationSession = Depends(get_generation_session),
):
    """Forget the current email."""
    session.clear()
    logfire.info("Current email cleared")
