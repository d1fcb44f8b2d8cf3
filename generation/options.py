"""Labelled form choices served to the presentation layer."""

from typing import Dict, List

from generation.models.core import AIPreference, EmailPurpose, EmailTone


PURPOSE_LABELS: Dict[str, str] = {
    EmailPurpose.THANK_YOU.value: "Thank You",
    EmailPurpose.JOB_APPLICATION.value: "Job Application",
    EmailPurpose.MEETING_REQUEST.value: "Meeting Request",
    EmailPurpose.FOLLOW_UP.value: "Follow Up",
    EmailPurpose.COMPLAINT.value: "Professional Complaint",
}

TONE_LABELS: Dict[str, str] = {
    EmailTone.CASUAL.value: "Casual (Friendly)",
    EmailTone.FORMAL.value: "Formal (Respectful)",
    EmailTone.BUSINESS.value: "Business (Professional)",
}

AI_PREFERENCE_LABELS: Dict[str, str] = {
    AIPreference.AUTO.value: "Auto (Recommended)",
    AIPreference.GEMINI.value: "Google Gemini",
    AIPreference.TEMPLATE.value: "Template Only",
}


def _as_options(labels: Dict[str, str]) -> List[Dict[str, str]]:
    return [{"value": value, "label": label} for value, label in labels.items()]


def get_email_purposes() -> List[Dict[str, str]]:
    return _as_options(PURPOSE_LABELS)


def get_email_tones() -> List[Dict[str, str]]:
    return _as_options(TONE_LABELS)


def get_ai_preferences() -> List[Dict[str, str]]:
    return _as_options(AI_PREFERENCE_LABELS)
