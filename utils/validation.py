"""
Validation Module - Contact form payload schema
"""

from flask import current_app
from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError


# Matches the String(255) columns of ContactMessage
MAX_FIELD_LENGTH = 255

# Field-level messages shown to the visitor, keyed by the public (camelCase) field name
FIELD_MESSAGES = {
    'firstName': 'First name is required',
    'lastName': 'Last name is required',
    'email': 'Valid email is required',
    'subject': 'Subject is required',
    'message': 'Message must be at least {min_length} characters',
}

FIELD_LABELS = {
    'firstName': 'First name',
    'lastName': 'Last name',
    'subject': 'Subject',
}

FIELD_ORDER = list(FIELD_MESSAGES)


class ContactSubmission(BaseModel):
    """A validated contact form submission"""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra='ignore')

    first_name: str = Field(alias='firstName', min_length=1, max_length=MAX_FIELD_LENGTH)
    last_name: str = Field(alias='lastName', min_length=1, max_length=MAX_FIELD_LENGTH)
    email: EmailStr
    subject: str = Field(min_length=1, max_length=MAX_FIELD_LENGTH)
    message: str

    @field_validator('first_name', 'last_name', 'subject')
    @classmethod
    def single_line(cls, value):
        # These end up in email headers
        if '\r' in value or '\n' in value:
            raise PydanticCustomError('single_line', 'must be a single line')
        return value

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"


def _public_field_name(loc):
    """Map a pydantic error location back to the camelCase form field"""
    if not loc:
        return None
    name = str(loc[0])
    aliases = {'first_name': 'firstName', 'last_name': 'lastName'}
    return aliases.get(name, name)


def _error_message(field, error_type, min_length):
    label = FIELD_LABELS.get(field)
    if label and error_type == 'single_line':
        return f"{label} must be a single line"
    if label and error_type == 'string_too_long':
        return f"{label} must be at most {MAX_FIELD_LENGTH} characters"
    return FIELD_MESSAGES[field].format(min_length=min_length)


def validate_contact_payload(payload, min_length=None):
    """
    Validate a contact form payload

    Args:
        payload: Decoded JSON body; anything other than a dict is treated as empty
        min_length (int, optional): Minimum message length, defaults to CONTACT_MESSAGE_MIN_LENGTH

    Returns:
        tuple: (ContactSubmission, None) when valid, (None, errors) otherwise.
            errors is a list of {'field', 'message'} dicts, one per failing field.
    """
    if min_length is None:
        min_length = current_app.config.get('CONTACT_MESSAGE_MIN_LENGTH', 10)
    if not isinstance(payload, dict):
        payload = {}

    failed = {}
    submission = None
    try:
        submission = ContactSubmission.model_validate(payload)
    except ValidationError as e:
        for error in e.errors():
            field = _public_field_name(error.get('loc'))
            if field in FIELD_MESSAGES and field not in failed:
                failed[field] = _error_message(field, error.get('type'), min_length)

    # Length is checked outside the schema so the minimum follows the app config
    message = payload.get('message')
    if not isinstance(message, str) or len(message.strip()) < min_length:
        failed['message'] = FIELD_MESSAGES['message'].format(min_length=min_length)

    if failed:
        errors = [
            {'field': field, 'message': failed[field]}
            for field in FIELD_ORDER if field in failed
        ]
        return None, errors

    return submission, None


__all__ = [
    'ContactSubmission',
    'FIELD_MESSAGES',
    'MAX_FIELD_LENGTH',
    'validate_contact_payload'
]
