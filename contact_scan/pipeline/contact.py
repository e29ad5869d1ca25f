from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

DEFAULT_DISPLAY_NAME = "Nouveau contact"


class EmailAddress(BaseModel):
    address: str = ""
    name: Optional[str] = None


class ContactRecord(BaseModel):
    """Outlook contact as sent to / returned by Microsoft Graph (extra server fields ignored)."""
    id: Optional[str] = None
    givenName: str = ""
    surname: str = ""
    displayName: str = ""
    emailAddresses: List[EmailAddress] = Field(default_factory=list)
    businessPhones: List[str] = Field(default_factory=list)

    @field_validator("givenName", "surname", "displayName", mode="before")
    @classmethod
    def _none_to_empty_str(cls, v):
        return "" if v is None else v

    @field_validator("emailAddresses", "businessPhones", mode="before")
    @classmethod
    def _none_to_empty_list(cls, v):
        return [] if v is None else v

    def payload(self) -> dict:
        """Request body for POST /contacts."""
        return self.model_dump(exclude={"id"})


def split_full_name(full_name: str) -> tuple[str, str]:
    """("Marie", "Curie") for "Marie Curie"; ("", "") when there are fewer than two words."""
    parts = (full_name or "").split()
    if len(parts) >= 2:
        return parts[0], " ".join(parts[1:])
    return "", ""


def build_contact_record(display_name: str, email: str, phone: str) -> ContactRecord:
    given_name, surname = split_full_name(display_name)
    return ContactRecord(
        givenName=given_name,
        surname=surname,
        displayName=display_name or email or DEFAULT_DISPLAY_NAME,
        emailAddresses=[EmailAddress(address=email, name=display_name or email)] if email else [],
        businessPhones=[phone] if phone else [],
    )
