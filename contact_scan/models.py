from dataclasses import dataclass, asdict
from typing import Dict


@dataclass
class RawBody:
    html: str
    text: str


@dataclass
class SenderIdentity:
    email: str = ""
    name: str = ""


@dataclass
class ExtractionResult:
    """Values offered to the user before the contact is created. Missing values are ""."""
    full_name: str = ""
    phone: str = ""
    email: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"fullName": self.full_name, "phone": self.phone, "email": self.email}


@dataclass
class Status:
    message: str
    ok: bool = False


@dataclass
class ContactForm:
    """Editable fields shown to the user; the create action reads them, not the scan result."""
    full_name: str = ""
    email: str = ""
    phone: str = ""

    def apply(self, result: ExtractionResult) -> None:
        # a miss never clears what the user already typed
        if result.full_name:
            self.full_name = result.full_name
        if result.email:
            self.email = result.email
        if result.phone:
            self.phone = result.phone

    def snapshot(self) -> "ContactForm":
        return ContactForm(
            full_name=(self.full_name or "").strip(),
            email=(self.email or "").strip(),
            phone=(self.phone or "").strip(),
        )

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
