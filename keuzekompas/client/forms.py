"""Form state and validation for the login, register and module editor screens.

``validate()`` returns the first problem found as a message, or ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from keuzekompas.features.modules.schemas import ModuleOut

CREDIT_OPTIONS: List[int] = [15, 30]
LEVEL_OPTIONS: List[str] = ["NLQF5", "NLQF6"]
LOCATION_OPTIONS: List[str] = ["Breda", "Den Bosch", "Tilburg"]

MIN_PASSWORD_LENGTH = 6


@dataclass
class LoginForm:
    email: str = ""
    password: str = ""

    def validate(self) -> Optional[str]:
        if not self.email.strip() or not self.password:
            return "Please fill in all fields"
        return None


@dataclass
class RegisterForm:
    name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""

    def validate(self) -> Optional[str]:
        if not (self.name.strip() and self.email.strip() and self.password and self.confirm_password):
            return "Please fill in all fields"
        if self.password != self.confirm_password:
            return "Passwords do not match"
        if len(self.password) < MIN_PASSWORD_LENGTH:
            return f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        return None


@dataclass
class ModuleForm:
    """Create/edit state for one module; ``editing`` hides the id field."""

    name: str = ""
    module_id: Optional[int] = None
    shortdescription: str = ""
    description: str = ""
    content: str = ""
    studycredit: Optional[int] = CREDIT_OPTIONS[0]
    location: str = ""
    contact_id: Optional[int] = None
    level: str = ""
    learningoutcomes: str = ""
    editing: bool = False

    credit_options = CREDIT_OPTIONS
    level_options = LEVEL_OPTIONS
    location_options = LOCATION_OPTIONS

    @classmethod
    def from_module(cls, module: ModuleOut) -> "ModuleForm":
        return cls(
            name=module.name,
            module_id=module.id,
            shortdescription=module.shortdescription or "",
            description=module.description or "",
            content=module.content or "",
            studycredit=module.studycredit,
            location=module.location,
            contact_id=module.contact_id,
            level=module.level,
            learningoutcomes=module.learningoutcomes or "",
            editing=True,
        )

    def validate(self) -> Optional[str]:
        if not self.name.strip():
            return "Name is required"
        if not self.editing and not self.module_id:
            return "Module ID is required"
        if not self.studycredit or self.studycredit <= 0:
            return "Study credits must be greater than 0"
        if not self.location.strip():
            return "Location is required"
        if not self.level.strip():
            return "Level is required"
        return None

    def _fields(self) -> Dict[str, Any]:
        return {
            "name": self.name.strip(),
            "shortdescription": self.shortdescription,
            "description": self.description,
            "content": self.content,
            "studycredit": self.studycredit,
            "location": self.location.strip(),
            "contact_id": self.contact_id,
            "level": self.level.strip(),
            "learningoutcomes": self.learningoutcomes,
        }

    def to_create_payload(self) -> Dict[str, Any]:
        return {"id": self.module_id, **self._fields()}

    def to_update_payload(self) -> Dict[str, Any]:
        return self._fields()
