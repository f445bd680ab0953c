from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


class CamelModel(BaseModel):
    """Base des schémas : snake_case côté Python, camelCase côté JSON."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
        use_enum_values = True


def require_min_length(value: str, length: int, message: str) -> str:
    value = (value or "").strip()
    if len(value) < length:
        raise PydanticCustomError("too_short", message)
    return value


# Messages affichés tels quels par les formulaires
NAME_REQUIRED = "Le nom est obligatoire"
PHONE_REQUIRED = "Le numéro de téléphone est obligatoire"
EMAIL_INVALID = "Adresse email invalide"
