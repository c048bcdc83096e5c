from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

PROFILE_FIELDS = ("full_name", "address", "gps_location", "phone_number", "birthday", "gender", "referral_source")

# Accepted client spellings per field, in order of preference
FIELD_SPELLINGS = {
    "full_name": ("full_name", "fullName"),
    "address": ("address",),
    "gps_location": ("gps_location", "gpsLocation"),
    "phone_number": ("phone_number", "phoneNumber"),
    "birthday": ("birthday",),
    "gender": ("gender",),
    "referral_source": ("referral_source", "referralSource"),
}


def is_blank(value) -> bool:
    return value is None or value == ""


class ProfileFields(BaseModel):
    full_name: Optional[str] = None
    address: Optional[str] = None
    gps_location: Optional[str] = None
    phone_number: Optional[str] = None
    birthday: Optional[str] = None
    gender: Optional[str] = None
    referral_source: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def merge_spellings(cls, data):
        """Fold both spellings into the canonical name; blank values fall through to the next spelling."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for field, spellings in FIELD_SPELLINGS.items():
            value = next((data[name] for name in spellings if not is_blank(data.get(name))), None)
            for name in spellings:
                data.pop(name, None)
            if value is not None:
                data[field] = value
        return data

    def supplied(self) -> dict:
        """Canonical field set holding only the non-blank values the client sent."""
        return {k: v for k, v in self.model_dump(include=set(PROFILE_FIELDS)).items() if not is_blank(v)}


class ProfileUpdate(ProfileFields):
    pass


class ProfileResponse(BaseModel):
    id: str
    user_id: str
    full_name: Optional[str] = None
    address: Optional[str] = None
    gps_location: Optional[str] = None
    phone_number: Optional[str] = None
    birthday: Optional[str] = None
    gender: Optional[str] = None
    referral_source: Optional[str] = None
    referral_id: Optional[str] = None
    created_at: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class AdminProfileResponse(ProfileResponse):
    email: str
    joined_at: Optional[str] = None
