"""E.164 formatting for the 10-digit national numbers stored on contacts."""

import phonenumbers


def national_to_e164(national: str, region: str) -> str | None:
    """Return national (digits only, no country code) as E.164 for region.

    None if region is unknown or the number is not valid in that region;
    "2025551234" is valid in "US" but not in "CA", though both share +1.
    """
    region = region.upper()
    try:
        parsed = phonenumbers.parse(national, region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number_for_region(parsed, region):
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
