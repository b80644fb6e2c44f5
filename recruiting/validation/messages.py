"""
Localized validation messages, keyed by error code.

English is the fallback for unknown locales and missing entries.
"""

from typing import Optional

FALLBACK_LOCALE = "en"

MESSAGES = {
    "en": {
        "required": "This field is required",
        "invalid_email": "Not a valid email address",
        "invalid_fiscal_code": "Not a valid fiscal code",
        "fiscal_code_in_use": "This fiscal code is already registered",
        "invalid_date": "Not a valid date (dd-mm-yyyy)",
        "invalid_number": "Not a valid number",
        "invalid_month": "Not a valid month",
        "invalid_year": "Not a valid year (1900-2100)",
        "invalid_choice": "Not one of the allowed values",
        "period_to_before_period_from": "The end period cannot precede the start period",
        "end_year_before_start_year": "The end year cannot precede the start year",
        "username_in_use": "This username is already taken",
        "password_too_short": "The password must be at least 5 characters long",
        "passwords_not_matching": "The passwords do not match",
        "role_not_found": "Unknown role",
    },
    "it": {
        "required": "Campo obbligatorio",
        "invalid_email": "Indirizzo email non valido",
        "invalid_fiscal_code": "Codice fiscale non valido",
        "fiscal_code_in_use": "Codice fiscale già registrato",
        "invalid_date": "Data non valida (gg-mm-aaaa)",
        "invalid_number": "Numero non valido",
        "invalid_month": "Mese non valido",
        "invalid_year": "Anno non valido (1900-2100)",
        "invalid_choice": "Valore non ammesso",
        "period_to_before_period_from": "Il periodo finale non può precedere quello iniziale",
        "end_year_before_start_year": "L'anno di fine non può precedere l'anno di inizio",
        "username_in_use": "Nome utente già in uso",
        "password_too_short": "La password deve contenere almeno 5 caratteri",
        "passwords_not_matching": "Le password non coincidono",
        "role_not_found": "Ruolo sconosciuto",
    },
}


def resolve_locale(accept_language: Optional[str], default: str = FALLBACK_LOCALE) -> str:
    """Pick the first supported language of an Accept-Language header."""
    if accept_language:
        for part in accept_language.split(","):
            tag = part.split(";")[0].strip().lower()
            language = tag.split("-")[0]
            if language in MESSAGES:
                return language
    return default if default in MESSAGES else FALLBACK_LOCALE


def get_message(code: str, locale: str) -> str:
    catalogue = MESSAGES.get(locale, MESSAGES[FALLBACK_LOCALE])
    return catalogue.get(code) or MESSAGES[FALLBACK_LOCALE].get(code, code)
