"""Language display names used when building translation prompts."""

LANGUAGE_NAMES: dict[str, str] = {
    "de": "German",
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "it": "Italian",
    "pt": "Portuguese",
    "nl": "Dutch",
    "pl": "Polish",
    "ru": "Russian",
    "uk": "Ukrainian",
    "bg": "Bulgarian",
    "ro": "Romanian",
    "cs": "Czech",
    "sk": "Slovak",
    "hu": "Hungarian",
    "el": "Greek",
    "sv": "Swedish",
    "da": "Danish",
    "no": "Norwegian",
    "fi": "Finnish",
    "zh": "Chinese",
    "ja": "Japanese",
    "ko": "Korean",
    "th": "Thai",
    "vi": "Vietnamese",
    "id": "Indonesian",
    "ms": "Malay",
    "hi": "Hindi",
    "ar": "Arabic",
    "he": "Hebrew",
    "tr": "Turkish",
}


def language_name(code: str) -> str:
    """Return the English display name for an ISO 639-1 code.

    Lookup is case-insensitive. Unknown codes are returned unchanged so the
    prompt still names *something* the model can interpret.
    """
    return LANGUAGE_NAMES.get(code.lower(), code)
