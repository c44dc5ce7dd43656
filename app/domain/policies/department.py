"""Department normalization — coerces a raw topic label onto the closed set."""

from app.domain.value_objects.enums import Department

ALLOWED_DEPARTMENTS: frozenset[str] = frozenset(d.value for d in Department)


def normalize_department(raw_topic: object) -> Department:
    """Map a free-form topic onto a Department.

    Input is trimmed and lower-cased; anything outside the allowed set
    (including None, "" and non-strings) becomes Department.OTHER.
    """
    topic = raw_topic.strip().lower() if isinstance(raw_topic, str) else ""
    if topic in ALLOWED_DEPARTMENTS:
        return Department(topic)
    return Department.OTHER
