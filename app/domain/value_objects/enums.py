"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class TaskType(str, Enum):
    FULL_PIPELINE = "full_pipeline"
    TRANSLATE = "translate"
    ANSWER_QUESTION = "answer_question"


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class Urgency(str, Enum):
    URGENT = "URGENT"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class Department(str, Enum):
    RESERVATION = "reservation"
    CHECK_IN_OUT = "check-in-out"
    ROOM_ACCESS = "room-access"
    HOUSEKEEPING = "housekeeping"
    MAINTENANCE = "maintenance"
    AMENITIES = "amenities"
    FOOD_BEVERAGE = "food-beverage"
    BILLING_PAYMENT = "billing-payment"
    WIFI_TECH = "wifi-tech"
    TRANSPORT_PARKING = "transport-parking"
    HOTEL_INFO = "hotel-info"
    LOCAL_RECOMMENDATIONS = "local-recommendations"
    SAFETY_SECURITY = "safety-security"
    LOST_AND_FOUND = "lost-and-found"
    SPECIAL_REQUESTS = "special-requests"
    OTHER = "other"
