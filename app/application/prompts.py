"""Prompt templates for every completion sub-call.

Kept together so the classification vocabulary stays in one place.
"""

SENTIMENT_SYSTEM = (
    "You are a strict one-word sentiment classifier for hotel/guest messages. "
    "Output EXACTLY one lowercase label from {positive, negative, neutral}. "
    "No punctuation, no extra words."
)

SENTIMENT_PROMPT = '''Classify the sentiment of the message below.

Rules:
- Choose exactly one: positive, negative, or neutral (lowercase).
- Polite complaints are negative even if courteous.
- Purely factual requests or scheduling are neutral.
- Gratitude/praise is positive.
- Handle negation and sarcasm.
- Output ONLY the label.

Message:
"""{text}"""'''

URGENCY_SYSTEM = (
    "You are a highly accurate urgency classifier. "
    "Output EXACTLY one of {URGENT, HIGH, MEDIUM, LOW}. No extra words."
)

URGENCY_PROMPT = '''Classify the urgency of the hotel guest message below.

Output ONLY: URGENT, HIGH, MEDIUM, or LOW.

Message:
"""{text}"""'''

TOPIC_SYSTEM = """\
You are a classifier that assigns a COARSE topic and a more DETAILED subtopic from a FIXED list.
Return ONLY a JSON object with 'topic' and 'subtopic' keys.
If no specific subtopic is identified, set 'subtopic' to null.
Do not invent new categories.

Allowed topics:
["reservation","check-in-out","room-access","housekeeping","maintenance","amenities",
 "food-beverage","billing-payment","wifi-tech","transport-parking","hotel-info",
 "local-recommendations","safety-security","lost-and-found","special-requests","other"]

Allowed subtopics (examples, not exhaustive):
- reservation: new-booking, modify-booking, cancel-booking, booking-inquiry
- check-in-out: early-check-in, late-check-out, check-in-process, check-out-process
- room-access: keycard-issue, locked-out, safe-access
- housekeeping: extra-towels, room-cleaning, minibar-restock, laundry-service, turndown-service
- maintenance: AC-issue, plumbing-issue, electrical-issue, TV-issue, broken-furniture, pest-control
- amenities: gym-access, pool-hours, spa-booking, business-center, concierge-service
- food-beverage: room-service-order, restaurant-reservation, bar-inquiry, dietary-restrictions, breakfast-time
- billing-payment: payment-dispute, invoice-request, credit-card-issue, refund-status
- wifi-tech: internet-speed, connection-issue, password-request, device-pairing
- transport-parking: taxi-request, shuttle-service, airport-transfer, parking-availability, valet-service
- hotel-info: hotel-hours, policy-inquiry, directions-within-hotel, general-inquiry
- local-recommendations: restaurant-recommendation, attraction-recommendation, tour-booking, local-event-info
- safety-security: emergency-situation, security-concern, lost-child, medical-emergency
- lost-and-found: lost-item, found-item, item-inquiry
- special-requests: extra-bed, crib, accessibility-needs, celebration-arrangement, pet-policy-inquiry
- other: general-feedback, complaint, compliment, suggestion

Return ONLY a JSON object like: {"topic": "topic-name", "subtopic": "subtopic-name" or null}."""

TOPIC_EXAMPLES: list[tuple[str, str, str | None]] = [
    ("There's smoke smell in my room!", "safety-security", "emergency-situation"),
    ("The room smells bad, looks like it wasn't cleaned.", "housekeeping", "room-cleaning"),
    ("Water is leaking from the bathroom ceiling.", "maintenance", "plumbing-issue"),
    ("My keycard doesn't work and I'm locked out.", "room-access", "keycard-issue"),
    ("What's the wifi password? It's very slow.", "wifi-tech", "password-request"),
    ("I was charged twice for the minibar, please check.", "billing-payment", "payment-dispute"),
    ("What time is breakfast and where's the gym?", "hotel-info", "general-inquiry"),
    ("I need a taxi to the airport.", "transport-parking", "taxi-request"),
    ("Can I get a late checkout?", "check-in-out", "late-check-out"),
    ("I want to cancel my reservation for tomorrow.", "reservation", "cancel-booking"),
    ("Can you recommend a good Italian restaurant nearby?", "local-recommendations", "restaurant-recommendation"),
    ("I need extra towels for my room.", "housekeeping", "extra-towels"),
    ("My TV is not working.", "maintenance", "TV-issue"),
    ("I lost my wallet in the lobby.", "lost-and-found", "lost-item"),
    ("Can I get a crib for my baby?", "special-requests", "crib"),
    ("I have a general question about my stay.", "other", None),
]

TRANSLATE_SYSTEM = (
    "You are a professional translator. "
    "Provide only the translated text without any additional commentary or formatting."
)

TRANSLATE_PROMPT = (
    'Translate the following text into {language}. '
    'Only return the translated text, nothing else: "{text}"'
)

QA_SYSTEM = """\
You are a helpful hotel assistant.
Use the provided Q&A context to answer guest questions clearly and politely.
If the answer is not found in the context, say you don't know instead of inventing information."""

QA_PROMPT = "Context:\n{context}\n\nQuestion: {question}\nAnswer:"


def build_topic_prompt(text: str) -> str:
    """Few-shot topic prompt: one worked example per line, then the message."""
    lines = []
    for message, topic, subtopic in TOPIC_EXAMPLES:
        sub = f'"{subtopic}"' if subtopic else "null"
        lines.append(f'Message: "{message}" → {{"topic": "{topic}", "subtopic": {sub}}}')
    examples = "\n".join(lines)
    return f'{examples}\n\nNow classify this message:\n\nMessage: """{text}"""'
