"""Default site settings: upstream endpoint, fixed location, reminders."""

WEATHERAPI_BASE_URL = "https://api.weatherapi.com/v1"
DEFAULT_USER_AGENT = "BSHS-Weather-Service/1.0"
DEFAULT_ALLOWED_ORIGIN = "https://bshs-es.vercel.app"

# Fixed so the proxy cannot be used to query arbitrary locations
DEFAULT_LOCATION = "Balangkayan,Eastern Samar,Philippines"

DEFAULT_REMINDERS: list[str] = [
    "Wear your school ID at all times inside the campus.",
    "Flag ceremony starts at 7:15 AM every Monday.",
    "Bring an umbrella during the rainy season.",
    "Keep our classrooms clean: CLAYGO (clean as you go).",
    "Check the bulletin board for enrollment and exam schedules.",
]
