from .models import FetchConfig

# Applied beneath every user configuration.
PRESET_CONFIG = FetchConfig(
    headers={"Content-Type": "application/json"},
    throw_error=True,
    response_type="json",
)
