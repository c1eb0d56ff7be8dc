import os

from hypothesis import HealthCheck, settings

settings.register_profile(
    "default",
    settings(
        deadline=None,
        suppress_health_check=[HealthCheck.too_slow],
    ),
)

settings.register_profile(
    "ci",
    settings(
        deadline=None,
        max_examples=500,
        suppress_health_check=[HealthCheck.too_slow],
    ),
)

settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))
