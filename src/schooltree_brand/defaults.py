"""Default configuration template.

Raw-document shaped constants that fill every field a brand document omits.
These are never mutated; the normalizer copies what it takes from them.
"""

from typing import Any

DEFAULT_BRAND_ID = "crescent"

DEFAULT_COLORS: dict[str, str] = {
    "primary": "#137fec",
    "primaryDark": "#0b4dc9",
    "primarySoft": "#EFF6FF",
    "accent": "#10b981",
    "background": "#f6f7f8",
    "surface": "#ffffff",
    "text": "#111418",
    "textSecondary": "#617589",
    "success": "#10b981",
    "warning": "#f59e0b",
    "error": "#ef4444",
    "info": "#3b82f6",
}

# Every module defaults on except chat.
DEFAULT_MODULES: dict[str, dict[str, Any]] = {
    "dashboard": {"enabled": True},
    "circulars": {"enabled": True},
    "homework": {"enabled": True},
    "attendance": {"enabled": True},
    "exams": {"enabled": True},
    "marks": {"enabled": True},
    "fees": {"enabled": True, "showPaymentGateway": False},
    "calendar": {"enabled": True},
    "gallery": {"enabled": True},
    "timetable": {"enabled": True},
    "chat": {"enabled": False},
    "profile": {"enabled": True},
    "parentMessage": {"enabled": True},
    "leaveLetter": {"enabled": True},
}

DEFAULT_NOTIFICATION_TOPICS: tuple[str, ...] = ("circulars", "homework", "attendance")

DEFAULT_CONFIG_TEMPLATE: dict[str, Any] = {
    "brand": {
        "id": DEFAULT_BRAND_ID,
        "name": "Crescent School",
        "shortName": "Crescent",
        "tagline": "",
    },
    "api": {
        "baseUrl": "",
        "databaseName": "",
    },
    "firebase": {
        "projectId": "",
        "configGroup": "",
    },
    "auth": {
        "type": "otp",
        "otpLength": 6,
        "countryCode": "+91",
    },
    "theme": {
        "colors": DEFAULT_COLORS,
        "fonts": {
            "primary": "System",
            "secondary": "System",
        },
    },
    "features": {
        "modules": DEFAULT_MODULES,
        "notifications": {
            "enabled": True,
            "topics": list(DEFAULT_NOTIFICATION_TOPICS),
        },
        "offlineMode": True,
        "darkMode": False,
    },
}
