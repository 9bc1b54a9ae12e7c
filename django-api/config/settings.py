"""Django settings for the ticket purchase API."""

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-dev-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")

INSTALLED_APPS = [
    "rest_framework",
    "tickets",
]

MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "config.urls"

USE_TZ = True
TIME_ZONE = "UTC"

# No auth apps are installed; requests carry the paying account id in the body.
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
}

TICKET_CATALOG = {
    "INFANT": {"price": "0", "seats": 0},
    "CHILD": {"price": "15", "seats": 1},
    "ADULT": {"price": "25", "seats": 1},
}
MAX_TICKETS_PER_PURCHASE = 25
TICKET_PAYMENT_SERVICE = "tickets.gateways.LoggingTicketPaymentService"
SEAT_RESERVATION_SERVICE = "tickets.gateways.LoggingSeatReservationService"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {"format": "%(asctime)s %(levelname)s %(name)s %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "verbose"},
    },
    "loggers": {
        "tickets": {
            "handlers": ["console"],
            "level": os.environ.get("TICKETS_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}
