"""Health-check payload for the calculator API."""

SERVICE_NAME = "zinsrechner"


def get_ping_message() -> str:
    return "pong"
