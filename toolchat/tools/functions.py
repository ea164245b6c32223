"""Mock tool functions returning canned, JSON-encoded data."""

import json
from typing import Any


def get_weather(args: dict[str, Any]) -> str:
    city = args.get("city")
    return json.dumps({"city": city, "temperature": 22, "unit": "celsius", "condition": "sunny"})


def get_time(args: dict[str, Any]) -> str:
    city = args.get("city")
    return json.dumps({"city": city, "time": "14:30", "timezone": "CET"})
