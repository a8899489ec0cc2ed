WEATHER_SNAPSHOT_PROMPT = """
Give the current weather near latitude {latitude}, longitude {longitude} ({district} district)
and one farming advisory for a farmer growing {crop}.

Reply with exactly ONE line of fields separated by '|', in this order:
TEMPERATURE_C|CONDITION|HUMIDITY_PERCENT|WIND_KMPH|ADVISORY|RAIN_CHANCE_PERCENT

- numbers are whole numbers without units
- CONDITION is two or three words, e.g. Partly Cloudy
- ADVISORY is one short actionable sentence

Example:
31|Partly Cloudy|64|12|Good day to spray, winds are calm|20
"""
