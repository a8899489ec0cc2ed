DASHBOARD_INSIGHT_PROMPT = """
A farmer in {district} district (near latitude {latitude}, longitude {longitude}) grows {crop}.
Check today's mandi arrivals and prices for {crop} around {district}, the weather outlook
for the next three days and any market news that matters.

Decide the single most useful action for the farmer today: SELL, HOLD, HARVEST or PROTECT.
You may add one word to the decision, e.g. "SELL NOW" or "HOLD 3 DAYS".

Reply with exactly ONE line of 11 fields separated by '|', in this order:
DECISION|COLOR|REASON|YESTERDAY_PRICE|TODAY_PRICE|TOMORROW_LOW|TOMORROW_HIGH|TREND|CONFIDENCE|WEATHER_IMPACT|NEWS_HEADLINE

- COLOR is one of: green, red, yellow, blue (green = sell, yellow = hold, blue = harvest, red = protect)
- prices are whole numbers in rupees per quintal, no symbols
- TREND is one of: rising, falling, stable
- CONFIDENCE is one of: low, medium, high
- REASON, WEATHER_IMPACT and NEWS_HEADLINE are one short sentence each

Example:
SELL NOW|green|Prices peaking at Mandya APMC|2100|2200|2150|2300|rising|high|Clear skies for 3 days|Sugar mills raise procurement
"""
