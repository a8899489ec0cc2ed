MANDI_PRICES_PROMPT = """
List the latest modal mandi prices for the main crops traded around {district} district
(focus on {crop} if it is traded there). Give up to {limit} entries from real APMC markets.

Reply with one entry per line and nothing else. Each line has fields separated by '|':
CROP|VARIETY|MARKET|PRICE|CHANGE_PERCENT|TREND|ARRIVAL_VOLUME|DATE

- PRICE is a whole number in rupees per quintal, no symbols
- CHANGE_PERCENT is the percent change from the previous session, e.g. 5.2 or -1.5
- TREND is one of: up, down, stable
- ARRIVAL_VOLUME is one of: low, medium, high
- DATE is YYYY-MM-DD

Example:
Onion|Red|Lasalgaon|2400|5.2|up|high|2024-10-24
"""
