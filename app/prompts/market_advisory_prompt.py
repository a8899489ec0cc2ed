MARKET_ADVISORY_PROMPT = """
Give a short market advisory for {crop} growers in {district} district.
Cover the price trend for the coming week, arrival pressure at nearby APMC mandis,
whether to sell now or store, and one risk to watch. Keep it under 120 words.
"""
