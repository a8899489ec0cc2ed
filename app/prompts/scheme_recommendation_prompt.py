SCHEME_RECOMMENDATION_PROMPT = """
Suggest the government schemes this farmer is most likely eligible for and explain how to apply.

Farmer profile:
- State: {state}
- District: {district}
- Land holding: {land_acres} acres
- Main crop: {crop}
- Social category: {category}
- Annual income: {annual_income}
- Notes: {notes}

Cover central schemes (PM-KISAN, Kisan Credit Card, Pradhan Mantri Fasal Bima Yojana) and
relevant state schemes such as Raitha Siri. For each scheme give the benefit, why the farmer
qualifies and the documents needed. Use short bullet points.
"""
