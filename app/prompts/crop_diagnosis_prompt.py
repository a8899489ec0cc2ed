CROP_DIAGNOSIS_PROMPT = """
Analyze this crop image{crop_hint}. Identify the disease or pest if any.
Suggest low-cost Indian remedies, both chemical and organic, with dosage where possible.
If the plant looks healthy, say so.
"""
