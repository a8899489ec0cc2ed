from app.models.common import Language

LANGUAGE_INSTRUCTIONS = {
    Language.ENGLISH: "Answer in simple English.",
    Language.HINDI: (
        "Answer in Hindi (Devanagari script). Keep it simple for a rural audience."
    ),
    Language.KANNADA: (
        "Answer in Kannada (Kannada script). Keep it simple for a rural audience."
    ),
}

LANGUAGE_NAMES = {
    Language.ENGLISH: "English",
    Language.HINDI: "हिंदी",
    Language.KANNADA: "ಕನ್ನಡ",
}

SPEECH_LOCALES = {
    Language.ENGLISH: "en-IN",
    Language.HINDI: "hi-IN",
    Language.KANNADA: "kn-IN",
}

STRINGS: dict[str, dict[Language, str]] = {
    "greeting": {
        Language.ENGLISH: "Namaskara, Farmer",
        Language.HINDI: "नमस्कार, किसान",
        Language.KANNADA: "ನಮಸ್ಕಾರ, ರೈತ ಮಿತ್ರ",
    },
    "verdict": {
        Language.ENGLISH: "The Verdict",
        Language.HINDI: "मुख्य सलाह",
        Language.KANNADA: "ಮುಖ್ಯ ಸಲಹೆ",
    },
    "risks": {
        Language.ENGLISH: "Risk Radar",
        Language.HINDI: "जोखिम अलर्ट",
        Language.KANNADA: "ಅಪಾಯದ ಎಚ್ಚರಿಕೆಗಳು",
    },
    "price_flow": {
        Language.ENGLISH: "Price Flow",
        Language.HINDI: "कीमत का बहाव",
        Language.KANNADA: "ಬೆಲೆ ಏರಿಳಿತ",
    },
    "ask_ai": {
        Language.ENGLISH: "Ask AI Voice",
        Language.HINDI: "AI से पूछें",
        Language.KANNADA: "AI ಅನ್ನು ಕೇಳಿ",
    },
    "confidence": {
        Language.ENGLISH: "Confidence",
        Language.HINDI: "भरोसा",
        Language.KANNADA: "ಭರವಸೆ",
    },
    "impact_forecast": {
        Language.ENGLISH: "Impact Forecast",
        Language.HINDI: "असर का अनुमान",
        Language.KANNADA: "ಪರಿಣಾಮದ ಮುನ್ಸೂಚನೆ",
    },
    "per_quintal": {
        Language.ENGLISH: "₹ / QUINTAL",
        Language.HINDI: "₹ / क्विंटल",
        Language.KANNADA: "₹ / ಕ್ವಿಂಟಾಲ್",
    },
    "loading": {
        Language.ENGLISH: "Synthesizing Market Data...",
        Language.HINDI: "मंडी की जानकारी जुटा रहे हैं...",
        Language.KANNADA: "ಮಾರುಕಟ್ಟೆ ಮಾಹಿತಿ ಸಂಗ್ರಹಿಸಲಾಗುತ್ತಿದೆ...",
    },
    "checking_markets": {
        Language.ENGLISH: "Checking markets...",
        Language.HINDI: "मंडी भाव देख रहे हैं...",
        Language.KANNADA: "ಮಾರುಕಟ್ಟೆ ಪರಿಶೀಲಿಸಲಾಗುತ್ತಿದೆ...",
    },
    "checking_weather": {
        Language.ENGLISH: "Checking weather...",
        Language.HINDI: "मौसम देख रहे हैं...",
        Language.KANNADA: "ಹವಾಮಾನ ಪರಿಶೀಲಿಸಲಾಗುತ್ತಿದೆ...",
    },
    "chat_greeting": {
        Language.ENGLISH: (
            "Namaste! I am KisanSathi. Ask me about farming, weather, prices, or schemes."
        ),
        Language.HINDI: (
            "नमस्ते! मैं आपका किसान साथी हूँ। आप मुझसे खेती, मौसम, मंडी भाव "
            "या सरकारी योजनाओं के बारे में कुछ भी पूछ सकते हैं।"
        ),
        Language.KANNADA: (
            "ನಮಸ್ಕಾರ! ನಾನು ನಿಮ್ಮ ಕಿಸಾನ್ ಸಾಥಿ. ಕೃಷಿ, ಹವಾಮಾನ, ಮಂಡಿ ಬೆಲೆ ಅಥವಾ "
            "ಸರ್ಕಾರಿ ಯೋಜನೆಗಳ ಬಗ್ಗೆ ನನ್ನನ್ನು ಕೇಳಿ."
        ),
    },
    "chat_placeholder": {
        Language.ENGLISH: "Type here...",
        Language.HINDI: "यहाँ लिखें...",
        Language.KANNADA: "ಇಲ್ಲಿ ಬರೆಯಿರಿ...",
    },
    "send": {
        Language.ENGLISH: "Send",
        Language.HINDI: "भेजें",
        Language.KANNADA: "ಕಳುಹಿಸಿ",
    },
    "you": {
        Language.ENGLISH: "You",
        Language.HINDI: "आप",
        Language.KANNADA: "ನೀವು",
    },
    "assistant_name": {
        Language.ENGLISH: "KisanSathi",
        Language.HINDI: "किसान साथी",
        Language.KANNADA: "ಕಿಸಾನ್ ಸಾಥಿ",
    },
    "mandi_title": {
        Language.ENGLISH: "Mandi Prices",
        Language.HINDI: "मंडी भाव",
        Language.KANNADA: "ಮಂಡಿ ಬೆಲೆಗಳು",
    },
    "market_overview": {
        Language.ENGLISH: "Market Overview (₹/Qtl)",
        Language.HINDI: "बाज़ार का हाल (₹/क्विंटल)",
        Language.KANNADA: "ಮಾರುಕಟ್ಟೆ ನೋಟ (₹/ಕ್ವಿಂಟಾಲ್)",
    },
    "mandi_disclaimer": {
        Language.ENGLISH: "Disclaimer: Prices are indicative. Confirm with local Mandi.",
        Language.HINDI: "सूचना: भाव अनुमानित हैं। अपनी स्थानीय मंडी से पुष्टि करें।",
        Language.KANNADA: "ಸೂಚನೆ: ಬೆಲೆಗಳು ಅಂದಾಜು ಮಾತ್ರ. ಸ್ಥಳೀಯ ಮಂಡಿಯಲ್ಲಿ ಖಚಿತಪಡಿಸಿಕೊಳ್ಳಿ.",
    },
    "weather_title": {
        Language.ENGLISH: "Weather",
        Language.HINDI: "मौसम",
        Language.KANNADA: "ಹವಾಮಾನ",
    },
    "schemes_title": {
        Language.ENGLISH: "Government Schemes",
        Language.HINDI: "सरकारी योजनाएं",
        Language.KANNADA: "ಸರ್ಕಾರಿ ಯೋಜನೆಗಳು",
    },
    "schemes_subtitle": {
        Language.ENGLISH: "Find benefits you are eligible for",
        Language.HINDI: "अपने लिए सही योजना खोजें",
        Language.KANNADA: "ನಿಮಗೆ ಅರ್ಹವಾದ ಸೌಲಭ್ಯಗಳನ್ನು ಹುಡುಕಿ",
    },
    "check_now": {
        Language.ENGLISH: "Check Now",
        Language.HINDI: "अभी जांचें",
        Language.KANNADA: "ಈಗ ಪರಿಶೀಲಿಸಿ",
    },
    "crop_doctor_title": {
        Language.ENGLISH: "Crop Doctor",
        Language.HINDI: "फसल डॉक्टर",
        Language.KANNADA: "ಬೆಳೆ ವೈದ್ಯ",
    },
    "upload_photo": {
        Language.ENGLISH: "Take or upload a photo of the affected leaf",
        Language.HINDI: "प्रभावित पत्ती की फोटो लें या अपलोड करें",
        Language.KANNADA: "ಬಾಧಿತ ಎಲೆಯ ಫೋಟೋ ತೆಗೆಯಿರಿ ಅಥವಾ ಅಪ್‌ಲೋಡ್ ಮಾಡಿ",
    },
    "analyze": {
        Language.ENGLISH: "Analyze Crop",
        Language.HINDI: "फसल जांचें",
        Language.KANNADA: "ಬೆಳೆ ವಿಶ್ಲೇಷಿಸಿ",
    },
    "connectivity_error": {
        Language.ENGLISH: (
            "Error connecting to KisanSathi server. Please check your internet."
        ),
        Language.HINDI: (
            "किसान साथी सर्वर से जुड़ने में समस्या हुई। कृपया अपना इंटरनेट जांचें।"
        ),
        Language.KANNADA: (
            "ಕಿಸಾನ್ ಸಾಥಿ ಸರ್ವರ್‌ಗೆ ಸಂಪರ್ಕಿಸಲು ಸಾಧ್ಯವಾಗಲಿಲ್ಲ. ದಯವಿಟ್ಟು ಇಂಟರ್ನೆಟ್ ಪರಿಶೀಲಿಸಿ."
        ),
    },
    "apology": {
        Language.ENGLISH: (
            "Sorry, advice is not available right now. Please try again later "
            "or visit your nearest Raitha Samparka Kendra."
        ),
        Language.HINDI: (
            "क्षमा करें, अभी सलाह उपलब्ध नहीं है। कृपया बाद में प्रयास करें "
            "या नज़दीकी कृषि केंद्र पर जाएं।"
        ),
        Language.KANNADA: (
            "ಕ್ಷಮಿಸಿ, ಈಗ ಸಲಹೆ ಲಭ್ಯವಿಲ್ಲ. ದಯವಿಟ್ಟು ನಂತರ ಪ್ರಯತ್ನಿಸಿ ಅಥವಾ "
            "ಹತ್ತಿರದ ರೈತ ಸಂಪರ್ಕ ಕೇಂದ್ರಕ್ಕೆ ಭೇಟಿ ನೀಡಿ."
        ),
    },
    "default_decision": {
        Language.ENGLISH: "HOLD",
        Language.HINDI: "रुकें",
        Language.KANNADA: "ಕಾಯಿರಿ",
    },
    "default_reason": {
        Language.ENGLISH: "Live market data is unavailable. Holding is the safest choice for now.",
        Language.HINDI: "ताज़ा मंडी जानकारी उपलब्ध नहीं है। अभी रुकना सबसे सुरक्षित है।",
        Language.KANNADA: "ಇತ್ತೀಚಿನ ಮಾರುಕಟ್ಟೆ ಮಾಹಿತಿ ಲಭ್ಯವಿಲ್ಲ. ಸದ್ಯಕ್ಕೆ ಕಾಯುವುದು ಸುರಕ್ಷಿತ.",
    },
    "default_weather_impact": {
        Language.ENGLISH: "Weather update unavailable. Check the local forecast before field work.",
        Language.HINDI: "मौसम की जानकारी उपलब्ध नहीं है। खेत का काम करने से पहले स्थानीय पूर्वानुमान देखें।",
        Language.KANNADA: "ಹವಾಮಾನ ಮಾಹಿತಿ ಲಭ್ಯವಿಲ್ಲ. ಹೊಲದ ಕೆಲಸಕ್ಕೆ ಮೊದಲು ಸ್ಥಳೀಯ ಮುನ್ಸೂಚನೆ ನೋಡಿ.",
    },
    "default_news": {
        Language.ENGLISH: "Markets stable across Karnataka mandis.",
        Language.HINDI: "कर्नाटक की मंडियों में भाव स्थिर हैं।",
        Language.KANNADA: "ಕರ್ನಾಟಕದ ಮಂಡಿಗಳಲ್ಲಿ ಬೆಲೆಗಳು ಸ್ಥಿರವಾಗಿವೆ.",
    },
    "default_condition": {
        Language.ENGLISH: "Sunny",
        Language.HINDI: "धूप",
        Language.KANNADA: "ಬಿಸಿಲು",
    },
    "default_weather_advisory": {
        Language.ENGLISH: "Irrigate in the early morning and keep an eye on the local forecast.",
        Language.HINDI: "सुबह जल्दी सिंचाई करें और स्थानीय मौसम पर नज़र रखें।",
        Language.KANNADA: "ಬೆಳಗ್ಗೆ ಬೇಗ ನೀರು ಹಾಯಿಸಿ ಮತ್ತು ಸ್ಥಳೀಯ ಹವಾಮಾನದ ಮೇಲೆ ಗಮನವಿಡಿ.",
    },
}


def t(key: str, language: Language) -> str:
    """Look up a static UI string, falling back to English."""
    translations = STRINGS[key]
    return translations.get(language) or translations[Language.ENGLISH]


def strings_for(language: Language) -> dict[str, str]:
    return {key: t(key, language) for key in STRINGS}


def language_instruction(language: Language) -> str:
    return LANGUAGE_INSTRUCTIONS.get(language, LANGUAGE_INSTRUCTIONS[Language.ENGLISH])


def speech_locale(language: Language) -> str:
    return SPEECH_LOCALES.get(language, SPEECH_LOCALES[Language.ENGLISH])
