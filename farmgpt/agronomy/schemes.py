"""Central government schemes for farmers."""

from farmgpt.models.agronomy import Scheme
from farmgpt.models.common import LocalizedText

KISAN_CALL_CENTRE = "1800-180-1551"

SCHEMES: tuple[Scheme, ...] = (
    Scheme(
        scheme_id="pm-kisan",
        name=LocalizedText("PM-KISAN", "पीएम-किसान"),
        description=LocalizedText(
            "Pradhan Mantri Kisan Samman Nidhi: direct income support",
            "प्रधानमंत्री किसान सम्मान निधि: सीधी आय सहायता",
        ),
        benefit=LocalizedText(
            "₹6,000 per year in 3 installments of ₹2,000",
            "₹2,000 की 3 किस्तों में ₹6,000 प्रति वर्ष",
        ),
        eligibility=LocalizedText(
            "All landholding farmer families",
            "सभी भूमिधारक किसान परिवार",
        ),
        url="https://pmkisan.gov.in/",
    ),
    Scheme(
        scheme_id="pmfby",
        name=LocalizedText("PMFBY", "पीएमएफबीवाई"),
        description=LocalizedText(
            "Pradhan Mantri Fasal Bima Yojana: crop insurance",
            "प्रधानमंत्री फसल बीमा योजना: फसल बीमा",
        ),
        benefit=LocalizedText(
            "Insurance against crop loss at 2% premium for Kharif, 1.5% for Rabi",
            "खरीफ के लिए 2% और रबी के लिए 1.5% प्रीमियम पर फसल हानि का बीमा",
        ),
        eligibility=LocalizedText(
            "All farmers including sharecroppers and tenant farmers",
            "बटाईदार और किरायेदार किसानों सहित सभी किसान",
        ),
        url="https://pmfby.gov.in/",
    ),
    Scheme(
        scheme_id="kcc",
        name=LocalizedText("Kisan Credit Card", "किसान क्रेडिट कार्ड"),
        description=LocalizedText(
            "Short-term credit for cultivation and allied needs",
            "खेती और संबंधित जरूरतों के लिए अल्पकालिक ऋण",
        ),
        benefit=LocalizedText(
            "Loans up to ₹3 lakh at 4% interest with timely repayment",
            "समय पर भुगतान पर 4% ब्याज पर ₹3 लाख तक का ऋण",
        ),
        eligibility=LocalizedText(
            "Farmers, tenant farmers and self-help groups",
            "किसान, किरायेदार किसान और स्वयं सहायता समूह",
        ),
        url="https://www.myscheme.gov.in/schemes/kcc",
    ),
    Scheme(
        scheme_id="soil-health-card",
        name=LocalizedText("Soil Health Card", "मृदा स्वास्थ्य कार्ड"),
        description=LocalizedText(
            "Soil testing with nutrient and fertilizer recommendations",
            "पोषक तत्व और उर्वरक सिफारिशों के साथ मिट्टी की जांच",
        ),
        benefit=LocalizedText(
            "Free soil testing every 2 years",
            "हर 2 साल में मुफ्त मिट्टी जांच",
        ),
        eligibility=LocalizedText("All farmers", "सभी किसान"),
        url="https://soilhealth.dac.gov.in/",
    ),
    Scheme(
        scheme_id="pmksy",
        name=LocalizedText("PMKSY", "पीएमकेएसवाई"),
        description=LocalizedText(
            "Pradhan Mantri Krishi Sinchayee Yojana: Per Drop More Crop",
            "प्रधानमंत्री कृषि सिंचाई योजना: प्रति बूंद अधिक फसल",
        ),
        benefit=LocalizedText(
            "Subsidy of up to 55% on drip and sprinkler irrigation",
            "ड्रिप और स्प्रिंकलर सिंचाई पर 55% तक सब्सिडी",
        ),
        eligibility=LocalizedText(
            "Farmers with cultivable land",
            "खेती योग्य भूमि वाले किसान",
        ),
        url="https://pmksy.gov.in/",
    ),
    Scheme(
        scheme_id="e-nam",
        name=LocalizedText("e-NAM", "ई-नाम"),
        description=LocalizedText(
            "National Agriculture Market: online trading of produce",
            "राष्ट्रीय कृषि बाजार: उपज का ऑनलाइन व्यापार",
        ),
        benefit=LocalizedText(
            "Better price discovery across mandis",
            "मंडियों में बेहतर मूल्य",
        ),
        eligibility=LocalizedText(
            "Farmers registered with a participating mandi",
            "भाग लेने वाली मंडी में पंजीकृत किसान",
        ),
        url="https://enam.gov.in/",
    ),
)


def find_scheme(scheme_id: str) -> Scheme | None:
    for scheme in SCHEMES:
        if scheme.scheme_id == scheme_id:
            return scheme
    return None
