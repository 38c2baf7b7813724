# Skin condition database with diagnostic profiles and care plans.
# Rationale:
# 1. Serious: Melanoma, BCC/SCC and severe infection are screened first; they override everything else.
# 2. Moderate: Inflammatory conditions (acne, eczema, psoriasis, rosacea) are the most common burden.
# 3. Minor: Benign, non-inflammatory findings that are mostly cosmetic.
# 4. Healthy: Baseline for differential diagnosis and the final fallback.
#
# Diagnostic profiles give the acceptable [min, max] range of each scored feature.
# Category and severity are fixed per entry and never computed.

from typing import Dict

from dermacare.models import ConditionRecord

SKIN_CONDITION_TABLE = {
    # Healthy/Normal
    "healthy_skin": {
        "condition": "Healthy Skin",
        "medical_name": "Normal cutaneous condition",
        "category": "healthy",
        "severity": "low",
        "base_confidence": 0.92,
        "description": "No pathological findings detected. Skin barrier function appears intact with normal melanin distribution and healthy tissue architecture.",
        "recommendation": "Your skin appears healthy! Maintain current skincare routine with daily SPF 30+ sunscreen, gentle cleansing, and adequate hydration.",
        "icd_code": "Z87.891",
        "prevalence": "common",
        "affected_area": 0,
        "diagnostic_profile": {
            "redness": {"min": 0.0, "max": 0.30},
            "texture": {"min": 0.0, "max": 0.25},
            "inflammation": {"min": 0.0, "max": 0.20},
            "asymmetry": {"min": 0.0, "max": 0.25},
            "uniformity": {"min": 0.70, "max": 1.0},
        },
        "prevention_tips": [
            "Use broad-spectrum SPF 30+ sunscreen daily",
            "Cleanse face twice daily with gentle cleanser",
            "Moisturize morning and evening",
            "Stay hydrated (8 glasses of water daily)",
            "Eat a balanced diet rich in antioxidants",
            "Get 7-8 hours of quality sleep",
            "Manage stress through exercise or meditation",
        ],
        "lifestyle_changes": [
            "Maintain consistent skincare routine",
            "Avoid excessive sun exposure",
            "Use clean towels and pillowcases",
            "Remove makeup before bed",
        ],
    },

    # Minor/Benign (low severity)
    "comedonal_acne": {
        "condition": "Comedonal Acne",
        "medical_name": "Acne comedonica",
        "category": "minor",
        "severity": "low",
        "base_confidence": 0.85,
        "description": "Non-inflammatory acne characterized by open (blackheads) and closed (whiteheads) comedones due to follicular hyperkeratinization.",
        "recommendation": "Use non-comedogenic products with salicylic acid (BHA) 2%. Gentle cleansing twice daily. Avoid touching or picking lesions.",
        "icd_code": "L70.0",
        "prevalence": "very_common",
        "affected_area": 8,
        "diagnostic_profile": {
            "redness": {"min": 0.20, "max": 0.45},
            "texture": {"min": 0.40, "max": 0.65},
            "inflammation": {"min": 0.15, "max": 0.35},
            "asymmetry": {"min": 0.25, "max": 0.55},
            "uniformity": {"min": 0.45, "max": 0.70},
        },
        "home_remedies": [
            {"step": "Steam face for 5-10 minutes to open pores", "frequency": "2-3 times per week"},
            {"step": "Apply warm compress to affected areas", "duration": "5 minutes", "frequency": "Daily"},
            {"step": "Use clay mask to absorb excess oil", "frequency": "Once per week"},
            {"step": "Gently exfoliate with soft washcloth", "frequency": "2-3 times per week"},
        ],
        "otc_treatments": [
            {"type": "otc", "name": "Salicylic Acid 2% Cleanser", "instructions": "Wash face twice daily, leave on for 1 minute before rinsing", "duration": "4-6 weeks"},
            {"type": "otc", "name": "Benzoyl Peroxide 2.5% Gel", "instructions": "Apply thin layer to affected areas once daily", "duration": "Ongoing", "notes": "Start with lower strength to avoid irritation"},
            {"type": "otc", "name": "Retinol 0.5% Serum", "instructions": "Apply at night 3 times per week, increase gradually", "duration": "8-12 weeks"},
            {"type": "otc", "name": "Niacinamide 10% Serum", "instructions": "Apply morning and evening before moisturizer", "duration": "Ongoing"},
        ],
        "lifestyle_changes": [
            "Wash face twice daily with gentle, non-comedogenic cleanser",
            "Change pillowcases every 2-3 days",
            "Avoid touching face throughout the day",
            "Remove makeup before bed",
            "Drink plenty of water (8+ glasses daily)",
            "Reduce dairy and high-glycemic foods",
            "Manage stress through exercise or meditation",
        ],
        "prevention_tips": [
            "Use oil-free, non-comedogenic skincare products",
            "Avoid heavy, pore-clogging makeup",
            "Clean phone screen regularly",
            "Tie hair back to keep it off face",
            "Shower after sweating or exercising",
        ],
        "do_and_dont": {
            "do": [
                "Cleanse gently without harsh scrubbing",
                "Use lukewarm water (not hot)",
                "Pat skin dry with clean towel",
                "Apply products on clean, dry skin",
                "Use sunscreen daily (oil-free formula)",
            ],
            "dont": [
                "Pick, squeeze, or pop comedones",
                "Over-exfoliate or use harsh scrubs",
                "Use multiple active ingredients at once",
                "Skip moisturizer (even with oily skin)",
                "Use dirty makeup brushes or sponges",
            ],
        },
        "when_to_see_doctor": "If comedones persist after 8 weeks of consistent treatment, become inflamed, cause scarring, or affect large areas of face.",
        "expected_recovery": "4-8 weeks with consistent treatment. Visible improvement in 2-3 weeks.",
    },
    "sebaceous_hyperplasia": {
        "condition": "Sebaceous Hyperplasia",
        "medical_name": "Hyperplasia sebacearum",
        "category": "minor",
        "severity": "low",
        "base_confidence": 0.78,
        "description": "Benign enlargement of sebaceous glands appearing as yellowish, donut-shaped papules, commonly on face in middle-aged adults.",
        "recommendation": "Cosmetic concern only. No treatment required unless desired for aesthetic reasons. Consider dermatologist consultation for removal options.",
        "icd_code": "D23.39",
        "prevalence": "common",
        "affected_area": 5,
        "diagnostic_profile": {
            "redness": {"min": 0.10, "max": 0.30},
            "texture": {"min": 0.35, "max": 0.55},
            "inflammation": {"min": 0.05, "max": 0.20},
            "asymmetry": {"min": 0.20, "max": 0.45},
            "uniformity": {"min": 0.55, "max": 0.80},
        },
    },
    "milia": {
        "condition": "Milia",
        "medical_name": "Milium cysts",
        "category": "minor",
        "severity": "low",
        "base_confidence": 0.82,
        "description": "Small, white keratin-filled cysts commonly occurring around eyes and cheeks. Benign and self-limiting.",
        "recommendation": "Usually resolve spontaneously. Avoid picking. Use gentle exfoliation with AHA/BHA products. Professional extraction if persistent.",
        "icd_code": "Q84.1",
        "prevalence": "common",
        "affected_area": 3,
        "diagnostic_profile": {
            "redness": {"min": 0.05, "max": 0.20},
            "texture": {"min": 0.30, "max": 0.50},
            "inflammation": {"min": 0.00, "max": 0.15},
            "asymmetry": {"min": 0.15, "max": 0.35},
            "uniformity": {"min": 0.65, "max": 0.85},
        },
    },
    "keratosis_pilaris": {
        "condition": "Keratosis Pilaris",
        "medical_name": "Keratosis pilaris",
        "category": "minor",
        "severity": "low",
        "base_confidence": 0.87,
        "description": "Common genetic condition causing small, rough bumps due to keratin buildup in hair follicles. \"Chicken skin\" appearance.",
        "recommendation": "Gentle exfoliation with salicylic acid or urea-containing moisturizers. Avoid harsh scrubbing. Usually improves with age.",
        "icd_code": "Q80.8",
        "prevalence": "very_common",
        "affected_area": 25,
        "diagnostic_profile": {
            "redness": {"min": 0.25, "max": 0.50},
            "texture": {"min": 0.65, "max": 0.90},
            "inflammation": {"min": 0.20, "max": 0.45},
            "asymmetry": {"min": 0.30, "max": 0.55},
            "uniformity": {"min": 0.30, "max": 0.55},
        },
    },

    # Moderate inflammatory (medium severity)
    "inflammatory_acne": {
        "condition": "Inflammatory Acne",
        "medical_name": "Acne papulopustulosa",
        "category": "moderate",
        "severity": "medium",
        "base_confidence": 0.81,
        "description": "Inflammatory acne with erythematous papules and pustules. Involves bacterial colonization (C. acnes) and inflammatory response.",
        "recommendation": "Topical retinoids + benzoyl peroxide or antibiotics. Consider dermatologist evaluation if >25% face affected or scarring occurs.",
        "icd_code": "L70.0",
        "prevalence": "very_common",
        "affected_area": 22,
        "diagnostic_profile": {
            "redness": {"min": 0.55, "max": 0.80},
            "texture": {"min": 0.50, "max": 0.75},
            "inflammation": {"min": 0.60, "max": 0.85},
            "asymmetry": {"min": 0.35, "max": 0.65},
            "uniformity": {"min": 0.20, "max": 0.45},
        },
        "home_remedies": [
            {"step": "Apply ice wrapped in clean cloth to reduce swelling", "duration": "10 minutes", "frequency": "2-3 times daily"},
            {"step": "Make tea tree oil spot treatment (diluted 1:9 with carrier oil)", "notes": "Apply to individual pimples", "frequency": "Twice daily"},
            {"step": "Apply aloe vera gel to soothe inflammation", "frequency": "Morning and night"},
            {"step": "Use honey mask for antibacterial properties", "duration": "15 minutes", "frequency": "2-3 times per week"},
        ],
        "otc_treatments": [
            {"type": "otc", "name": "Benzoyl Peroxide 5% or 10%", "instructions": "Apply thin layer to affected areas once daily, increase to twice if tolerated", "duration": "8-12 weeks", "notes": "May bleach fabrics, use white towels/pillowcases"},
            {"type": "otc", "name": "Adapalene 0.1% Gel (Differin)", "instructions": "Apply pea-sized amount to entire face at night", "duration": "12+ weeks", "notes": "Prescription-strength retinoid available OTC"},
            {"type": "otc", "name": "Salicylic Acid 2% Cleanser", "instructions": "Use morning and evening", "duration": "Ongoing"},
            {"type": "otc", "name": "Azelaic Acid 10%", "instructions": "Apply twice daily to reduce inflammation", "duration": "8-12 weeks"},
            {"type": "prescription", "name": "Topical Antibiotics (Clindamycin)", "instructions": "See dermatologist for prescription if OTC fails", "duration": "As prescribed"},
        ],
        "lifestyle_changes": [
            "Cleanse face gently twice daily",
            "Avoid dairy products and high-glycemic foods",
            "Change pillowcases every 2 days",
            "Reduce stress through meditation or exercise",
            "Get adequate sleep (7-8 hours)",
            "Stay well-hydrated",
            "Avoid tight hats or headbands that trap sweat",
        ],
        "prevention_tips": [
            "Never pop or squeeze inflammatory acne",
            "Use non-comedogenic makeup and skincare",
            "Shower immediately after exercise",
            "Keep hair clean and off face",
            "Disinfect phone screen daily",
        ],
        "do_and_dont": {
            "do": [
                "Start with one active ingredient at a time",
                "Use oil-free moisturizer to prevent dryness",
                "Apply sunscreen daily (acne treatments increase sensitivity)",
                "Be patient - treatments take 6-12 weeks to show results",
                "Take photos to track progress",
            ],
            "dont": [
                "Pick, pop, or squeeze inflamed pimples",
                "Use multiple harsh products simultaneously",
                "Scrub aggressively",
                "Skip moisturizer",
                "Give up treatment before 8 weeks",
            ],
        },
        "when_to_see_doctor": "See dermatologist if: acne covers >25% of face, causes scarring, doesn't improve after 8 weeks of OTC treatment, or causes emotional distress.",
        "expected_recovery": "8-12 weeks with consistent treatment. May require prescription medication for complete clearance.",
    },
    "atopic_dermatitis": {
        "condition": "Atopic Dermatitis (Eczema)",
        "medical_name": "Dermatitis atopica",
        "category": "moderate",
        "severity": "medium",
        "base_confidence": 0.84,
        "description": "Chronic inflammatory skin condition with intense pruritus, erythema, and lichenification. Often associated with asthma/allergies.",
        "recommendation": "Gentle skincare routine, fragrance-free moisturizers, topical corticosteroids as prescribed. Identify and avoid triggers.",
        "icd_code": "L20.9",
        "prevalence": "common",
        "affected_area": 28,
        "diagnostic_profile": {
            "redness": {"min": 0.60, "max": 0.85},
            "texture": {"min": 0.55, "max": 0.80},
            "inflammation": {"min": 0.65, "max": 0.90},
            "asymmetry": {"min": 0.40, "max": 0.70},
            "uniformity": {"min": 0.15, "max": 0.40},
        },
        "home_remedies": [
            {"step": "Take lukewarm oatmeal baths", "duration": "15-20 minutes", "frequency": "Daily during flares", "notes": "Use colloidal oatmeal"},
            {"step": "Apply coconut oil as natural moisturizer", "frequency": "Multiple times daily"},
            {"step": "Use cool, wet compresses on itchy areas", "duration": "10-15 minutes", "frequency": "As needed"},
            {"step": "Apply aloe vera gel to soothe inflammation", "frequency": "After bathing"},
        ],
        "otc_treatments": [
            {"type": "otc", "name": "Hydrocortisone Cream 1%", "instructions": "Apply thin layer to affected areas twice daily", "duration": "Max 7 days without doctor approval", "notes": "For mild flares only"},
            {"type": "otc", "name": "Ceramide-Rich Moisturizer (CeraVe, Cetaphil)", "instructions": "Apply liberally 2-3 times daily, especially after bathing", "duration": "Ongoing"},
            {"type": "otc", "name": "Colloidal Oatmeal Lotion (Aveeno)", "instructions": "Use as daily moisturizer", "duration": "Ongoing"},
            {"type": "otc", "name": "Petroleum Jelly (Vaseline)", "instructions": "Apply to damp skin after bathing to lock in moisture", "duration": "Ongoing"},
            {"type": "prescription", "name": "Prescription Steroid Creams", "instructions": "See dermatologist for stronger treatment if OTC fails", "duration": "As prescribed"},
        ],
        "lifestyle_changes": [
            "Identify and eliminate triggers (foods, fabrics, stress)",
            "Use fragrance-free, hypoallergenic products only",
            "Wear soft, breathable cotton clothing",
            "Keep home humidity at 40-50%",
            "Avoid hot showers/baths",
            "Pat skin dry gently, never rub",
            "Moisturize within 3 minutes after bathing",
            "Keep nails short to prevent scratching damage",
        ],
        "prevention_tips": [
            "Avoid known allergens and irritants",
            "Use gentle, fragrance-free laundry detergent",
            "Rinse clothes twice to remove soap residue",
            "Avoid wool and synthetic fabrics",
            "Manage stress through relaxation techniques",
            "Maintain consistent skincare routine",
        ],
        "do_and_dont": {
            "do": [
                "Moisturize frequently throughout the day",
                "Use gentle, soap-free cleansers",
                "Take short, lukewarm showers",
                "Wear loose-fitting, soft cotton clothes",
                "Keep skin cool and comfortable",
                "Use a humidifier in dry environments",
            ],
            "dont": [
                "Scratch affected areas (use gentle patting instead)",
                "Use harsh soaps or fragranced products",
                "Take long, hot showers",
                "Expose skin to extreme temperatures",
                "Use fabric softeners or dryer sheets",
                "Wear tight or irritating clothing",
            ],
        },
        "when_to_see_doctor": "See dermatologist if: eczema interferes with sleep, shows signs of infection (pus, fever), doesn't improve with OTC treatment, or covers large body areas.",
        "expected_recovery": "Chronic condition requiring ongoing management. Flares typically improve in 1-2 weeks with proper treatment.",
    },
    "contact_dermatitis": {
        "condition": "Contact Dermatitis",
        "medical_name": "Dermatitis contacta",
        "category": "moderate",
        "severity": "medium",
        "base_confidence": 0.77,
        "description": "Inflammatory reaction to external allergens or irritants. May present as acute vesicular or chronic lichenified lesions.",
        "recommendation": "Identify and avoid causative agent. Topical corticosteroids for acute flares. Cool compresses for vesicular lesions.",
        "icd_code": "L25.9",
        "prevalence": "common",
        "affected_area": 18,
        "diagnostic_profile": {
            "redness": {"min": 0.55, "max": 0.85},
            "texture": {"min": 0.45, "max": 0.70},
            "inflammation": {"min": 0.60, "max": 0.85},
            "asymmetry": {"min": 0.45, "max": 0.75},
            "uniformity": {"min": 0.20, "max": 0.45},
        },
    },
    "psoriasis_vulgaris": {
        "condition": "Psoriasis",
        "medical_name": "Psoriasis vulgaris",
        "category": "moderate",
        "severity": "medium",
        "base_confidence": 0.83,
        "description": "Chronic autoimmune condition with well-demarcated, erythematous plaques covered by silvery scales. Affects 2-3% of population.",
        "recommendation": "Requires dermatologist management. Topical treatments, phototherapy, or systemics based on severity. Lifestyle modifications important.",
        "icd_code": "L40.0",
        "prevalence": "common",
        "affected_area": 25,
        "diagnostic_profile": {
            "redness": {"min": 0.65, "max": 0.90},
            "texture": {"min": 0.70, "max": 0.95},
            "inflammation": {"min": 0.55, "max": 0.80},
            "asymmetry": {"min": 0.30, "max": 0.55},
            "uniformity": {"min": 0.20, "max": 0.50},
        },
    },
    "rosacea": {
        "condition": "Rosacea",
        "medical_name": "Rosacea erythematotelangiectatic",
        "category": "moderate",
        "severity": "medium",
        "base_confidence": 0.76,
        "description": "Chronic inflammatory condition of central face with persistent erythema, papules, pustules, and telangiectasias.",
        "recommendation": "Avoid triggers (spicy foods, alcohol, sun). Daily broad-spectrum sunscreen. Topical metronidazole or oral antibiotics.",
        "icd_code": "L71.9",
        "prevalence": "common",
        "affected_area": 15,
        "diagnostic_profile": {
            "redness": {"min": 0.70, "max": 0.95},
            "texture": {"min": 0.40, "max": 0.65},
            "inflammation": {"min": 0.60, "max": 0.85},
            "asymmetry": {"min": 0.25, "max": 0.50},
            "uniformity": {"min": 0.30, "max": 0.55},
        },
    },
    "seborrheic_dermatitis": {
        "condition": "Seborrheic Dermatitis",
        "medical_name": "Dermatitis seborrhoica",
        "category": "moderate",
        "severity": "medium",
        "base_confidence": 0.80,
        "description": "Chronic inflammatory condition affecting sebaceous gland-rich areas. Associated with Malassezia yeast overgrowth.",
        "recommendation": "Antifungal shampoos (ketoconazole, selenium sulfide). Topical antifungals. Stress management and good hygiene.",
        "icd_code": "L21.9",
        "prevalence": "common",
        "affected_area": 20,
        "diagnostic_profile": {
            "redness": {"min": 0.50, "max": 0.75},
            "texture": {"min": 0.55, "max": 0.80},
            "inflammation": {"min": 0.45, "max": 0.70},
            "asymmetry": {"min": 0.30, "max": 0.55},
            "uniformity": {"min": 0.25, "max": 0.50},
        },
    },

    # Serious/High-risk (high severity)
    "basal_cell_carcinoma": {
        "condition": "Suspected Basal Cell Carcinoma",
        "medical_name": "Carcinoma basocellulare (suspected)",
        "category": "serious",
        "severity": "high",
        "base_confidence": 0.72,
        "description": "Most common skin cancer. Pearly, nodular lesion with rolled borders and central ulceration. Slow-growing but locally destructive.",
        "recommendation": "URGENT: Schedule dermatologist evaluation within 1-2 weeks. Likely requires biopsy and surgical removal if confirmed.",
        "icd_code": "C44.91",
        "prevalence": "uncommon",
        "affected_area": 8,
        "diagnostic_profile": {
            "redness": {"min": 0.30, "max": 0.55},
            "texture": {"min": 0.60, "max": 0.85},
            "inflammation": {"min": 0.25, "max": 0.50},
            "asymmetry": {"min": 0.65, "max": 0.95},
            "uniformity": {"min": 0.10, "max": 0.35},
        },
    },
    "squamous_cell_carcinoma": {
        "condition": "Suspected Squamous Cell Carcinoma",
        "medical_name": "Carcinoma spinocellulare (suspected)",
        "category": "serious",
        "severity": "high",
        "base_confidence": 0.69,
        "description": "Second most common skin cancer. Scaly, hyperkeratotic lesion often on sun-exposed areas. Potential for metastasis.",
        "recommendation": "URGENT: Immediate dermatologist consultation required. Biopsy and staging necessary. May require multidisciplinary care.",
        "icd_code": "C44.92",
        "prevalence": "uncommon",
        "affected_area": 12,
        "diagnostic_profile": {
            "redness": {"min": 0.40, "max": 0.65},
            "texture": {"min": 0.75, "max": 1.00},
            "inflammation": {"min": 0.35, "max": 0.60},
            "asymmetry": {"min": 0.70, "max": 1.00},
            "uniformity": {"min": 0.05, "max": 0.30},
        },
    },
    "melanoma_suspected": {
        "condition": "Atypical Pigmented Lesion (Melanoma Risk)",
        "medical_name": "Naevus atypicus - rule out melanoma",
        "category": "serious",
        "severity": "high",
        "base_confidence": 0.68,
        "description": "Pigmented lesion with concerning ABCDE criteria features. Requires immediate professional evaluation to rule out melanoma.",
        "recommendation": "URGENT: See dermatologist within 24-48 hours. Do not delay. Dermoscopy and potential biopsy required immediately.",
        "icd_code": "D22.9",
        "prevalence": "rare",
        "affected_area": 6,
        "diagnostic_profile": {
            "redness": {"min": 0.25, "max": 0.50},
            "texture": {"min": 0.45, "max": 0.70},
            "inflammation": {"min": 0.20, "max": 0.45},
            "asymmetry": {"min": 0.78, "max": 1.00},
            "uniformity": {"min": 0.00, "max": 0.25},
        },
    },
    "severe_cellulitis": {
        "condition": "Severe Skin Infection",
        "medical_name": "Cellulitis gravis",
        "category": "serious",
        "severity": "high",
        "base_confidence": 0.74,
        "description": "Deep bacterial skin infection with significant erythema, warmth, swelling, and systemic symptoms. Potential for sepsis.",
        "recommendation": "URGENT: Seek immediate medical attention or emergency care. May require IV antibiotics and hospitalization.",
        "icd_code": "L03.90",
        "prevalence": "uncommon",
        "affected_area": 35,
        "diagnostic_profile": {
            "redness": {"min": 0.82, "max": 1.00},
            "texture": {"min": 0.65, "max": 0.90},
            "inflammation": {"min": 0.88, "max": 1.00},
            "asymmetry": {"min": 0.45, "max": 0.75},
            "uniformity": {"min": 0.05, "max": 0.30},
        },
    },
}

# Loaded once, read-only for the process lifetime. Table order is the
# tie-break order when two conditions score the same.
SKIN_CONDITIONS: Dict[str, ConditionRecord] = {
    key: ConditionRecord(key=key, **info) for key, info in SKIN_CONDITION_TABLE.items()
}

HEALTHY_CONDITION = "healthy_skin"

# Candidates for the inflammatory fallback, in rule order.
INFLAMMATORY_CONDITIONS = [
    "inflammatory_acne",
    "atopic_dermatitis",
    "contact_dermatitis",
    "psoriasis_vulgaris",
    "rosacea",
    "seborrheic_dermatitis",
]

SERIOUS_CONDITIONS = {
    key for key, record in SKIN_CONDITIONS.items() if record.category == "serious"
}
