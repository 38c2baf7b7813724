# Cosmetic ingredient safety dictionary.
# Keys are lowercase; lookup order is exact match first, then the first key
# (in table order) contained in the token or containing it.

from typing import Dict

from dermacare.models import IngredientRecord

INGREDIENT_TABLE = {
    # Harmful ingredients
    "parabens": {
        "ingredient": "Parabens",
        "safe": False,
        "severity": "caution",
        "rationale": "Preservatives that may cause skin irritation and allergic reactions in sensitive individuals. Some studies suggest potential hormone disruption.",
    },
    "methylparaben": {
        "ingredient": "Methylparaben",
        "safe": False,
        "severity": "caution",
        "rationale": "A type of paraben preservative that may cause contact dermatitis and has potential endocrine-disrupting properties.",
    },
    "propylparaben": {
        "ingredient": "Propylparaben",
        "safe": False,
        "severity": "caution",
        "rationale": "Paraben preservative linked to skin sensitivity and potential hormonal effects. Avoid if you have sensitive skin.",
    },
    "sulfates": {
        "ingredient": "Sulfates (SLS/SLES)",
        "safe": False,
        "severity": "harmful",
        "rationale": "Harsh detergents that strip natural oils, causing dryness, irritation, and disruption of the skin barrier.",
    },
    "sodium lauryl sulfate": {
        "ingredient": "Sodium Lauryl Sulfate",
        "safe": False,
        "severity": "harmful",
        "rationale": "Aggressive surfactant that can cause significant skin irritation, dryness, and barrier damage, especially with prolonged use.",
    },
    "sodium laureth sulfate": {
        "ingredient": "Sodium Laureth Sulfate",
        "safe": False,
        "severity": "caution",
        "rationale": "Milder than SLS but still potentially irritating, especially for sensitive skin types. Can cause dryness with frequent use.",
    },
    "fragrance": {
        "ingredient": "Fragrance/Parfum",
        "safe": False,
        "severity": "caution",
        "rationale": "Synthetic fragrances are common allergens and irritants. Can trigger contact dermatitis and sensitization reactions.",
    },
    "parfum": {
        "ingredient": "Parfum",
        "safe": False,
        "severity": "caution",
        "rationale": "Fragrance mixture that may contain dozens of undisclosed chemicals, many of which are potential allergens.",
    },
    "alcohol denat": {
        "ingredient": "Alcohol Denat",
        "safe": False,
        "severity": "caution",
        "rationale": "Drying alcohol that can disrupt skin barrier function and cause irritation, especially in higher concentrations.",
    },
    "isopropyl alcohol": {
        "ingredient": "Isopropyl Alcohol",
        "safe": False,
        "severity": "harmful",
        "rationale": "Very drying and irritating alcohol that can severely compromise skin barrier function and cause chemical burns.",
    },
    "formaldehyde": {
        "ingredient": "Formaldehyde",
        "safe": False,
        "severity": "harmful",
        "rationale": "Known carcinogen and strong sensitizer that can cause severe allergic reactions and skin damage.",
    },
    "coal tar": {
        "ingredient": "Coal Tar",
        "safe": False,
        "severity": "harmful",
        "rationale": "Potential carcinogen that can cause skin irritation, photosensitivity, and long-term health concerns.",
    },
    "hydroquinone": {
        "ingredient": "Hydroquinone",
        "safe": False,
        "severity": "harmful",
        "rationale": "Banned in many countries due to potential carcinogenic effects and risk of ochronosis (skin darkening).",
    },

    # Safe and beneficial ingredients
    "hyaluronic acid": {
        "ingredient": "Hyaluronic Acid",
        "safe": True,
        "severity": "safe",
        "rationale": "Excellent humectant that holds up to 1000x its weight in water. Provides deep hydration and plumps skin.",
    },
    "sodium hyaluronate": {
        "ingredient": "Sodium Hyaluronate",
        "safe": True,
        "severity": "safe",
        "rationale": "Smaller molecule form of hyaluronic acid that penetrates deeper into skin. Excellent for hydration and anti-aging.",
    },
    "niacinamide": {
        "ingredient": "Niacinamide",
        "safe": True,
        "severity": "safe",
        "rationale": "Vitamin B3 derivative that regulates oil production, reduces inflammation, and strengthens skin barrier. Well-tolerated by most.",
    },
    "retinol": {
        "ingredient": "Retinol",
        "safe": True,
        "severity": "caution",
        "rationale": "Powerful anti-aging ingredient that increases cell turnover. May cause initial irritation; start slowly and use sunscreen.",
    },
    "retinyl palmitate": {
        "ingredient": "Retinyl Palmitate",
        "safe": True,
        "severity": "safe",
        "rationale": "Gentle form of vitamin A that provides anti-aging benefits with less irritation than retinol. Good for beginners.",
    },
    "glycerin": {
        "ingredient": "Glycerin",
        "safe": True,
        "severity": "safe",
        "rationale": "Excellent humectant that draws moisture to skin. Non-comedogenic and suitable for all skin types including sensitive.",
    },
    "ceramides": {
        "ingredient": "Ceramides",
        "safe": True,
        "severity": "safe",
        "rationale": "Essential lipids that restore and maintain skin barrier function. Particularly beneficial for dry and damaged skin.",
    },
    "peptides": {
        "ingredient": "Peptides",
        "safe": True,
        "severity": "safe",
        "rationale": "Amino acid chains that stimulate collagen production and improve skin texture. Generally well-tolerated anti-aging ingredients.",
    },
    "vitamin c": {
        "ingredient": "Vitamin C",
        "safe": True,
        "severity": "safe",
        "rationale": "Powerful antioxidant that brightens skin, stimulates collagen, and protects against environmental damage.",
    },
    "ascorbic acid": {
        "ingredient": "Ascorbic Acid",
        "safe": True,
        "severity": "caution",
        "rationale": "Pure form of vitamin C with excellent antioxidant properties. May cause irritation in sensitive skin; introduce gradually.",
    },
    "magnesium ascorbyl phosphate": {
        "ingredient": "Magnesium Ascorbyl Phosphate",
        "safe": True,
        "severity": "safe",
        "rationale": "Stable, gentle form of vitamin C that provides antioxidant benefits without irritation. Good for sensitive skin.",
    },
    "zinc oxide": {
        "ingredient": "Zinc Oxide",
        "safe": True,
        "severity": "safe",
        "rationale": "Excellent physical sunscreen that provides broad-spectrum UV protection. Also has anti-inflammatory properties.",
    },
    "titanium dioxide": {
        "ingredient": "Titanium Dioxide",
        "safe": True,
        "severity": "safe",
        "rationale": "Physical sunscreen ingredient that reflects UV rays. Non-irritating and suitable for sensitive skin types.",
    },
    "salicylic acid": {
        "ingredient": "Salicylic Acid",
        "safe": True,
        "severity": "caution",
        "rationale": "Beta hydroxy acid that exfoliates and unclogs pores. Excellent for acne-prone skin but may cause dryness initially.",
    },
    "glycolic acid": {
        "ingredient": "Glycolic Acid",
        "safe": True,
        "severity": "caution",
        "rationale": "Alpha hydroxy acid that exfoliates surface skin cells. Improves texture but increases photosensitivity; use sunscreen.",
    },
    "lactic acid": {
        "ingredient": "Lactic Acid",
        "safe": True,
        "severity": "safe",
        "rationale": "Gentle alpha hydroxy acid that exfoliates and hydrates. Less irritating than glycolic acid, good for sensitive skin.",
    },
    "panthenol": {
        "ingredient": "Panthenol",
        "safe": True,
        "severity": "safe",
        "rationale": "Pro-vitamin B5 that soothes, moisturizes, and helps heal damaged skin. Anti-inflammatory and well-tolerated.",
    },
    "allantoin": {
        "ingredient": "Allantoin",
        "safe": True,
        "severity": "safe",
        "rationale": "Soothing ingredient that promotes cell regeneration and healing. Excellent for sensitive or irritated skin.",
    },
    "squalane": {
        "ingredient": "Squalane",
        "safe": True,
        "severity": "safe",
        "rationale": "Lightweight, non-comedogenic oil that mimics skin natural sebum. Provides hydration without clogging pores.",
    },
    "jojoba oil": {
        "ingredient": "Jojoba Oil",
        "safe": True,
        "severity": "safe",
        "rationale": "Technically a wax ester that closely resembles human sebum. Non-comedogenic and suitable for all skin types.",
    },
    "argan oil": {
        "ingredient": "Argan Oil",
        "safe": True,
        "severity": "safe",
        "rationale": "Rich in vitamin E and fatty acids. Provides nourishment and antioxidant protection without clogging pores.",
    },
    "shea butter": {
        "ingredient": "Shea Butter",
        "safe": True,
        "severity": "safe",
        "rationale": "Natural emollient rich in vitamins A and E. Provides deep moisturization and has anti-inflammatory properties.",
    },

    # Common base ingredients
    "water": {
        "ingredient": "Water/Aqua",
        "safe": True,
        "severity": "safe",
        "rationale": "Universal solvent and base for most skincare products. Essential for hydration and product texture.",
    },
    "aqua": {
        "ingredient": "Aqua",
        "safe": True,
        "severity": "safe",
        "rationale": "Latin term for water. The most common base ingredient in skincare formulations.",
    },
    "dimethicone": {
        "ingredient": "Dimethicone",
        "safe": True,
        "severity": "safe",
        "rationale": "Silicone that forms protective barrier and provides smooth texture. Non-comedogenic and hypoallergenic.",
    },
    "cyclopentasiloxane": {
        "ingredient": "Cyclopentasiloxane",
        "safe": True,
        "severity": "safe",
        "rationale": "Lightweight silicone that gives products smooth application and quick absorption. Generally well-tolerated.",
    },
    "carbomer": {
        "ingredient": "Carbomer",
        "safe": True,
        "severity": "safe",
        "rationale": "Thickening agent that creates gel-like texture. Inert and non-irritating for most skin types.",
    },
    "phenoxyethanol": {
        "ingredient": "Phenoxyethanol",
        "safe": True,
        "severity": "safe",
        "rationale": "Gentle preservative that prevents bacterial growth. Generally well-tolerated alternative to parabens.",
    },
    "tocopherol": {
        "ingredient": "Tocopherol",
        "safe": True,
        "severity": "safe",
        "rationale": "Natural vitamin E that provides antioxidant protection and helps preserve product stability.",
    },
    "caprylic/capric triglyceride": {
        "ingredient": "Caprylic/Capric Triglyceride",
        "safe": True,
        "severity": "safe",
        "rationale": "Lightweight emollient derived from coconut oil. Non-comedogenic and provides smooth skin feel.",
    },
}

INGREDIENT_DATABASE: Dict[str, IngredientRecord] = {
    key: IngredientRecord(**info) for key, info in INGREDIENT_TABLE.items()
}
