import re
import logging
from typing import List, Optional
from dermacare.models import IngredientRecord, IngredientResult, IngredientSummary
from dermacare.ingredient_data import INGREDIENT_DATABASE

logger = logging.getLogger(__name__)

_BRACKETS = re.compile(r"[()\[\]]")
_SEPARATORS = re.compile(r"[,\n]+")

GENERIC_RATIONALE = "Common cosmetic ingredient, generally considered safe for most people."

# (required substring, excluded substrings, rationale); first hit wins
PATTERN_RULES = [
    ("alcohol", ("cetyl", "stearyl"),
     "Contains alcohol which may be drying or irritating to sensitive skin."),
    ("acid", ("amino", "fatty"),
     "Acidic ingredient that may cause irritation. Patch test recommended for sensitive skin."),
    ("preservative", (),
     "Preservative ingredient that may cause sensitivity in some individuals."),
    ("antimicrobial", (),
     "Preservative ingredient that may cause sensitivity in some individuals."),
]


def tokenize(text: str) -> List[str]:
    """Lowercase, strip brackets, split on commas/newlines, drop short tokens and duplicates."""
    cleaned = _BRACKETS.sub("", text.lower())
    tokens = []
    seen = set()
    for raw in _SEPARATORS.split(cleaned):
        token = raw.strip()
        if len(token) <= 2 or token in seen:
            continue
        seen.add(token)
        tokens.append(token)
    return tokens


def _display_name(token: str) -> str:
    return token[:1].upper() + token[1:]


class IngredientAnalyzer:
    """Dictionary lookup with substring fallback and pattern heuristics for unknown ingredients."""

    def __init__(self, database=INGREDIENT_DATABASE):
        self.database = database

    def lookup(self, token: str) -> Optional[IngredientRecord]:
        found = self.database.get(token)
        if found:
            return found
        for key, record in self.database.items():
            if key in token or token in key:
                return record
        return None

    def classify_unknown(self, token: str) -> IngredientResult:
        for pattern, excluded, rationale in PATTERN_RULES:
            if pattern in token and not any(word in token for word in excluded):
                return IngredientResult(
                    ingredient=_display_name(token),
                    safe=False,
                    severity="caution",
                    rationale=rationale,
                )
        return IngredientResult(
            ingredient=_display_name(token),
            safe=True,
            severity="safe",
            rationale=GENERIC_RATIONALE,
        )

    def analyze(self, text: str) -> List[IngredientResult]:
        """One result per distinct token, in input order."""
        results = []
        for token in tokenize(text):
            found = self.lookup(token)
            if found:
                results.append(IngredientResult(
                    ingredient=_display_name(token),
                    safe=found.safe,
                    severity=found.severity,
                    rationale=found.rationale,
                ))
            else:
                results.append(self.classify_unknown(token))

        logger.info(f"Analyzed {len(results)} ingredients")
        return results

    def summarize(self, results: List[IngredientResult]) -> IngredientSummary:
        safe_count = sum(1 for r in results if r.safe)
        caution_count = sum(1 for r in results if r.severity == "caution")
        harmful_count = sum(1 for r in results if r.severity == "harmful")

        if harmful_count > 0:
            overall = "harmful"
            summary = (
                f"Warning: This product contains {harmful_count} potentially harmful ingredient(s). "
                "Consider avoiding this product."
            )
        elif caution_count > 0:
            overall = "caution"
            summary = (
                "This product has some ingredients that might cause irritation. "
                f"Found {caution_count} ingredient(s) to watch out for."
            )
        else:
            overall = "safe"
            summary = "This product looks safe for most people! All ingredients are generally well-tolerated."

        return IngredientSummary(
            safe_count=safe_count,
            caution_count=caution_count,
            harmful_count=harmful_count,
            overall_safety=overall,
            summary=summary,
        )


# Global instance
ingredient_analyzer = IngredientAnalyzer()
