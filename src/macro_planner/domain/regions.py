"""Static region catalog used when composing provider prompts."""

from dataclasses import dataclass
from enum import Enum

from macro_planner.domain.profile import MeatType


class Region(str, Enum):
    """Supported regional contexts."""

    LOCAL = "local"
    WORLDWIDE = "worldwide"


@dataclass(frozen=True)
class RegionProfile:
    """Availability, pricing and forbidden-food context for a region."""

    region: Region
    display_name: str
    context_line: str
    currency_label: str
    currency_instruction: str
    forbidden: tuple[str, ...]
    carbs: tuple[str, ...]
    protein_staples: tuple[str, ...]
    vegetables: tuple[str, ...]
    meat_guidelines: dict[MeatType, str]
    shake_context: str


REGION_PROFILES: dict[Region, RegionProfile] = {
    Region.LOCAL: RegionProfile(
        region=Region.LOCAL,
        display_name="Sri Lanka",
        context_line="CONTEXT: Sri Lanka (Budget Friendly).",
        currency_label="LKR",
        currency_instruction="Estimate costs in Sri Lankan Rupees (LKR).",
        forbidden=(
            "Salmon",
            "Imported Premium Fish Steaks",
            "Broccoli",
            "Olive Oil",
            "Quinoa",
            "Asparagus",
            "Cheese blocks (Cheddar/Mozzarella)",
            "foreign berries",
        ),
        carbs=(
            "White Rice (Samba/Nadu)",
            "Red Rice",
            "String Hoppers",
            "Roast Paan",
            "Manioc",
            "Sweet Potato",
        ),
        protein_staples=(
            "Soya Meat (TVP)",
            "Dhal (Parippu)",
            "Eggs",
            "Yogurt (Highland/Curd)",
        ),
        vegetables=("Murunga", "Beans", "Pumpkin", "Gotukola", "Kankun", "Brinjal"),
        meat_guidelines={
            MeatType.CHICKEN: "Curry or Devilled (include bone-in cuts).",
            MeatType.FISH: (
                "Local Tuna (Kelawalla/Balaya) is recommended. Also Sprats, Salaya."
            ),
            MeatType.BEEF: "Curry or stir-fry (affordable cuts).",
            MeatType.PORK: "Black Pork Curry.",
        },
        shake_context=(
            "Context: Sri Lanka (use local brand names like Highland, Munchee, "
            "Samaposha, Milo if applicable)."
        ),
    ),
    Region.WORLDWIDE: RegionProfile(
        region=Region.WORLDWIDE,
        display_name="Worldwide",
        context_line="CONTEXT: Worldwide / General Western Diet (Budget Friendly).",
        currency_label="USD",
        currency_instruction="Estimate costs in USD ($).",
        forbidden=(
            "Wagyu beef",
            "Truffles",
            "extremely expensive organic specialty brands",
        ),
        carbs=("Rice", "Potatoes", "Oats", "Whole Wheat Bread", "Pasta"),
        protein_staples=(
            "Canned Beans",
            "Lentils",
            "Eggs",
            "Greek Yogurt",
            "Cottage Cheese",
            "Whey Protein",
        ),
        vegetables=(
            "Frozen Veggie Mixes",
            "Spinach",
            "Broccoli (frozen)",
            "Carrots",
        ),
        meat_guidelines={
            MeatType.CHICKEN: "Breast, Thighs, or Rotisserie.",
            MeatType.FISH: "Canned Tuna, Tilapia, Cod, Frozen Fillets.",
            MeatType.BEEF: "Lean Ground Beef, Flank Steak.",
            MeatType.PORK: "Loin Chops, Tenderloin.",
        },
        shake_context=(
            "Context: Worldwide/General (use standard ingredients like Oats, "
            "Peanut Butter, Frozen Fruit)."
        ),
    ),
}


def region_profile(region: Region) -> RegionProfile:
    """Return the catalog entry for a region."""
    return REGION_PROFILES[Region(region)]
