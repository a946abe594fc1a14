#!/usr/bin/env python3
"""
Generate a catalog file with deterministic random cars.

Features:
- Deterministic: fixed seed → same catalog every run
- Idempotent: overwrites the output file
- Realism-lite: prices correlated with year + brand band, km with age

Usage:
    python scripts/seed_catalog.py                 # writes catalog.json
    python scripts/seed_catalog.py path/to/cars.json
    CARBAY_CATALOG_PATH=path/to/cars.json uvicorn carbay.entrypoints.http.app:app
"""

from __future__ import annotations

import random
import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from carbay.domain.car import FUEL_TYPES, TRANSMISSIONS
from carbay.infra.serialization import CAR_LIST, CarRecord


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_CARS = 40
CURRENT_YEAR = 2024
DEFAULT_OUTPUT = Path("catalog.json")


# ==============================================================================
# Indian Market Car Data
# ==============================================================================

# Brand bands with base prices in INR
BRANDS = {
    "economy": {
        "brands": ["Maruti Suzuki", "Tata", "Renault"],
        "base_price_min": 450_000,
        "base_price_max": 900_000,
    },
    "mid_range": {
        "brands": ["Hyundai", "Honda", "Kia", "Mahindra", "Toyota"],
        "base_price_min": 900_000,
        "base_price_max": 2_200_000,
    },
    "premium": {
        "brands": ["BMW", "Mercedes-Benz", "Audi"],
        "base_price_min": 3_500_000,
        "base_price_max": 7_000_000,
    },
}

MODELS_BY_BRAND = {
    "Maruti Suzuki": ["Swift", "Baleno", "Dzire", "Brezza"],
    "Tata": ["Nexon", "Punch", "Harrier", "Altroz"],
    "Renault": ["Kwid", "Kiger", "Triber"],
    "Hyundai": ["i20", "Creta", "Verna", "Venue"],
    "Honda": ["City", "Amaze", "Elevate"],
    "Kia": ["Seltos", "Sonet", "Carens"],
    "Mahindra": ["XUV700", "Scorpio-N", "Thar"],
    "Toyota": ["Innova Crysta", "Fortuner", "Glanza"],
    "BMW": ["3 Series", "X1", "5 Series"],
    "Mercedes-Benz": ["C-Class", "GLA", "E-Class"],
    "Audi": ["A4", "Q3", "Q5"],
}

OWNERSHIPS = ["1st Owner", "2nd Owner", "3rd Owner"]
COLORS = ["Pearl White", "Phantom Black", "Lunar Silver", "Fiery Red", "Teal Blue"]
FEATURES = [
    "Touchscreen",
    "Rear Camera",
    "Sunroof",
    "Cruise Control",
    "Wireless Charging",
    "Ventilated Seats",
    "Dual Airbags",
    "Alloy Wheels",
]
LOCATIONS = ["Mumbai", "Delhi", "Bengaluru", "Pune", "Chennai", "Hyderabad", "Kolkata", "Jaipur"]
IMAGE = "https://images.unsplash.com/photo-1549317661-bd32c8ce0db2?w=800"


# ==============================================================================
# Price Calculation with Realism
# ==============================================================================


def calculate_price(brand: str, year: int) -> int:
    """
    Price from brand band and age.

    - ~10% depreciation per year, capped at 70%
    - ±10% noise
    - Rounded to the nearest 5,000
    """
    band = next(
        (data for data in BRANDS.values() if brand in data["brands"]),
        BRANDS["mid_range"],
    )
    base_price = random.randint(band["base_price_min"], band["base_price_max"])

    years_old = max(0, CURRENT_YEAR - year)
    depreciation = min(0.10 * years_old, 0.70)
    price = base_price * (1 - depreciation) * random.uniform(0.90, 1.10)

    return max(int(round(price / 5000)) * 5000, 100_000)


# ==============================================================================
# Catalog Generation
# ==============================================================================


def generate_car(index: int) -> CarRecord:
    """Generate a single random car with realistic data."""
    band = random.choice(list(BRANDS))
    brand = random.choice(BRANDS[band]["brands"])
    model = random.choice(MODELS_BY_BRAND[brand])

    # Year: 2015-2024 (weighted toward newer)
    year = random.choices(
        range(2015, 2025),
        weights=[1, 1, 2, 2, 3, 3, 4, 5, 6, 7],
        k=1,
    )[0]

    years_old = CURRENT_YEAR - year
    km_driven = random.randint(1_000, max(5_000, years_old * 15_000))

    fuel_type = random.choices(FUEL_TYPES, weights=[6, 3, 1 if year >= 2021 else 0, 1], k=1)[0]
    transmission = random.choices(TRANSMISSIONS, weights=[3 if band == "premium" else 1, 1], k=1)[0]
    ownership = OWNERSHIPS[min(years_old // 4, len(OWNERSHIPS) - 1)]
    location = random.choice(LOCATIONS)

    return CarRecord(
        id=f"car-{index:03d}",
        brand=brand,
        model=model,
        year=year,
        price=calculate_price(brand, year),
        fuel_type=fuel_type,
        transmission=transmission,
        km_driven=km_driven,
        ownership=ownership,
        location=location,
        engine="N/A",
        power="N/A",
        mileage="N/A",
        color=random.choice(COLORS),
        features=random.sample(FEATURES, k=random.randint(2, 5)),
        images=[IMAGE],
        description=f"{year} {brand} {model}, {ownership}, {km_driven} km.",
    )


def seed_catalog(output: Path, num_cars: int = NUM_CARS) -> int:
    """Write num_cars generated cars to output. Returns the number written."""
    random.seed(RANDOM_SEED)

    records = [generate_car(index) for index in range(1, num_cars + 1)]
    output.write_bytes(CAR_LIST.dump_json(records, by_alias=True, indent=2))

    return len(records)


def main() -> None:
    output = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_OUTPUT

    print("🚗 Generating car catalog...")
    print(f"   Random seed: {RANDOM_SEED}")

    count = seed_catalog(output)

    print(f"✅ Wrote {count} cars to {output}")


if __name__ == "__main__":
    main()
