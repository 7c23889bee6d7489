"""Quickstart example for cldrfacts.

This example demonstrates the LocaleFacts accessors over the Babel-built
default dataset and over a small JSON-style dataset.

Note: Examples ignore the 'errors' return value for brevity. In production,
always check errors and log/report malformed identifiers.
"""

from datetime import date, time
from decimal import Decimal

from cldrfacts import LocaleFacts, build_babel_dataset, load_dataset

# Example 1: Currency in use
print("=" * 50)
print("Example 1: Currency In Use")
print("=" * 50)

facts = LocaleFacts(build_babel_dataset(["en-US", "lv-LV", "de-DE", "ru-RU"]))

result, _ = facts.currency("en-US")
print(result)
# Output: USD

result, _ = facts.currency("lv-LV", at=date(2010, 6, 1))
print(result)
# Output: LVL

result, _ = facts.currency_display_name("EUR", "de")
print(result)
# Output: Euro

# Example 2: Plural categories
print("\n" + "=" * 50)
print("Example 2: Plural Categories")
print("=" * 50)

for n in (1, 2, 5, 22, 112):
    category, _ = facts.plural_category("ru-RU", n)
    print(f"ru {n}: {category}")
# Output: one, few, many, few, many

result, _ = facts.plural_category("en", Decimal("1.0"))
print(result)
# Output: other (visible fraction digits)

result, _ = facts.ordinal_category("en-US", 23)
print(result)
# Output: few

# Example 3: Day periods and first day of week
print("\n" + "=" * 50)
print("Example 3: Day Periods")
print("=" * 50)

result, _ = facts.day_period("en-US", time(20, 30))
print(result)
# Output: evening1

result, _ = facts.first_day_of_week("US")
print(result.name if result is not None else None)
# Output: SUNDAY

# Example 4: Region facts from a JSON dataset
print("\n" + "=" * 50)
print("Example 4: Region Facts With World Fallback")
print("=" * 50)

regional = LocaleFacts(
    load_dataset(
        {
            "paper_sizes": [
                {"regions": ["US", "CA"], "value": "US-Letter"},
                {"regions": ["001"], "value": "A4"},
            ],
            "postcode_regexes": [{"regions": ["CA"], "value": r"[A-Z]\d[A-Z] ?\d[A-Z]\d"}],
        }
    )
)

for region in ("CA", "FR"):
    size, _ = regional.paper_size(region)
    print(f"{region}: {size}")
# Output: CA: US-Letter, FR: A4 (from "001")

result, _ = regional.postcode_regex_for_locale("fr-CA")
print(result)
# Output: [A-Z]\d[A-Z] ?\d[A-Z]\d

# Example 5: Malformed identifiers are returned, not raised
print("\n" + "=" * 50)
print("Example 5: Errors")
print("=" * 50)

result, errors = regional.paper_size("")
print(result, [str(error.category) for error in errors])
# Output: None ['identifier']
