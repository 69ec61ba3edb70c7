"""Quickstart example for isocurrency.

This example demonstrates lookups, accessors and classification flags.
Territory names need the babel extra: pip install isocurrency[babel]
"""

from isocurrency import Currency, ParseCurrencyError
from isocurrency.compat import is_babel_available

# Example 1: Lookup by code and by number
print("=" * 50)
print("Example 1: Lookup")
print("=" * 50)

eur = Currency.from_code("EUR")
print(eur.english_name, eur.numeric, eur.symbol, eur.subunit_fraction)
# Output: Euro 978 € 100

print(Currency.from_numeric(978) is eur)
# Output: True

print(Currency.from_code("eur"))
# Output: None

# Example 2: Parsing untrusted input
print("\n" + "=" * 50)
print("Example 2: Parsing")
print("=" * 50)

for value in ["CHF", "ZZZ"]:
    try:
        print(Currency.parse(value).english_name)
    except ParseCurrencyError as e:
        print(f"rejected: {e}")
# Output: Swiss franc
# Output: rejected: 'ZZZ' is not a valid ISO 4217 currency code

# Example 3: Minor units
print("\n" + "=" * 50)
print("Example 3: Minor Units")
print("=" * 50)

for currency in (Currency.USD, Currency.JPY, Currency.KWD, Currency.XAU):
    print(f"{currency.code}: exponent={currency.exponent} fraction={currency.subunit_fraction}")
# Output: USD: exponent=2 fraction=100
# Output: JPY: exponent=0 fraction=1
# Output: KWD: exponent=3 fraction=1000
# Output: XAU: exponent=None fraction=None

# Example 4: Territories
print("\n" + "=" * 50)
print("Example 4: Territories")
print("=" * 50)

print([str(t) for t in Currency.CHF.used_by])
# Output: ['LI', 'CH']

if is_babel_available():
    print([t.name for t in Currency.CHF.used_by])
    # Output: ['Liechtenstein', 'Switzerland']
    print(Currency.CHF.used_by[1].display_name("fr"))
    # Output: Suisse

# Example 5: Classification
print("\n" + "=" * 50)
print("Example 5: Funds, Special Codes, Replacements")
print("=" * 50)

print([c.code for c in Currency if c.is_fund])
print([c.code for c in Currency if c.is_special])
print({c.code: c.superseded_by.code for c in Currency if c.superseded_by is not None})
# Output: {'CUC': 'CUP', 'HRK': 'EUR', 'SLL': 'SLE', 'ZWL': 'ZWG'}
