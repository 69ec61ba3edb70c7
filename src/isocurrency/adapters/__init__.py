"""Optional adapters over the Currency enumeration.

Each adapter lives in its own module and needs its own extra:

    isocurrency.adapters.pydantic_types   -> pip install isocurrency[pydantic]
    isocurrency.adapters.sqlalchemy_types -> pip install isocurrency[sqlalchemy]

Adapters only use the stable identity of a currency (its alphabetic or
numeric code) and the Currency constructors; they add no state of their own.
Importing this package itself needs no optional dependency.
"""
