"""Domain layer: enums, exceptions, and entities. No infrastructure imports."""
