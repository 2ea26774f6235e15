"""Core building blocks of the energy balance domain."""
