"""GraphQL API (Strawberry) for the energy balance backend."""
