"""GraphQL resolvers grouped by domain."""
