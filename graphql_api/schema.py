"""Main GraphQL schema factory.

The Query and Mutation classes are defined in app.py next to the
dependency wiring; this module only assembles them.

Usage:
    from graphql_api.schema import create_schema
    schema = create_schema()
"""

import strawberry


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with the energy balance resolvers.

    Returns:
        Configured Strawberry Schema instance
    """
    # Import here to avoid circular dependency
    from app import Mutation, Query

    return strawberry.Schema(
        query=Query,
        mutation=Mutation,
    )
