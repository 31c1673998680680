"""Resolver package for GraphQL schema.

Resolvers pull the QueryResolver and AuthStub out of the request context,
call the matching catalog operation and convert results to GraphQL types.
"""

# Intentionally empty; functions are defined in sibling modules.
