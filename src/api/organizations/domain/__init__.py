"""Domain layer for the Organizations bounded context.

Pure business objects: identifiers, roles, actors, the Membership
aggregate and the events recorded when memberships change.
"""
