"""Organizations bounded context.

Manages the membership of users in organizations, including the rules
that govern removing members.
"""
