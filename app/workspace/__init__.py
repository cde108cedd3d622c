"""
Workspace application.

Holds the entities notifications are about (groups, repositories,
memberships, docs, issues and comments) together with the read-ability
check consulted before a notification is recorded.

Usage:
    from workspace.models import Group, Repository, Member
    from workspace.abilities import can_read
"""
