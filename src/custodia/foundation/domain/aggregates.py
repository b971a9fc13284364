"""Base aggregate class for event-sourced domain objects.

BaseAggregate extends the eventsourcing library's Aggregate class with
multi-tenancy support.

Example:
    >>> from custodia.foundation.domain.aggregates import BaseAggregate
    >>> from eventsourcing.domain import event
    >>>
    >>> class Team(BaseAggregate):
    ...     @event('Created')
    ...     def __init__(self, *, title: str, tenant_id: str):
    ...         self.title = title
    ...         self.tenant_id = tenant_id
"""

from __future__ import annotations

from eventsourcing.domain import Aggregate


class BaseAggregate(Aggregate):
    """Base class for all custodia aggregates.

    Attributes:
        tenant_id: Organizational boundary identifier (required, immutable).
            Must be set by subclass __init__ method. Format: lowercase slug
            (see ``TenantId``).

    Inherited from Aggregate (eventsourcing library):
        id: Aggregate identifier (UUID, auto-generated)
        version: Current version for optimistic concurrency
        created_on: Timestamp of first event
        modified_on: Timestamp of last event

    Usage Pattern:
        Subclasses must:
        1. Decorate __init__ with @event('<Name>')
        2. Set self.tenant_id in __init__
        3. Use @event decorator for all state-changing methods
        4. Keep validation in public ``request_*`` commands and state
           changes in private decorated mutators

    Example:
        >>> class Group(BaseAggregate):
        ...     @event('Created')
        ...     def __init__(self, *, name: str, tenant_id: str):
        ...         self.name = name
        ...         self.tenant_id = tenant_id
        ...         self.members: list[str] = []
        ...
        ...     @event('MemberAdded')
        ...     def add_member(self, member: str) -> None:
        ...         self.members.append(member)
        ...
        >>> group = Group(name='ops', tenant_id='acme-corp')
        >>> group.add_member('alice')
        >>> len(group.collect_events())
        2
    """

    tenant_id: str
