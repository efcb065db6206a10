"""Event handler failure policy.

Controls what EventDispatcher.notify does when a handler raises.

Policies:
- PROPAGATE: First failure is logged and re-raised; remaining handlers
  for that notification are skipped.
- ISOLATE: Every failure is logged and delivery continues; once all
  handlers ran, the collected failures are raised together as
  EventDispatchError.
"""

from enum import Enum


class HandlerFailurePolicy(str, Enum):
    """How the dispatcher reacts to a failing event handler."""

    PROPAGATE = "propagate"
    ISOLATE = "isolate"
