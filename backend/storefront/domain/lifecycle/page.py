from typing import Dict, FrozenSet, Tuple

from storefront.domain.invariants.exceptions import IllegalTransition

PAGE_STATUSES: Tuple[str, ...] = ("draft", "published", "archived")

# Archived pages come back as drafts before they can be published again
PAGE_TRANSITIONS: Dict[str, FrozenSet[str]] = {
    "draft": frozenset({"published", "archived"}),
    "published": frozenset({"draft", "archived"}),
    "archived": frozenset({"draft"}),
}


def allowed_transitions(status: str) -> Tuple[str, ...]:
    return tuple(s for s in PAGE_STATUSES if s in PAGE_TRANSITIONS.get(status, ()))


def assert_page_transition(*, from_status: str, to_status: str) -> None:
    if to_status not in PAGE_TRANSITIONS.get(from_status, ()):
        raise IllegalTransition(
            f"A {from_status} page cannot move to {to_status}"
        )
