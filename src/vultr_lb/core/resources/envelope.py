"""
Named JSON envelopes used by the API.

Responses carry a single entity as ``{"<singular>": {...}}`` and a collection as
``{"<plural>": [...], "meta": {...}}``. ``Envelope`` is parameterized over the
entity model so every resource type shares the same wrapping rules.
"""

from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import DecodeError
from .load_balancer import ForwardingRule, LoadBalancer
from .pagination import Meta

T = TypeVar("T", bound=BaseModel)

META_KEY = "meta"


class Envelope(Generic[T]):
    """Maps between an entity model and its singular/plural envelopes."""

    def __init__(self, model: Type[T], singular: str, plural: str):
        self.model = model
        self.singular = singular
        self.plural = plural

    def __repr__(self) -> str:
        return f"Envelope({self.model.__name__}, {self.singular!r}, {self.plural!r})"

    def unwrap(self, payload: Optional[Dict[str, Any]]) -> Optional[T]:
        """Return the entity under the singular key, or None when absent."""
        if not payload or payload.get(self.singular) is None:
            return None
        return self._validate(payload[self.singular], self.singular)

    def unwrap_many(
        self, payload: Optional[Dict[str, Any]]
    ) -> Tuple[List[T], Optional[Meta]]:
        """Return the entities under the plural key, in order, and the meta.

        A missing plural key gives an empty list; a missing meta gives None.
        """
        if not payload:
            return [], None

        items = payload.get(self.plural)
        if items is None:
            items = []
        if not isinstance(items, list):
            raise DecodeError(
                f"Expected a list under '{self.plural}', got {type(items).__name__}",
                {"key": self.plural},
            )

        entities = [self._validate(item, self.plural) for item in items]

        meta = None
        if payload.get(META_KEY) is not None:
            meta = self._validate_meta(payload[META_KEY])

        return entities, meta

    def _validate(self, data: Any, key: str) -> T:
        try:
            return self.model.model_validate(data)
        except PydanticValidationError as e:
            raise DecodeError(
                f"Malformed '{key}' in response: {e}", {"key": key}
            ) from e

    @staticmethod
    def _validate_meta(data: Any) -> Meta:
        try:
            return Meta.model_validate(data)
        except PydanticValidationError as e:
            raise DecodeError(f"Malformed '{META_KEY}' in response: {e}") from e


LOAD_BALANCER_ENVELOPE: Envelope[LoadBalancer] = Envelope(
    LoadBalancer, "load_balancer", "load_balancers"
)
FORWARDING_RULE_ENVELOPE: Envelope[ForwardingRule] = Envelope(
    ForwardingRule, "forwarding_rule", "forwarding_rules"
)
