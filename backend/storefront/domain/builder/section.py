from __future__ import annotations

import copy
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping


def generate_section_id() -> str:
    return f"sec_{uuid.uuid4().hex[:16]}"


@dataclass
class Section:
    """
    One configurable block of a page.

    ``type`` and ``config`` belong to the editor/renderer registered for the
    type; nothing in the builder looks inside them.
    """

    id: str
    type: str
    position: int = 0
    visible: bool = True
    config: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Section":
        """Raises ``ValueError`` when ``data`` has no usable ``type``."""
        section_type = data.get("type")
        if not isinstance(section_type, str) or not section_type:
            raise ValueError("section has no type")

        position = data.get("position", 0)
        return cls(
            id=str(data.get("id") or generate_section_id()),
            type=section_type,
            position=position if isinstance(position, int) else 0,
            visible=bool(data.get("visible", True)),
            config=copy.deepcopy(dict(data.get("config") or {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "position": self.position,
            "visible": self.visible,
            "config": copy.deepcopy(self.config),
        }
