from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from orbit_viewer.objects.body import Body
from orbit_viewer.physics.orbit import OrbitalElements

logger = logging.getLogger(__name__)


@dataclass
class BodyCatalog:
    """
    Selectable bodies plus the current selection.
    Just data + lookup, no stepping logic.
    """
    name: str
    bodies: Dict[str, Body] = field(default_factory=dict)
    selected_id: Optional[str] = None

    def add_body(self, body: Body) -> None:
        if body.body_id in self.bodies:
            raise ValueError(f"Duplicate body ID: {body.body_id}")
        self.bodies[body.body_id] = body

    def add_records(self, records: Iterable[Mapping[str, Any]], id_field: str = "object",
                    name_field: str = "object_name") -> List[Body]:
        """
        Add one body per element-table row. Rows without a name reuse the id.
        """
        added = []
        for record in records:
            body_id = str(record.get(id_field, "")).strip()
            name = str(record.get(name_field) or body_id)
            body = Body(body_id=body_id, name=name, elements=OrbitalElements.from_record(record))
            self.add_body(body)
            added.append(body)
        logger.info("Catalog %s: added %d bodies", self.name, len(added))
        return added

    def get(self, body_id: str) -> Body:
        try:
            return self.bodies[body_id]
        except KeyError:
            raise KeyError(f"Unknown body ID: {body_id}") from None

    def body_list(self) -> List[Body]:
        return list(self.bodies.values())

    def select(self, body_id: str) -> Body:
        body = self.get(body_id)
        if body_id != self.selected_id:
            logger.info("Selected body %s (%s)", body.body_id, body.name)
        self.selected_id = body_id
        return body

    def deselect(self) -> None:
        if self.selected_id is not None:
            logger.info("Deselected body %s", self.selected_id)
        self.selected_id = None

    @property
    def selected(self) -> Optional[Body]:
        if self.selected_id is None:
            return None
        return self.bodies[self.selected_id]
