"""Hierarchy repository - regions, districts, circuits, schools."""

from loguru import logger

from app.models.statistics import EntityType
from app.repositories.base import BaseRepository

_DETAIL_QUERIES = {
    EntityType.REGION: """
        SELECT id, name FROM regions WHERE id = ?
    """,
    EntityType.DISTRICT: """
        SELECT d.id, d.name, d.region_id AS regionId, r.name AS regionName
        FROM districts d
        LEFT JOIN regions r ON d.region_id = r.id
        WHERE d.id = ?
    """,
    EntityType.CIRCUIT: """
        SELECT c.id, c.name, c.district_id AS districtId, d.name AS districtName,
               c.region_id AS regionId
        FROM circuits c
        LEFT JOIN districts d ON c.district_id = d.id
        WHERE c.id = ?
    """,
    EntityType.SCHOOL: """
        SELECT s.id, s.name, s.circuit_id AS circuitId, c.name AS circuitName,
               s.district_id AS districtId, s.region_id AS regionId
        FROM schools s
        LEFT JOIN circuits c ON s.circuit_id = c.id
        WHERE s.id = ?
    """,
}


class HierarchyRepository(BaseRepository):
    """Repository for administrative hierarchy lookups."""

    def get_entity(self, entity_type: EntityType, entity_id: int) -> dict | None:
        """Entity details with parent names, None if unknown."""
        rows = self.fetchdicts(_DETAIL_QUERIES[entity_type], [entity_id])
        return rows[0] if rows else None

    def count_children(self, entity_type: EntityType, entity_id: int) -> dict[str, int]:
        """Number of entities at each level below: {"circuitCount": n, ...}."""
        counts = {}
        for child in entity_type.children:
            row = self.fetchone(
                f"SELECT COUNT(*) FROM {child.table} WHERE {entity_type.column} = ?",
                [entity_id],
            )
            counts[f"{child.value}Count"] = int(row[0]) if row else 0
        logger.debug("count_children({}, {}): {}", entity_type.value, entity_id, counts)
        return counts
