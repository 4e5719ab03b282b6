from app.repositories.hierarchy.entity import HierarchyRepository

__all__ = ["HierarchyRepository"]
