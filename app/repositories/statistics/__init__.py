from app.repositories.statistics.stats import StatsRepository

__all__ = ["StatsRepository"]
